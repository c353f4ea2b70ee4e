"""Block and inline node models for DocC render JSON.

Nodes are discriminated by their ``type`` key. Every field is lenient: a value
of the wrong shape collapses to the field's empty value instead of failing
validation. Child collections stay raw and are coerced one level at a time by
the walkers, so coercion never runs deeper than rendering does.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    WrapValidator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _fallback_to(factory: Callable[[], Any]) -> WrapValidator:
    def validate(value: Any, handler: Callable[[Any], Any]) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return factory()

    return WrapValidator(validate)


def _none() -> None:
    return None


NoneOnError = _fallback_to(_none)

OptStr = Annotated[Optional[str], NoneOnError]
OptInt = Annotated[Optional[int], NoneOnError]
OptBool = Annotated[Optional[bool], NoneOnError]
RawList = Annotated[list[Any], _fallback_to(list)]
OptRawList = Annotated[Optional[list[Any]], NoneOnError]
RawMapping = Annotated[dict[str, Any], _fallback_to(dict)]


def _code_lines(value: Any) -> Any:
    # Keep the listing when single lines are malformed: numbers become text,
    # anything else an empty line.
    if not isinstance(value, (list, tuple)):
        return value
    lines: list[str] = []
    for line in value:
        if isinstance(line, str):
            lines.append(line)
        elif isinstance(line, (int, float)) and not isinstance(line, bool):
            lines.append(str(line))
        else:
            lines.append("")
    return lines


class DocNode(BaseModel):
    """Base for every record read from the documentation tree."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# Block nodes


class Heading(DocNode):
    type: Literal["heading"] = "heading"
    level: OptInt = None
    text: OptStr = None
    anchor: OptStr = None


class Paragraph(DocNode):
    type: Literal["paragraph"] = "paragraph"
    inline_content: RawList = Field(default_factory=list)


class CodeListing(DocNode):
    type: Literal["codeListing"] = "codeListing"
    code: Annotated[Union[str, list[str], None], NoneOnError, BeforeValidator(_code_lines)] = None
    syntax: OptStr = None


class UnorderedList(DocNode):
    type: Literal["unorderedList"] = "unorderedList"
    items: RawList = Field(default_factory=list)


class OrderedList(DocNode):
    type: Literal["orderedList"] = "orderedList"
    items: RawList = Field(default_factory=list)


class Aside(DocNode):
    type: Literal["aside"] = "aside"
    style: OptStr = None
    name: OptStr = None
    content: RawList = Field(default_factory=list)


class UnknownBlock(DocNode):
    """Any block kind the walker does not render."""

    type: OptStr = None


class ListItem(DocNode):
    content: RawList = Field(default_factory=list)


# Inline nodes


class Text(DocNode):
    type: Literal["text"] = "text"
    text: OptStr = None


class CodeVoice(DocNode):
    type: Literal["codeVoice"] = "codeVoice"
    code: OptStr = None


class Reference(DocNode):
    type: Literal["reference"] = "reference"
    identifier: OptStr = None
    title: OptStr = None
    text: OptStr = None
    is_active: OptBool = None


class Emphasis(DocNode):
    type: Literal["emphasis"] = "emphasis"
    inline_content: RawList = Field(default_factory=list)


class Strong(DocNode):
    type: Literal["strong"] = "strong"
    inline_content: RawList = Field(default_factory=list)


class UnknownInline(DocNode):
    """Any inline kind without a dedicated renderer; keeps its literal text."""

    type: OptStr = None
    text: OptStr = None


BLOCK_KINDS = frozenset(
    {"heading", "paragraph", "codeListing", "unorderedList", "orderedList", "aside"}
)
INLINE_KINDS = frozenset({"text", "codeVoice", "reference", "emphasis", "strong"})


def _node_kind(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("type")
    return getattr(value, "type", None)


def _block_tag(value: Any) -> str:
    kind = _node_kind(value)
    return kind if isinstance(kind, str) and kind in BLOCK_KINDS else "unknown"


def _inline_tag(value: Any) -> str:
    kind = _node_kind(value)
    return kind if isinstance(kind, str) and kind in INLINE_KINDS else "unknown"


BlockNode = Annotated[
    Union[
        Annotated[Heading, Tag("heading")],
        Annotated[Paragraph, Tag("paragraph")],
        Annotated[CodeListing, Tag("codeListing")],
        Annotated[UnorderedList, Tag("unorderedList")],
        Annotated[OrderedList, Tag("orderedList")],
        Annotated[Aside, Tag("aside")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]

InlineNode = Annotated[
    Union[
        Annotated[Text, Tag("text")],
        Annotated[CodeVoice, Tag("codeVoice")],
        Annotated[Reference, Tag("reference")],
        Annotated[Emphasis, Tag("emphasis")],
        Annotated[Strong, Tag("strong")],
        Annotated[UnknownInline, Tag("unknown")],
    ],
    Discriminator(_inline_tag),
]

_block_adapter: TypeAdapter[BlockNode] = TypeAdapter(BlockNode)
_inline_adapter: TypeAdapter[InlineNode] = TypeAdapter(InlineNode)


def _as_input(raw: Any) -> Any:
    if isinstance(raw, Mapping) and not isinstance(raw, dict):
        return dict(raw)
    return raw


def coerce_block(raw: Any) -> BlockNode:
    """Coerce one raw block into its variant, or ``UnknownBlock`` when unusable."""
    if not isinstance(raw, (Mapping, BaseModel)):
        return UnknownBlock()
    try:
        return _block_adapter.validate_python(_as_input(raw))
    except ValidationError as exc:
        logger.debug("Unreadable block node treated as unknown: %s", exc)
        return UnknownBlock()


def coerce_inline(raw: Any) -> InlineNode:
    """Coerce one raw inline span into its variant, or ``UnknownInline``."""
    if not isinstance(raw, (Mapping, BaseModel)):
        return UnknownInline()
    try:
        return _inline_adapter.validate_python(_as_input(raw))
    except ValidationError as exc:
        logger.debug("Unreadable inline node treated as unknown: %s", exc)
        return UnknownInline()


def coerce_record(model: type[RecordT], raw: Any) -> RecordT | None:
    """Validate a flat record, returning None for anything that is not one."""
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        return None
    try:
        return model.model_validate(_as_input(raw))
    except ValidationError as exc:
        logger.debug("Skipping malformed %s: %s", model.__name__, exc)
        return None
