"""Document root and section models."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from docc2md.schemas.nodes import (
    DocNode,
    NoneOnError,
    OptBool,
    OptRawList,
    OptStr,
    RawList,
    RawMapping,
)


def _only_strings(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


Identifiers = Annotated[list[str], BeforeValidator(_only_strings)]


def _version_text(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


VersionText = Annotated[Optional[str], NoneOnError, BeforeValidator(_version_text)]


class Token(DocNode):
    kind: OptStr = None
    text: OptStr = None


class Declaration(DocNode):
    tokens: OptRawList = None
    languages: Identifiers = Field(default_factory=list)


class Parameter(DocNode):
    name: OptStr = None
    content: RawList = Field(default_factory=list)


class ContentSection(DocNode):
    """A primary content section tagged by ``kind``."""

    kind: OptStr = None
    content: RawList = Field(default_factory=list)
    declarations: RawList = Field(default_factory=list)
    parameters: RawList = Field(default_factory=list)


class LinkSection(DocNode):
    """Topic, see-also or relationship section: a title over identifiers.

    Identifiers keep their source order and duplicates.
    """

    title: OptStr = None
    identifiers: Identifiers = Field(default_factory=list)
    anchor: OptStr = None
    type: OptStr = None


class ReferenceEntry(DocNode):
    title: OptStr = None
    url: OptStr = None
    abstract: RawList = Field(default_factory=list)
    type: OptStr = None
    kind: OptStr = None
    role: OptStr = None


class VariantEntry(DocNode):
    identifier: OptStr = None
    title: OptStr = None
    abstract: RawList = Field(default_factory=list)


class Platform(DocNode):
    name: OptStr = None
    introduced_at: VersionText = None
    beta: OptBool = None


class Metadata(DocNode):
    title: OptStr = None
    role_heading: OptStr = None
    symbol_kind: OptStr = None
    role: OptStr = None
    platforms: RawList = Field(default_factory=list)


class IndexItem(DocNode):
    """Node of a framework or collection index tree."""

    type: OptStr = None
    title: OptStr = None
    path: OptStr = None
    beta: OptBool = None
    external: OptBool = None
    children: OptRawList = None


class InterfaceLanguages(DocNode):
    swift: RawList = Field(default_factory=list)


class DocumentationPage(DocNode):
    """Root of one documentation page as served by the DocC JSON API."""

    metadata: Annotated[Optional[Metadata], NoneOnError] = None
    kind: OptStr = None
    abstract: RawList = Field(default_factory=list)
    primary_content_sections: RawList = Field(default_factory=list)
    topic_sections: RawList = Field(default_factory=list)
    see_also_sections: RawList = Field(default_factory=list)
    relationships_sections: RawList = Field(default_factory=list)
    variants: RawList = Field(default_factory=list)
    references: RawMapping = Field(default_factory=dict)
    interface_languages: Annotated[
        Optional[InterfaceLanguages], NoneOnError
    ] = None
