"""Convert DocC block and inline content to Markdown."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from docc2md.options import DEFAULT_OPTIONS, RenderOptions
from docc2md.references import ReferenceTable, resolve_title, resolve_url
from docc2md.schemas import (
    Aside,
    BlockNode,
    CodeListing,
    CodeVoice,
    Emphasis,
    Heading,
    InlineNode,
    ListItem,
    OrderedList,
    Paragraph,
    Reference,
    Strong,
    Text,
    UnorderedList,
    coerce_block,
    coerce_inline,
    coerce_record,
)

logger = logging.getLogger(__name__)

CONTENT_TOO_DEEP = "[Content too deeply nested]"
INLINE_TOO_DEEP = "[Inline content too deeply nested]"

_CALLOUTS = {
    "warning": "WARNING",
    "important": "IMPORTANT",
    "caution": "CAUTION",
    "tip": "TIP",
    "deprecated": "WARNING",
}


def callout_for_style(style: str | None) -> str:
    """Map an aside style to a GitHub callout type."""
    return _CALLOUTS.get((style or "").lower(), "NOTE")


def render_blocks(
    nodes: Sequence[Any],
    refs: ReferenceTable,
    depth: int = 0,
    *,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render a sequence of block nodes.

    Each rendered block ends with a blank line. Past ``max_block_depth`` the
    whole sequence is replaced by a sentinel; callers keep whatever they
    already produced.
    """
    if depth > options.max_block_depth:
        logger.warning(
            "Maximum block nesting depth (%d) reached", options.max_block_depth
        )
        return CONTENT_TOO_DEEP

    return "".join(
        _render_block(coerce_block(raw), refs, depth, options) for raw in nodes
    )


def _render_block(
    node: BlockNode, refs: ReferenceTable, depth: int, options: RenderOptions
) -> str:
    if isinstance(node, Heading):
        level = max(1, min(node.level or 2, 6))
        return f"{'#' * level} {node.text or ''}\n\n"

    if isinstance(node, Paragraph):
        if not node.inline_content:
            return ""
        # Inline nesting is measured per paragraph.
        text = render_inline(node.inline_content, refs, 0, options=options)
        return f"{text}\n\n"

    if isinstance(node, CodeListing):
        return _fence(_code_text(node.code), node.syntax or options.default_code_syntax)

    if isinstance(node, (UnorderedList, OrderedList)):
        return _render_list(node, refs, depth, options)

    if isinstance(node, Aside):
        callout = callout_for_style(node.style)
        body = (
            render_blocks(node.content, refs, depth + 1, options=options)
            if node.content
            else ""
        )
        quoted = body.strip().replace("\n", "\n> ")
        return f"> [!{callout}]\n> {quoted}\n\n"

    logger.debug("Skipping unsupported block node %r", node.type)
    return ""


def _render_list(
    node: UnorderedList | OrderedList,
    refs: ReferenceTable,
    depth: int,
    options: RenderOptions,
) -> str:
    if not node.items:
        return ""

    ordered = isinstance(node, OrderedList)
    lines: list[str] = []
    for number, raw in enumerate(node.items, start=1):
        item = coerce_record(ListItem, raw) or ListItem()
        text = render_blocks(item.content, refs, depth + 1, options=options)
        text = text.removesuffix("\n\n")
        marker = f"{number}." if ordered else "-"
        lines.append(f"{marker} {text}\n")
    return "".join(lines) + "\n"


def _code_text(code: str | list[str] | None) -> str:
    if isinstance(code, list):
        return "\n".join(code)
    return code or ""


def _fence(code: str, syntax: str) -> str:
    return f"```{syntax}\n{code}\n```\n\n"


def render_inline(
    nodes: Sequence[Any],
    refs: ReferenceTable,
    depth: int = 0,
    *,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render a sequence of inline spans without a trailing newline."""
    if depth > options.max_inline_depth:
        logger.warning(
            "Maximum inline nesting depth (%d) reached", options.max_inline_depth
        )
        return INLINE_TOO_DEEP

    return "".join(
        _render_span(coerce_inline(raw), refs, depth, options) for raw in nodes
    )


def _render_span(
    node: InlineNode, refs: ReferenceTable, depth: int, options: RenderOptions
) -> str:
    if isinstance(node, Text):
        return node.text or ""

    if isinstance(node, CodeVoice):
        return f"`{node.code or ''}`"

    if isinstance(node, Reference):
        override = node.title or node.text
        if not node.identifier:
            return f"[{override or ''}]()"
        title = resolve_title(node.identifier, refs, override)
        return f"[{title}]({resolve_url(node.identifier, refs)})"

    if isinstance(node, Emphasis):
        return f"*{render_inline(node.inline_content, refs, depth + 1, options=options)}*"

    if isinstance(node, Strong):
        return f"**{render_inline(node.inline_content, refs, depth + 1, options=options)}**"

    # UnknownInline
    return node.text or ""
