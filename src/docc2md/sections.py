"""Section renderers for declarations, parameters, link lists and index trees."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from docc2md.markdown import render_blocks
from docc2md.options import DEFAULT_OPTIONS, RenderOptions
from docc2md.references import ReferenceTable, link_details
from docc2md.schemas import (
    Declaration,
    IndexItem,
    LinkSection,
    Parameter,
    Token,
    coerce_record,
)

_GROUP_MARKER = "groupMarker"


def render_declarations(
    declarations: Iterable[Any], *, options: RenderOptions = DEFAULT_OPTIONS
) -> str:
    """Fence each declaration's concatenated token text as code."""
    blocks: list[str] = []
    for raw in declarations:
        declaration = coerce_record(Declaration, raw)
        if declaration is None or declaration.tokens is None:
            continue
        code = "".join(
            token.text or ""
            for token in (coerce_record(Token, t) for t in declaration.tokens)
            if token is not None
        ).strip()
        blocks.append(f"```{options.default_code_syntax}\n{code}\n```\n\n")
    return "".join(blocks)


def render_parameters(
    parameters: list[Any],
    refs: ReferenceTable,
    *,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render the Parameters section: a bold name followed by its description."""
    if not parameters:
        return ""

    markdown = "## Parameters\n\n"
    for raw in parameters:
        parameter = coerce_record(Parameter, raw)
        if parameter is None:
            continue
        if parameter.name:
            markdown += f"**{parameter.name}**\n\n"
        if parameter.content:
            text = render_blocks(parameter.content, refs, 0, options=options)
            markdown += f"{text}\n\n"
    return markdown


def render_link_sections(sections: Iterable[Any], refs: ReferenceTable) -> str:
    """Render topic, see-also or relationship sections as link lists.

    Identifiers are listed in source order; duplicates are kept.
    """
    markdown = ""
    for raw in sections:
        section = coerce_record(LinkSection, raw)
        if section is None or not section.title or not section.identifiers:
            continue
        markdown += f"## {section.title}\n\n"
        for identifier in section.identifiers:
            title, url, abstract = link_details(identifier, refs)
            markdown += f"- [{title}]({url})"
            if abstract:
                markdown += f" {abstract}"
            markdown += "\n"
        markdown += "\n"
    return markdown


def render_index_tree(children: list[Any]) -> str:
    """Render the navigation index of a framework or collection root page."""
    return _render_index_level(children, heading_level=2)


def _render_index_level(children: list[Any], heading_level: int) -> str:
    # No depth limit here: index trees come from a trusted, size-bounded source.
    markdown = ""
    for position, raw in enumerate(children):
        item = coerce_record(IndexItem, raw)
        if item is None:
            continue

        if item.type == _GROUP_MARKER:
            if position > 0:
                markdown += "\n"
            hashes = "#" * min(heading_level, 6)
            markdown += f"{hashes} {item.title or ''}\n\n"
        elif item.path and item.title:
            beta = " **Beta**" if item.beta else ""
            markdown += f"- [{item.title}]({item.path}){beta}\n"
            if item.children is not None:
                markdown += "\n"
                markdown += _render_index_level(item.children, heading_level + 1)
    return markdown
