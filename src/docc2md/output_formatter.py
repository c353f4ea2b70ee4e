"""Assemble a documentation page into a single Markdown document."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from docc2md.config import FOOTER_ATTRIBUTION, FOOTER_DISCLAIMER, TITLE_SUFFIX
from docc2md.markdown import render_blocks
from docc2md.options import DEFAULT_OPTIONS, RenderOptions
from docc2md.references import ReferenceTable, plain_text
from docc2md.schemas import (
    ContentSection,
    DocumentationPage,
    IndexItem,
    Platform,
    Text,
    coerce_record,
)
from docc2md.sections import (
    render_declarations,
    render_index_tree,
    render_link_sections,
    render_parameters,
)
from docc2md.url_utils import url_path_segments

FOOTER = f"\n\n---\n\n{FOOTER_ATTRIBUTION}\n{FOOTER_DISCLAIMER}\n"


def render_document(
    document: DocumentationPage | Mapping[str, Any],
    source_url: str,
    *,
    options: RenderOptions | None = None,
    timestamp: datetime | None = None,
) -> str:
    """Render one documentation page to Markdown.

    Args:
        document: The page tree, either validated or as decoded JSON.
        source_url: URL the page was retrieved from; used for the front
            matter and breadcrumbs only.
        options: Depth limits and code defaults. Uses defaults if None.
        timestamp: Time recorded in the front matter. Defaults to now (UTC).

    Returns:
        Markdown starting with YAML front matter and ending with the footer.
        Malformed input never raises; depth-limited subtrees are replaced by
        sentinel text.
    """
    opts = options or DEFAULT_OPTIONS
    page = as_page(document)
    refs = ReferenceTable.from_page(page)
    metadata = page.metadata

    blocks: list[str] = [
        generate_front_matter(page, source_url, timestamp=timestamp),
        generate_breadcrumbs(source_url),
    ]

    if metadata and metadata.role_heading:
        blocks.append(f"**{metadata.role_heading}**\n\n")

    if metadata and metadata.title:
        blocks.append(f"# {metadata.title}\n\n")

    if metadata:
        blocks.append(_render_platforms(metadata.platforms))

    abstract_text = _abstract_text(page)
    if abstract_text.strip():
        blocks.append(f"> {abstract_text}\n\n")

    sections = [
        section
        for section in (
            coerce_record(ContentSection, raw) for raw in page.primary_content_sections
        )
        if section is not None
    ]
    declarations = _first_of_kind(sections, "declarations")
    if declarations:
        blocks.append(render_declarations(declarations.declarations, options=opts))
    parameters = _first_of_kind(sections, "parameters")
    if parameters:
        blocks.append(render_parameters(parameters.parameters, refs, options=opts))
    for section in sections:
        if section.kind == "content" and section.content:
            blocks.append(render_blocks(section.content, refs, 0, options=opts))

    blocks.append(render_link_sections(page.relationships_sections, refs))
    blocks.append(render_link_sections(page.topic_sections, refs))
    blocks.append(_render_index(page))
    blocks.append(render_link_sections(page.see_also_sections, refs))

    return "".join(blocks).strip() + FOOTER


def as_page(document: Any) -> DocumentationPage:
    """Validate a decoded tree into a page; anything but a mapping is an empty page."""
    if isinstance(document, DocumentationPage):
        return document
    if isinstance(document, Mapping):
        return DocumentationPage.model_validate(dict(document))
    return DocumentationPage()


def generate_front_matter(
    page: DocumentationPage,
    source_url: str,
    *,
    timestamp: datetime | None = None,
) -> str:
    """Generate the YAML front matter block."""
    fields: dict[str, str] = {}

    title = _front_matter_title(page)
    if title:
        fields["title"] = title

    description = _abstract_text(page).strip()
    if description:
        fields["description"] = description

    fields["source"] = source_url
    fields["timestamp"] = _format_timestamp(timestamp or datetime.now(timezone.utc))

    lines = "\n".join(f"{key}: {value}" for key, value in fields.items())
    return f"---\n{lines}\n---\n\n"


def generate_breadcrumbs(source_url: str) -> str:
    """Build the navigation line for pages below a framework root.

    ``.../documentation/swift/array/append`` yields links to the framework
    and to every intermediate segment; the page itself is not linked.
    """
    parts = url_path_segments(source_url)
    if len(parts) < 3:
        return ""

    framework = parts[1]
    display = framework[:1].upper() + framework[1:]
    breadcrumbs = f"**Navigation:** [{display}](/documentation/{framework})"
    for index in range(2, len(parts) - 1):
        path = "/".join(parts[: index + 1])
        breadcrumbs += f" › [{parts[index]}](/{path})"
    return f"{breadcrumbs}\n\n"


def _front_matter_title(page: DocumentationPage) -> str | None:
    if page.metadata and page.metadata.title:
        return page.metadata.title.replace(TITLE_SUFFIX, "").strip()
    root = _index_root(page)
    if root and root.title:
        return root.title
    return None


def _abstract_text(page: DocumentationPage) -> str:
    return plain_text(
        span
        for span in page.abstract
        if isinstance(span, Text)
        or (isinstance(span, Mapping) and span.get("type") == "text")
    )


def _render_platforms(platforms: list[Any]) -> str:
    labels: list[str] = []
    for raw in platforms:
        platform = coerce_record(Platform, raw)
        if platform is None or not platform.name:
            continue
        label = platform.name
        if platform.introduced_at:
            label += f" {platform.introduced_at}+"
        if platform.beta:
            label += " Beta"
        labels.append(label)
    if not labels:
        return ""
    return f"**Available on:** {', '.join(labels)}\n\n"


def _first_of_kind(sections: list[ContentSection], kind: str) -> ContentSection | None:
    return next((section for section in sections if section.kind == kind), None)


def _index_root(page: DocumentationPage) -> IndexItem | None:
    if page.interface_languages is None or not page.interface_languages.swift:
        return None
    return coerce_record(IndexItem, page.interface_languages.swift[0])


def _render_index(page: DocumentationPage) -> str:
    root = _index_root(page)
    if root is None or not root.children:
        return ""
    return render_index_tree(root.children)


def _format_timestamp(moment: datetime) -> str:
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
