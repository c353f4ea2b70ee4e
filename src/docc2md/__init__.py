"""docc2md: render Apple DocC documentation JSON as Markdown."""

from docc2md.exceptions import Docc2mdError, ParseError
from docc2md.ingestion import convert_documentation, load_document
from docc2md.markdown import (
    CONTENT_TOO_DEEP,
    INLINE_TOO_DEEP,
    callout_for_style,
    render_blocks,
    render_inline,
)
from docc2md.options import RenderOptions
from docc2md.output_formatter import render_document
from docc2md.references import (
    ReferenceTable,
    resolve_title,
    resolve_url,
    title_from_identifier,
)
from docc2md.schemas import DocumentationPage

__all__ = [
    "CONTENT_TOO_DEEP",
    "INLINE_TOO_DEEP",
    "Docc2mdError",
    "DocumentationPage",
    "ParseError",
    "ReferenceTable",
    "RenderOptions",
    "callout_for_style",
    "convert_documentation",
    "load_document",
    "render_blocks",
    "render_document",
    "render_inline",
    "resolve_title",
    "resolve_url",
    "title_from_identifier",
]
