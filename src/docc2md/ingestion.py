"""Load DocC JSON payloads and convert them to Markdown."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from docc2md.exceptions import ParseError
from docc2md.options import RenderOptions
from docc2md.output_formatter import as_page, render_document
from docc2md.schemas import DocumentationPage
from docc2md.url_utils import generate_documentation_url, normalize_documentation_path

logger = logging.getLogger(__name__)


def load_document(payload: str | bytes | Mapping[str, Any] | DocumentationPage) -> DocumentationPage:
    """Decode a documentation payload into a page.

    Args:
        payload: JSON text or bytes, an already decoded mapping, or a page.

    Returns:
        The validated page. Malformed fields are dropped, not reported.

    Raises:
        ParseError: If the payload is not JSON, is nested too deeply for the
            decoder, or its root is not an object.
    """
    if isinstance(payload, (DocumentationPage, Mapping)):
        return as_page(payload)

    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"Documentation payload is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Documentation payload is nested too deeply to decode") from exc

    if not isinstance(data, Mapping):
        raise ParseError(
            f"Documentation payload must be a JSON object, got {type(data).__name__}"
        )
    return as_page(data)


def source_url_for(path_or_url: str) -> str:
    """Return ``path_or_url`` if it is absolute, else its documentation URL."""
    if "://" in path_or_url:
        return path_or_url
    return generate_documentation_url(normalize_documentation_path(path_or_url))


def convert_documentation(
    payload: str | bytes | Mapping[str, Any] | DocumentationPage,
    path_or_url: str,
    *,
    options: RenderOptions | None = None,
    timestamp: datetime | None = None,
) -> str:
    """Load a payload and render it as Markdown.

    Args:
        payload: JSON text or bytes, a decoded mapping, or a page.
        path_or_url: Absolute source URL, or a documentation path such as
            ``/documentation/swift/array`` that is expanded to one.
        options: Render options. Uses defaults if None.
        timestamp: Front matter timestamp. Defaults to now.

    Returns:
        The rendered Markdown document.

    Raises:
        ParseError: If the payload cannot be decoded.
    """
    page = load_document(payload)
    source_url = source_url_for(path_or_url)
    logger.debug("Rendering documentation page for %s", source_url)
    return render_document(page, source_url, options=options, timestamp=timestamp)
