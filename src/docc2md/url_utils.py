"""Documentation path and URL helpers."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

from docc2md.config import DOCUMENTATION_BASE_URL

_PATH_PREFIX_RE = re.compile(r"^/?(?:documentation/?)?")


def normalize_documentation_path(path: Any) -> str:
    """Strip whitespace, one leading slash and a ``documentation`` prefix.

    ``/documentation/swift/array``, ``documentation/swift/array`` and
    ``  swift/array  `` all normalize to ``swift/array``.
    """
    if not path or not isinstance(path, str):
        return ""
    return _PATH_PREFIX_RE.sub("", path.strip(), count=1)


def generate_documentation_url(normalized_path: Any) -> str:
    """Build the canonical documentation URL for a normalized path."""
    if not normalized_path or not isinstance(normalized_path, str):
        return DOCUMENTATION_BASE_URL
    return f"{DOCUMENTATION_BASE_URL}{normalized_path}"


def is_valid_documentation_url(url: Any) -> bool:
    """Return True when ``url`` points into the documentation site."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(DOCUMENTATION_BASE_URL)


def url_path_segments(url: str) -> list[str]:
    """Return the non-empty path segments of a URL, or none if it cannot be parsed."""
    try:
        path = urlparse(url).path
    except ValueError:
        return []
    return [part for part in path.split("/") if part]
