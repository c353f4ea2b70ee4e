"""Local configuration for docc2md."""

from __future__ import annotations

import os


DEFAULT_MAX_BLOCK_DEPTH = 50
DEFAULT_MAX_INLINE_DEPTH = 20
DEFAULT_CODE_SYNTAX = "swift"

DOCUMENTATION_BASE_URL = "https://developer.apple.com/documentation/"
TITLE_SUFFIX = "| Apple Developer Documentation"

FOOTER_ATTRIBUTION = "*Extracted by [sosumi.ai](https://sosumi.ai) - Making Apple docs AI-readable.*"
FOOTER_DISCLAIMER = "*This is unofficial content. All documentation belongs to Apple Inc.*"

# Recursion limits for the block and inline walkers; the block limit must stay above the inline one.
DOCC2MD_MAX_BLOCK_DEPTH = int(os.getenv("DOCC2MD_MAX_BLOCK_DEPTH", str(DEFAULT_MAX_BLOCK_DEPTH)))
DOCC2MD_MAX_INLINE_DEPTH = int(os.getenv("DOCC2MD_MAX_INLINE_DEPTH", str(DEFAULT_MAX_INLINE_DEPTH)))
DOCC2MD_DEFAULT_CODE_SYNTAX = os.getenv("DOCC2MD_DEFAULT_CODE_SYNTAX", DEFAULT_CODE_SYNTAX)
