"""Test setup for docc2md."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docc2md.references import ReferenceTable  # noqa: E402


@pytest.fixture
def fixed_timestamp() -> datetime:
    """Timestamp rendered as 2025-01-02T03:04:05.678Z in front matter."""
    return datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture
def empty_refs() -> ReferenceTable:
    """Reference table with no entries."""
    return ReferenceTable()
