"""Resolve cross-reference identifiers to link titles and URLs."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from docc2md.schemas import (
    DocumentationPage,
    ReferenceEntry,
    VariantEntry,
    coerce_record,
)

_DOC_URL_RE = re.compile(r"^doc://[^/]+/documentation/(.+)$")
_DISAMBIGUATOR_RE = re.compile(r"-\w+$")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


class ReferenceTable:
    """Flat identifier lookup over a page's references and variants.

    Entries are coerced one at a time on lookup and only their own fields are
    read, so identifiers that point at each other cannot cause a traversal.
    A table belongs to a single render call.
    """

    def __init__(
        self,
        references: Mapping[str, Any] | None = None,
        variants: Iterable[Any] = (),
    ) -> None:
        self._raw_references = references or {}
        self._references: dict[str, ReferenceEntry | None] = {}
        self._variants: dict[str, VariantEntry] = {}
        for raw in variants:
            variant = coerce_record(VariantEntry, raw)
            if variant and variant.identifier:
                # First entry wins for repeated identifiers.
                self._variants.setdefault(variant.identifier, variant)

    @classmethod
    def from_page(cls, page: DocumentationPage) -> ReferenceTable:
        return cls(page.references, page.variants)

    def reference(self, identifier: str) -> ReferenceEntry | None:
        if identifier not in self._references:
            self._references[identifier] = coerce_record(
                ReferenceEntry, self._raw_references.get(identifier)
            )
        return self._references[identifier]

    def variant(self, identifier: str) -> VariantEntry | None:
        return self._variants.get(identifier)


def resolve_url(identifier: str, refs: ReferenceTable) -> str:
    """Map an identifier to a link target.

    A reference entry's own URL is returned verbatim. Otherwise
    ``doc://<bundle>/documentation/<rest>`` becomes ``/documentation/<rest>``
    and anything else is returned unchanged.
    """
    reference = refs.reference(identifier)
    if reference and reference.url:
        return reference.url

    match = _DOC_URL_RE.match(identifier)
    if match:
        return f"/documentation/{match.group(1)}"
    return identifier


def resolve_title(
    identifier: str, refs: ReferenceTable, override: str | None = None
) -> str:
    """Pick a display title: explicit override, reference title, then heuristic."""
    if override:
        return override
    reference = refs.reference(identifier)
    if reference and reference.title:
        return reference.title
    return title_from_identifier(identifier)


def title_from_identifier(identifier: str) -> str:
    """Derive a readable label from the last path segment of an identifier.

    Symbol signatures keep their parentheses and lose the disambiguation
    suffix (``init(exactly:)-63925`` -> ``init(exactly:)``); other names are
    split at camelCase boundaries (``somePropertyName`` ->
    ``some Property Name``). The result is a best-effort label only.
    """
    last_part = identifier.rsplit("/", 1)[-1]

    signature = _DISAMBIGUATOR_RE.sub("", last_part)
    if "(" in signature and ")" in signature:
        return signature

    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", last_part)
    return re.sub(r"\s+", " ", spaced).strip()


def plain_text(spans: Iterable[Any]) -> str:
    """Concatenate the literal ``text`` fields of a list of inline spans."""
    parts: list[str] = []
    for span in spans:
        text = span.get("text") if isinstance(span, Mapping) else getattr(span, "text", None)
        if isinstance(text, str):
            parts.append(text)
    return "".join(parts)


def link_details(identifier: str, refs: ReferenceTable) -> tuple[str, str, str]:
    """Return ``(title, url, abstract)`` for an identifier listed in a section.

    The reference table is consulted first; variants only enrich identifiers
    it does not describe.
    """
    reference = refs.reference(identifier)
    variant = refs.variant(identifier)

    title = (
        (reference.title if reference else None)
        or (variant.title if variant else None)
        or title_from_identifier(identifier)
    )
    abstract = ""
    if reference and reference.abstract:
        abstract = plain_text(reference.abstract)
    elif variant and variant.abstract:
        abstract = plain_text(variant.abstract)
    return title, resolve_url(identifier, refs), abstract
