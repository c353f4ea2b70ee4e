"""Tests for lenient schema coercion."""

from __future__ import annotations

import pydantic
import pytest

from docc2md.schemas import (
    Aside,
    CodeListing,
    DocumentationPage,
    Heading,
    LinkSection,
    Paragraph,
    Reference,
    ReferenceEntry,
    Text,
    UnknownBlock,
    UnknownInline,
    coerce_block,
    coerce_inline,
    coerce_record,
)


class TestCoerceBlock:
    """Tests for coerce_block function."""

    def test_dispatches_on_type(self) -> None:
        """Known kinds become their own model."""
        node = coerce_block({"type": "heading", "level": 3, "text": "Overview", "anchor": "overview"})

        assert isinstance(node, Heading)
        assert node.level == 3
        assert node.text == "Overview"

    def test_reads_camel_case_fields(self) -> None:
        """Wire names are camelCase."""
        node = coerce_block({"type": "paragraph", "inlineContent": [{"type": "text", "text": "hi"}]})

        assert isinstance(node, Paragraph)
        assert node.inline_content == [{"type": "text", "text": "hi"}]

    def test_children_stay_raw(self) -> None:
        """Nested content is not coerced ahead of rendering."""
        child = {"type": "aside", "content": [{"type": "bogus"}]}
        node = coerce_block({"type": "aside", "style": "note", "content": [child]})

        assert isinstance(node, Aside)
        assert node.content[0] is child

    @pytest.mark.parametrize(
        "raw",
        [{"type": "table"}, {"type": 7}, {}, None, "paragraph", 3, ["heading"]],
    )
    def test_unusable_nodes_are_unknown(self, raw: object) -> None:
        """Anything but a known kind becomes UnknownBlock."""
        assert isinstance(coerce_block(raw), UnknownBlock)

    def test_wrong_field_types_fall_back(self) -> None:
        """Malformed fields collapse to empty values."""
        node = coerce_block({"type": "heading", "level": "big", "text": ["x"]})

        assert isinstance(node, Heading)
        assert node.level is None
        assert node.text is None

    def test_code_lines_or_text(self) -> None:
        """Code listings accept a string or a list of lines."""
        lines = coerce_block({"type": "codeListing", "code": ["a", "b"], "syntax": "swift"})
        text = coerce_block({"type": "codeListing", "code": "let x = 1"})
        broken = coerce_block({"type": "codeListing", "code": {"a": 1}})

        assert isinstance(lines, CodeListing) and lines.code == ["a", "b"]
        assert isinstance(text, CodeListing) and text.code == "let x = 1"
        assert isinstance(broken, CodeListing) and broken.code is None

    @pytest.mark.parametrize("kind", [["paragraph"], {"type": "heading"}, 1.5])
    def test_unhashable_or_odd_types_are_unknown(self, kind: object) -> None:
        """Non-string type values never raise."""
        assert isinstance(coerce_block({"type": kind}), UnknownBlock)

    def test_code_lines_keep_valid_entries(self) -> None:
        """Malformed lines do not discard the rest of the listing."""
        node = coerce_block({"type": "codeListing", "code": ["let a = 1", 2, None, "print(a)"]})

        assert isinstance(node, CodeListing)
        assert node.code == ["let a = 1", "2", "", "print(a)"]

    def test_non_list_content_becomes_empty(self) -> None:
        """Child collections of the wrong shape become empty lists."""
        node = coerce_block({"type": "unorderedList", "items": "nope"})

        assert node.items == []


class TestCoerceInline:
    """Tests for coerce_inline function."""

    def test_reference_fields(self) -> None:
        """References read identifier, override text and activity flag."""
        node = coerce_inline(
            {"type": "reference", "identifier": "doc://x/documentation/a", "isActive": True}
        )

        assert isinstance(node, Reference)
        assert node.identifier == "doc://x/documentation/a"
        assert node.is_active is True

    def test_unknown_kind_keeps_text(self) -> None:
        """Unknown spans keep their literal text."""
        node = coerce_inline({"type": "image", "text": "alt"})

        assert isinstance(node, UnknownInline)
        assert node.text == "alt"

    def test_unhashable_type_is_unknown(self) -> None:
        """Spans with object or list types become unknown and keep their text."""
        node = coerce_inline({"type": {"x": 1}, "text": "hi"})

        assert isinstance(node, UnknownInline)
        assert node.text == "hi"
        assert isinstance(coerce_inline({"type": ["text"]}), UnknownInline)

    def test_non_mapping_is_unknown(self) -> None:
        """Non-object spans carry no text."""
        node = coerce_inline(None)

        assert isinstance(node, UnknownInline)
        assert node.text is None

    def test_models_pass_through(self) -> None:
        """Already coerced spans are accepted."""
        span = Text(text="hello")

        assert coerce_inline(span) == span


class TestCoerceRecord:
    """Tests for coerce_record function."""

    def test_returns_none_for_non_mappings(self) -> None:
        """Only objects can become records."""
        assert coerce_record(ReferenceEntry, "doc://x") is None
        assert coerce_record(ReferenceEntry, None) is None

    def test_link_section_identifiers_keep_strings(self) -> None:
        """Non-string identifiers are dropped; order and duplicates remain."""
        section = coerce_record(
            LinkSection, {"title": "Topics", "identifiers": ["a", 1, None, "b", "a"]}
        )

        assert section is not None
        assert section.identifiers == ["a", "b", "a"]

    def test_link_section_identifiers_wrong_shape(self) -> None:
        """Identifiers that are not a list are empty."""
        section = coerce_record(LinkSection, {"title": "Topics", "identifiers": "a"})

        assert section is not None
        assert section.identifiers == []


class TestDocumentationPage:
    """Tests for the page root model."""

    def test_empty_object_is_valid(self) -> None:
        """Every field is optional."""
        page = DocumentationPage.model_validate({})

        assert page.metadata is None
        assert page.references == {}
        assert page.primary_content_sections == []

    def test_malformed_top_level_fields_fall_back(self) -> None:
        """Wrongly typed top-level fields become empty."""
        page = DocumentationPage.model_validate(
            {
                "metadata": "title",
                "references": ["not", "a", "map"],
                "topicSections": {"title": "x"},
                "interfaceLanguages": 3,
            }
        )

        assert page.metadata is None
        assert page.references == {}
        assert page.topic_sections == []
        assert page.interface_languages is None

    def test_metadata_aliases(self) -> None:
        """Metadata fields are read from camelCase keys."""
        page = DocumentationPage.model_validate(
            {"metadata": {"title": "View", "roleHeading": "Protocol", "symbolKind": "protocol"}}
        )

        assert page.metadata is not None
        assert page.metadata.role_heading == "Protocol"
        assert page.metadata.symbol_kind == "protocol"

    def test_models_are_frozen(self) -> None:
        """Parsed trees are read-only."""
        page = DocumentationPage.model_validate({"kind": "symbol"})

        with pytest.raises(pydantic.ValidationError):
            page.kind = "article"  # type: ignore[misc]
