"""Shared schemas for docc2md."""

from docc2md.schemas.document import (
    ContentSection,
    Declaration,
    DocumentationPage,
    IndexItem,
    LinkSection,
    Metadata,
    Parameter,
    Platform,
    ReferenceEntry,
    Token,
    VariantEntry,
)
from docc2md.schemas.nodes import (
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
    UnknownBlock,
    UnknownInline,
    UnorderedList,
    coerce_block,
    coerce_inline,
    coerce_record,
)

__all__ = [
    "Aside",
    "BlockNode",
    "CodeListing",
    "CodeVoice",
    "ContentSection",
    "Declaration",
    "DocumentationPage",
    "Emphasis",
    "Heading",
    "IndexItem",
    "InlineNode",
    "LinkSection",
    "ListItem",
    "Metadata",
    "OrderedList",
    "Paragraph",
    "Parameter",
    "Platform",
    "Reference",
    "ReferenceEntry",
    "Strong",
    "Text",
    "Token",
    "UnknownBlock",
    "UnknownInline",
    "UnorderedList",
    "VariantEntry",
    "coerce_block",
    "coerce_inline",
    "coerce_record",
]
