"""Render options threaded through every walker call."""

from __future__ import annotations

from dataclasses import dataclass

from docc2md.config import (
    DOCC2MD_DEFAULT_CODE_SYNTAX,
    DOCC2MD_MAX_BLOCK_DEPTH,
    DOCC2MD_MAX_INLINE_DEPTH,
)


@dataclass(frozen=True)
class RenderOptions:
    """Options for rendering a documentation page.

    Attributes:
        max_block_depth: Deepest block nesting rendered before the block
            walker emits its sentinel.
        max_inline_depth: Deepest inline nesting rendered before the inline
            walker emits its sentinel. Must be lower than ``max_block_depth``.
        default_code_syntax: Fence language for code listings and
            declarations without their own syntax.
    """

    max_block_depth: int = DOCC2MD_MAX_BLOCK_DEPTH
    max_inline_depth: int = DOCC2MD_MAX_INLINE_DEPTH
    default_code_syntax: str = DOCC2MD_DEFAULT_CODE_SYNTAX

    def __post_init__(self) -> None:
        if self.max_inline_depth < 1 or self.max_block_depth < 1:
            raise ValueError("Depth limits must be positive")
        if self.max_block_depth <= self.max_inline_depth:
            raise ValueError(
                "max_block_depth must be greater than max_inline_depth "
                f"(got {self.max_block_depth} and {self.max_inline_depth})"
            )


DEFAULT_OPTIONS = RenderOptions()
