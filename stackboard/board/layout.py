"""Rendering decision for the top-level blocks of a board."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .block import Block
from .content import EMPTY
from .flatten import flatten
from .types import BlockTuple, LayoutUnit


@define(slots=True, frozen=True)
class LeafUnit:
    """Top-level block drawn as a standalone card.

    Attributes:
        block: The wrapped leaf.
    """

    block: Block

    @property
    def content(self) -> Any:  # noqa: ANN401
        return self.block.content


@define(slots=True, frozen=True)
class SectionUnit:
    """Top-level section drawn as a structural unit.

    Attributes:
        block: The wrapped section.
        header: Header payload of the section.
        footer: Footer payload of the section.
        body: Leaves of the section's own subtree, nested sections
            spliced in without their header or footer.
    """

    block: Block
    header: Any = EMPTY
    footer: Any = EMPTY
    body: BlockTuple = field(factory=tuple, repr=False)


def layout_block(block: Block) -> LayoutUnit:
    """Decide how a single top-level block is rendered.

    Args:
        block: Block held directly by a board.

    Returns:
        ``SectionUnit`` for a section block, ``LeafUnit`` otherwise.
    """

    if not block.is_section:
        return LeafUnit(block)

    # Sources other than ``Section`` may carry no decoration at all.
    source = block.source
    body = tuple(flatten(block.extract_blocks() or ()))
    return SectionUnit(
        block=block,
        header=getattr(source, "header", EMPTY),
        footer=getattr(source, "footer", EMPTY),
        body=body,
    )
