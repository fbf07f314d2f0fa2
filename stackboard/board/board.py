"""Root of a composition: the ordered top-level blocks."""

from __future__ import annotations

import logging
from typing import Iterator

from attrs import define, field

from .block import Block, to_blocks
from .flatten import flatten
from .layout import SectionUnit, layout_block
from .types import BlockList, BlockTuple, ContentFactory, LayoutTuple

logger = logging.getLogger(__name__)


@define(slots=True, frozen=True, eq=False)
class Board:
    """Ordered top-level blocks of a screen.

    Only these blocks may be rendered as sections. A section nested inside
    another one contributes its leaves to the enclosing section's body.

    Attributes:
        blocks: Top-level blocks in declaration order.
    """

    blocks: BlockTuple = field(factory=tuple, converter=to_blocks)

    @classmethod
    def construct(cls, content: ContentFactory) -> Board:
        """Build a board from a callable returning the top-level items."""

        return cls(content())

    def layout(self) -> LayoutTuple:
        """Return the rendering decision for every top-level block.

        Returns:
            One unit per top-level block, in order. Each section computes
            its body from its own subtree only.
        """

        units = tuple(layout_block(block) for block in self.blocks)
        logger.debug(
            "Laid out %d top-level blocks (%d sections)",
            len(units),
            sum(isinstance(unit, SectionUnit) for unit in units),
        )
        return units

    def sections(self) -> BlockTuple:
        """Return the top-level blocks rendered as sections."""

        return tuple(block for block in self.blocks if block.is_section)

    def leaves(self) -> BlockList:
        """Return every leaf reachable from the board in display order."""

        return flatten(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
