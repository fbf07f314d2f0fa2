"""Type-erased wrapper tagging one content item as a leaf or a section."""

from __future__ import annotations

import enum
from typing import Any, Iterable
from uuid import UUID, uuid4

from attrs import define, field

from .section_source import SectionSource
from .types import BlockTuple


class BlockKind(enum.Enum):
    """Variant of a block decided when the block is created."""

    LEAF = "leaf"
    SECTION = "section"


@define(slots=True, frozen=True, eq=False)
class Block:
    """Identity-bearing wrapper around one item of content.

    The section capability of ``content`` is detected exactly once, when the
    block is created, and the result is kept in ``source``. Equality and
    hashing are identity based: two blocks wrapping equal content are
    still distinct.

    Attributes:
        content: Wrapped payload, opaque to the board model.
        source: ``content`` itself when it satisfies ``SectionSource``,
            otherwise ``None``.
        block_id: Stable identifier used by renderers for ordered lists.
    """

    content: Any
    source: SectionSource | None = field(init=False, repr=False)
    block_id: UUID = field(init=False, factory=uuid4)

    @source.default
    def _detect_source(self) -> SectionSource | None:
        content = self.content

        # Classes expose ``extract_blocks`` unbound; only instances qualify.
        if isinstance(content, type):
            return None
        if not isinstance(content, SectionSource):
            return None
        if not callable(getattr(content, "extract_blocks", None)):
            return None
        return content

    @classmethod
    def wrap(cls, content: Any) -> Block:  # noqa: ANN401
        """Wrap ``content`` in a block.

        Args:
            content: Any value. Existing blocks are returned unchanged.

        Returns:
            Block tagged as a section when ``content`` exposes
            ``extract_blocks``, otherwise as a leaf.
        """

        if isinstance(content, Block):
            return content
        return cls(content)

    @property
    def is_section(self) -> bool:
        return self.source is not None

    @property
    def kind(self) -> BlockKind:
        return BlockKind.SECTION if self.is_section else BlockKind.LEAF

    def extract_blocks(self) -> BlockTuple | None:
        """Return the children of a section block, ``None`` for a leaf."""

        if self.source is None:
            return None
        return self.source.extract_blocks()


def to_blocks(items: Iterable[Any]) -> BlockTuple:
    """Wrap an ordered collection of content items.

    Args:
        items: Raw content values and/or blocks, in display order.

    Returns:
        Tuple of blocks in the same order. Blocks already present are kept
        as they are.
    """

    return tuple(Block.wrap(item) for item in items)
