"""Imperative front-end assembling blocks one declaration at a time."""

from __future__ import annotations

from typing import Any

from .block import to_blocks
from .board import Board
from .section import Section
from .types import BlockList, BlockTuple


class BoardBuilder:
    """Collect declared items and finalize them into blocks.

    Example:
        >>> board = (
        ...     BoardBuilder()
        ...     .section("Account", Text("Name"), Text("Email"))
        ...     .add(Text("Version 1.0"))
        ...     .board()
        ... )
    """

    def __init__(self) -> None:
        self._blocks: BlockList = []

    def add(self, *items: Any) -> BoardBuilder:  # noqa: ANN401
        """Append content items or blocks in the given order."""

        self._blocks.extend(to_blocks(items))
        return self

    def section(self, title: str, *items: Any) -> BoardBuilder:  # noqa: ANN401
        """Append a titled section holding ``items``."""

        return self.add(Section.titled(title, lambda: items))

    def build(self) -> BlockTuple:
        """Return the declared blocks."""

        return tuple(self._blocks)

    def board(self) -> Board:
        """Return a board holding the declared blocks."""

        return Board(self.build())

    def __len__(self) -> int:
        return len(self._blocks)
