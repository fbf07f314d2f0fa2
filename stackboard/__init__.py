"""Compose labeled sections of UI blocks into a flattened board."""

from .board import (
    EMPTY,
    Block,
    BlockKind,
    Board,
    BoardBuilder,
    Empty,
    Section,
    SectionSource,
    Text,
    flatten,
)

__all__ = [
    "EMPTY",
    "Block",
    "BlockKind",
    "Board",
    "BoardBuilder",
    "Empty",
    "Section",
    "SectionSource",
    "Text",
    "flatten",
]
