"""Semantic tree model of a board and its flattening rules."""

from .block import Block, BlockKind, to_blocks
from .board import Board
from .builder import BoardBuilder
from .content import EMPTY, Empty, Text
from .flatten import flatten, iter_leaves
from .layout import LeafUnit, SectionUnit, layout_block
from .section import Section
from .section_source import SectionSource

__all__ = [
    "EMPTY",
    "Block",
    "BlockKind",
    "Board",
    "BoardBuilder",
    "Empty",
    "LeafUnit",
    "Section",
    "SectionSource",
    "SectionUnit",
    "Text",
    "flatten",
    "iter_leaves",
    "layout_block",
    "to_blocks",
]
