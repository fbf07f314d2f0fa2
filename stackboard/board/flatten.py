"""Depth-first expansion of nested sections into leaf blocks."""

from __future__ import annotations

from typing import Iterable, Iterator

from .block import Block
from .types import BlockList


def iter_leaves(blocks: Iterable[Block]) -> Iterator[Block]:
    """Yield the leaf blocks reachable from ``blocks``.

    Traversal is pre-order and left to right. A block whose
    ``extract_blocks`` returns a sequence is replaced by the leaves of
    that sequence, so an empty section yields nothing. Any other block is
    yielded as is. The input must be a finite, acyclic tree; its depth is
    not bounded by the interpreter's recursion limit.

    Args:
        blocks: Ordered blocks to expand.

    Yields:
        Leaf blocks in display order.
    """

    # One iterator per open section, innermost last.
    stack: list[Iterator[Block]] = [iter(blocks)]
    while stack:
        for block in stack[-1]:
            nested = block.extract_blocks()
            if nested is not None:
                stack.append(iter(nested))
                break
            yield block
        else:
            stack.pop()


def flatten(blocks: Iterable[Block]) -> BlockList:
    """Return the leaf blocks reachable from ``blocks`` as a list."""

    return list(iter_leaves(blocks))
