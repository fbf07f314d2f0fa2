"""Plain data view of a board layout for JSON and YAML output."""

from __future__ import annotations

from typing import Any

from stackboard.board import Block, Board, SectionUnit

from .base import content_text

JSONDict = dict[str, Any]


def _leaf_data(block: Block) -> JSONDict:
    return {"id": str(block.block_id), "text": content_text(block.content)}


def layout_to_data(board: Board) -> list[JSONDict]:
    """Describe the layout of ``board`` with builtin types.

    Args:
        board: Board to describe.

    Returns:
        One mapping per top-level block. Sections carry ``header``,
        ``footer`` and their flattened ``blocks``; leaves carry ``text``.
    """

    items: list[JSONDict] = []
    for unit in board.layout():
        if isinstance(unit, SectionUnit):
            items.append(
                {
                    "type": "section",
                    "id": str(unit.block.block_id),
                    "header": content_text(unit.header),
                    "footer": content_text(unit.footer),
                    "blocks": [_leaf_data(block) for block in unit.body],
                }
            )
        else:
            items.append({"type": "leaf", **_leaf_data(unit.block)})
    return items
