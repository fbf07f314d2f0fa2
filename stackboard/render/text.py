"""Plain-text rendering of a board as stacked cards."""

from __future__ import annotations

from typing import Iterable

from stackboard.board import Block, Board, SectionUnit

from .base import content_text


def _card_lines(blocks: Iterable[Block]) -> list[str]:
    """Draw adjacent cards sharing their borders.

    Args:
        blocks: Leaves to draw, one card each.

    Returns:
        Lines of the drawing, empty when there are no blocks.
    """

    # Each card may span several lines.
    cards = [
        (content_text(block.content) or "").splitlines() or [""]
        for block in blocks
    ]
    if not cards:
        return []

    width = max(len(line) for card in cards for line in card)
    border = "+" + "-" * (width + 2) + "+"

    lines = [border]
    for card in cards:
        lines.extend(f"| {line.ljust(width)} |" for line in card)
        lines.append(border)
    return lines


class TextRenderer:
    """Render boards for a terminal.

    Sections print their header, their flattened body as one stack of
    cards and their footer. Standalone leaves print as single cards.
    """

    def __init__(self, header_indent: int = 2) -> None:
        self.header_indent = header_indent

    def _decoration(self, payload: object) -> list[str]:
        text = content_text(payload)
        if text is None:
            return []
        pad = " " * self.header_indent
        return [pad + line for line in text.splitlines()]

    def render(self, board: Board) -> str:
        """Return the text drawing of ``board``."""

        chunks: list[str] = []
        for unit in board.layout():
            if isinstance(unit, SectionUnit):
                lines = self._decoration(unit.header)
                lines.extend(_card_lines(unit.body))
                lines.extend(self._decoration(unit.footer))
            else:
                lines = _card_lines([unit.block])

            # A section without header, body or footer draws nothing.
            if lines:
                chunks.append("\n".join(lines))

        return "\n\n".join(chunks)
