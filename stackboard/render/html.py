"""Standalone HTML page rendering of a board."""

from __future__ import annotations

from html import escape
from typing import Iterable

from stackboard.board import Block, Board, SectionUnit
from stackboard.style import Style

from .base import content_text


def _text_html(payload: object) -> str | None:
    """Return escaped HTML for ``payload`` or ``None`` when empty."""

    text = content_text(payload)
    if text is None:
        return None
    return escape(text).replace("\n", "<br>")


class HtmlRenderer:
    """Render boards as HTML with inline card styling.

    Attributes:
        style: Visual constants applied to cards and sections.
        title: Content of the page ``<title>`` element.
    """

    def __init__(
        self, style: Style | None = None, title: str = "Board"
    ) -> None:
        self.style = style or Style()
        self.title = title

    def _card_css(self) -> str:
        s = self.style
        return (
            f"padding:{s.card_padding}px;"
            f"border-radius:{s.corner_radius}px;"
            f"background:{s.card_background};"
            f"box-shadow:0 {s.shadow_y}px {s.shadow_radius}px "
            f"rgba(0,0,0,{s.shadow_opacity});"
            "text-align:left;"
        )

    def _stack_css(self) -> str:
        return (
            "display:flex;flex-direction:column;"
            f"gap:{self.style.spacing}px;"
        )

    def _cards(self, blocks: Iterable[Block]) -> str:
        card_css = self._card_css()
        return "".join(
            f"<div class='card' id='block-{block.block_id}' "
            f"style='{card_css}'>{_text_html(block.content) or ''}</div>"
            for block in blocks
        )

    def _section(self, unit: SectionUnit) -> str:
        s = self.style
        parts = [
            f"<section id='block-{unit.block.block_id}' "
            f"style='padding:{s.section_vertical_padding}px "
            f"{s.horizontal_inset}px;'>"
        ]

        header = _text_html(unit.header)
        if header is not None:
            parts.append(
                "<header style='"
                f"padding:{s.header_top}px 0 0 {s.header_leading}px;"
                f"color:{s.header_color};'>{header}</header>"
            )

        parts.append(
            f"<div class='body' style='{self._stack_css()}'>"
            f"{self._cards(unit.body)}</div>"
        )

        footer = _text_html(unit.footer)
        if footer is not None:
            parts.append(f"<footer>{footer}</footer>")

        parts.append("</section>")
        return "".join(parts)

    def render(self, board: Board) -> str:
        """Return a complete HTML document for ``board``."""

        s = self.style
        parts: list[str] = []
        for unit in board.layout():
            if isinstance(unit, SectionUnit):
                parts.append(self._section(unit))
            else:
                # Standalone leaves are inset like section bodies.
                parts.append(
                    f"<div style='margin:0 {s.horizontal_inset}px;'>"
                    f"{self._cards([unit.block])}</div>"
                )

        return (
            "<!DOCTYPE html>"
            "<html><head><meta charset='utf-8'>"
            f"<title>{escape(self.title)}</title></head>"
            "<body style='margin:0;'>"
            "<main class='board' style='"
            f"{self._stack_css()}padding-top:{s.board_top_padding}px;"
            "min-height:100vh;"
            f"background:rgba(128,128,128,{s.background_opacity});'>"
            f"{''.join(parts)}</main></body></html>"
        )
