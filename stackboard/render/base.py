"""Renderer capability and the payload-to-text rule."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from stackboard.board import Empty, Text

if TYPE_CHECKING:
    from stackboard.board import Board


class Renderer(Protocol):
    """Turns a board into a document."""

    def render(self, board: Board) -> str:
        ...


def content_text(payload: Any) -> str | None:  # noqa: ANN401
    """Return the text shown for ``payload``.

    Args:
        payload: Header, footer or leaf content.

    Returns:
        ``None`` for payloads that render nothing, otherwise the text.
    """

    if payload is None or isinstance(payload, Empty):
        return None
    if isinstance(payload, Text):
        return payload.value
    return str(payload)
