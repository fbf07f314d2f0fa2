"""Payloads understood by the bundled renderers."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class Text:
    """Plain text label.

    Attributes:
        value: Text shown by the renderer.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@define(slots=True, frozen=True)
class Empty:
    """Marker payload that renders nothing."""


EMPTY = Empty()
