"""Visual constants shared by the bundled renderers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import define, evolve, field, fields_dict
from attrs.validators import ge, instance_of, le, matches_re

# Colors end up inside inline CSS, so only names, hex and functional
# notation such as ``rgba(0, 0, 0, 0.5)`` are accepted.
_COLOR_RE = r"#?[A-Za-z0-9]+(\([0-9., %]*\))?"


def _length(default: int) -> Any:  # noqa: ANN401
    return field(default=default, validator=[instance_of(int), ge(0)])


def _opacity(default: float) -> Any:  # noqa: ANN401
    return field(
        default=default,
        validator=[instance_of((int, float)), ge(0), le(1)],
    )


def _color(default: str) -> Any:  # noqa: ANN401
    return field(
        default=default,
        validator=[instance_of(str), matches_re(_COLOR_RE)],
    )


class StyleError(ValueError):
    """Raised when a style file cannot be applied."""


@define(slots=True, frozen=True)
class Style:
    """Card and section styling.

    Lengths are non-negative CSS pixels and opacities lie in ``[0, 1]``.

    Attributes:
        card_padding: Inner padding of every card.
        corner_radius: Corner radius of every card.
        card_background: Fill color of every card.
        shadow_opacity: Alpha of the black card shadow.
        shadow_radius: Blur radius of the card shadow.
        shadow_y: Vertical offset of the card shadow.
        horizontal_inset: Horizontal margin of sections and standalone cards.
        section_vertical_padding: Vertical padding around each section.
        header_leading: Left padding of a section header.
        header_top: Top padding of a section header.
        header_color: Text color of a section header.
        board_top_padding: Space above the first top-level block.
        spacing: Gap between adjacent cards.
        background_opacity: Alpha of the gray board background.
    """

    card_padding: int = _length(10)
    corner_radius: int = _length(10)
    card_background: str = _color("white")
    shadow_opacity: float = _opacity(0.05)
    shadow_radius: int = _length(1)
    shadow_y: int = _length(2)
    horizontal_inset: int = _length(20)
    section_vertical_padding: int = _length(35)
    header_leading: int = _length(15)
    header_top: int = _length(2)
    header_color: str = _color("gray")
    board_top_padding: int = _length(20)
    spacing: int = _length(1)
    background_opacity: float = _opacity(0.05)


def style_from_data(data: Any) -> Style:  # noqa: ANN401
    """Return the default style overridden by the keys in ``data``.

    Args:
        data: Mapping of ``Style`` attribute names to values, or ``None``.

    Returns:
        The resulting ``Style``.

    Throws:
        StyleError: If ``data`` is not a mapping, names unknown keys or
            holds a value of the wrong type or range.
    """

    if data is None:
        return Style()
    if not isinstance(data, dict):
        raise StyleError("Style must be a mapping of attribute names")

    # Reject typos instead of silently ignoring them. YAML keys need not
    # be strings, so compare their text.
    known = set(fields_dict(Style))
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise StyleError(f"Unknown style keys: {', '.join(unknown)}")

    try:
        return evolve(Style(), **data)
    except (TypeError, ValueError) as exc:
        raise StyleError(f"Invalid style value: {exc}") from exc


def load_style(path: Path | None) -> Style:
    """Load a style from a YAML file, or return the default style.

    Args:
        path: Location of the YAML file. ``None`` selects the defaults.

    Returns:
        The configured ``Style``.
    """

    if path is None:
        return Style()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as exc:
        raise StyleError(f"{path}: invalid YAML ({exc})") from exc
    return style_from_data(data)
