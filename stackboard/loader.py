"""Build boards from JSON or YAML documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from stackboard.board import EMPTY, Board, Section, Text
from stackboard.serialize import loads

logger = logging.getLogger(__name__)

JSONDict = dict[str, Any]


class BoardFormatError(ValueError):
    """Raised when a board document does not have the expected shape."""


def load_board(path: Path) -> Board:
    """Read a board document from ``path``.

    Args:
        path: Location of a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        The board described by the file.

    Throws:
        BoardFormatError: If the file cannot be decoded or is malformed.
    """

    # Decode JSON or YAML depending on file extension. Undecodable bytes
    # surface as ``UnicodeDecodeError``, a ``ValueError``.
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            data = loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise BoardFormatError(f"{path}: cannot decode ({exc})") from exc

    board = board_from_data(data)
    logger.debug("Loaded %d top-level blocks from %s", len(board), path)
    return board


def board_from_data(data: Any) -> Board:  # noqa: ANN401
    """Build a board from a decoded document.

    Args:
        data: Mapping with a ``board`` list of entries.

    Returns:
        The assembled ``Board``.
    """

    if not isinstance(data, dict) or "board" not in data:
        raise BoardFormatError("Document must be a mapping with a 'board' key")

    return Board(_parse_entries(data["board"], "board"))


def _parse_entries(entries: Any, path: str) -> list[Any]:  # noqa: ANN401
    """Convert a list of entries into content items.

    Args:
        entries: Decoded list, or ``None`` for an empty list.
        path: Location of the list inside the document, for messages.

    Returns:
        Content items in document order.
    """

    if entries is None:
        return []
    if not isinstance(entries, list):
        raise BoardFormatError(f"{path}: expected a list")

    return [
        _parse_entry(entry, f"{path}[{idx}]")
        for idx, entry in enumerate(entries)
    ]


def _parse_entry(entry: Any, path: str) -> Any:  # noqa: ANN401
    """Convert one entry into a ``Text`` leaf or a ``Section``."""

    if isinstance(entry, str):
        return Text(entry)
    if not isinstance(entry, dict):
        raise BoardFormatError(
            f"{path}: expected a string or a mapping, "
            f"got {type(entry).__name__}"
        )

    if "section" in entry:
        return _parse_section(entry, path)
    if "text" in entry:
        return Text(_require_text(entry["text"], f"{path}.text"))

    raise BoardFormatError(f"{path}: entry needs a 'text' or 'section' key")


def _parse_section(entry: JSONDict, path: str) -> Section:
    """Convert a ``section`` entry and its nested ``blocks``."""

    blocks = _parse_entries(entry.get("blocks"), f"{path}.blocks")
    decoration = entry["section"]

    # A bare string is the title; a mapping spells out header and footer.
    if isinstance(decoration, str):
        return Section.titled(decoration, lambda: blocks)
    if isinstance(decoration, dict):
        header = _optional_text(
            decoration.get("header"), f"{path}.section.header"
        )
        footer = _optional_text(
            decoration.get("footer"), f"{path}.section.footer"
        )
        return Section.construct(
            lambda: blocks, header=lambda: header, footer=lambda: footer
        )

    raise BoardFormatError(f"{path}.section: expected a string or a mapping")


def _require_text(value: Any, path: str) -> str:  # noqa: ANN401
    if not isinstance(value, str):
        raise BoardFormatError(f"{path}: expected a string")
    return value


def _optional_text(value: Any, path: str) -> Any:  # noqa: ANN401
    """Return ``Text`` for a string value and ``EMPTY`` for ``None``."""

    if value is None:
        return EMPTY
    return Text(_require_text(value, path))
