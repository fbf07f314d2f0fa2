"""JSON encoding of board data, preferring orjson when it is installed."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from uuid import UUID

from attrs import asdict, has

from stackboard.board import Empty, Text


def encode_value(value: object) -> object:
    """Convert a value the JSON encoders do not know into builtin types.

    Args:
        value: Payload, identifier or attrs instance such as ``Style``.

    Returns:
        ``Text`` as its string, ``EMPTY`` as ``None``, a ``UUID`` as its
        canonical string and other attrs instances as dictionaries.

    Throws:
        TypeError: If ``value`` has no JSON form.
    """

    if isinstance(value, Text):
        return value.value
    if isinstance(value, Empty):
        return None
    if isinstance(value, UUID):
        return str(value)
    if has(type(value)):
        return asdict(value)
    raise TypeError(f"Cannot encode {type(value).__name__} as JSON")


def dumps(data: object, pretty: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize. Payloads, block identifiers and
            attrs instances are accepted anywhere inside it.
        pretty: Indent the output by two spaces.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(data, default=encode_value, option=option).decode()
    return json.dumps(
        data,
        default=encode_value,
        ensure_ascii=False,
        indent=2 if pretty else None,
    )


def loads(data: str | bytes) -> object:
    """Deserialize JSON from a string or bytes.

    Throws:
        ValueError: If ``data`` is not valid JSON or valid UTF-8.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        data = data.decode()
    return json.loads(data)
