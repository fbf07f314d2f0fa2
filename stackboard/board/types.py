"""Common type aliases for board structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Union

if TYPE_CHECKING:
    from .block import Block  # noqa: F401
    from .layout import LeafUnit, SectionUnit  # noqa: F401


BlockTuple = tuple["Block", ...]
BlockList = list["Block"]
LayoutUnit = Union["SectionUnit", "LeafUnit"]
LayoutTuple = tuple[LayoutUnit, ...]

# Zero-argument callables used by the declarative constructors.
ContentFactory = Callable[[], Iterable[Any]]
PayloadFactory = Callable[[], Any]
