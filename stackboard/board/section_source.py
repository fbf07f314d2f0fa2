"""Capability exposing the children of a container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import BlockTuple


@runtime_checkable
class SectionSource(Protocol):
    """Anything that can hand its child blocks to the flattener.

    Membership is structural: an object qualifies by exposing
    ``extract_blocks`` whatever its concrete type, so containers with
    arbitrary header and footer payloads are all recognized the same way.

    Implementations must return the same sequence on every call and must
    not mutate anything while doing so.
    """

    def extract_blocks(self) -> BlockTuple | None:
        """Return the ordered child blocks, or ``None`` when there are none."""
        ...
