"""Section grouping child blocks under a header and a footer."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .block import to_blocks
from .content import EMPTY, Text
from .types import BlockTuple, ContentFactory, PayloadFactory


@define(slots=True, frozen=True, eq=False)
class Section:
    """Container of child blocks decorated with a header and a footer.

    Satisfies ``SectionSource`` through ``extract_blocks``. Raw content
    given in ``blocks`` is wrapped on the way in.

    Attributes:
        blocks: Ordered child blocks, fixed at construction.
        header: Payload shown above the body.
        footer: Payload shown below the body.
    """

    blocks: BlockTuple = field(factory=tuple, converter=to_blocks, repr=False)
    header: Any = EMPTY
    footer: Any = EMPTY

    @classmethod
    def construct(
        cls,
        content: ContentFactory,
        header: PayloadFactory | None = None,
        footer: PayloadFactory | None = None,
    ) -> Section:
        """Build a section from declarative factories.

        Args:
            content: Callable returning the child items.
            header: Callable returning the header payload.
            footer: Callable returning the footer payload.

        Returns:
            New section storing each factory's output verbatim. Missing
            header or footer factories yield ``EMPTY``.
        """

        # Each factory runs exactly once, in declaration order.
        blocks = content()
        header_payload = header() if header is not None else EMPTY
        footer_payload = footer() if footer is not None else EMPTY
        return cls(blocks, header=header_payload, footer=footer_payload)

    @classmethod
    def titled(cls, title: str, content: ContentFactory) -> Section:
        """Build a section with a text header and no footer."""

        return cls(content(), header=Text(title), footer=EMPTY)

    @property
    def title(self) -> str | None:
        if isinstance(self.header, Text):
            return self.header.value
        return None

    def extract_blocks(self) -> BlockTuple:
        return self.blocks
