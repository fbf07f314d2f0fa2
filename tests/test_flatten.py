"""Tests for the depth-first flattening of nested sections."""

from __future__ import annotations

from stackboard.board import Block, Section, Text, flatten, iter_leaves


def _texts(blocks: list[Block]) -> list[str]:
    return [b.content.value for b in blocks]


def _nest(depth: int, *items: object) -> Section:
    """Wrap ``items`` in ``depth`` levels of sections."""

    section = Section.titled("level", lambda: items)
    for _ in range(depth - 1):
        inner = section
        section = Section.titled("level", lambda: [inner])
    return section


def test_empty_input() -> None:
    assert flatten([]) == []


def test_leaves_are_kept_in_order() -> None:
    blocks = [Block.wrap(Text(t)) for t in "abc"]
    assert flatten(blocks) == blocks


def test_nested_sections_are_spliced() -> None:
    a, b, c = (Block.wrap(Text(t)) for t in "abc")
    nested = Section([a, b], header=Text("N"))
    blocks = [Block.wrap(nested), c]

    flat = flatten(blocks)

    assert flat == [a, b, c]
    assert all(not block.is_section for block in flat)


def test_depth_first_left_to_right() -> None:
    tree = [
        Text("1"),
        Section([Text("2"), Section([Text("3"), Text("4")]), Text("5")]),
        Section([]),
        Text("6"),
    ]
    assert _texts(flatten(Block.wrap(t) for t in tree)) == list("123456")


def test_empty_section_is_dropped() -> None:
    blocks = [
        Block.wrap(Text("before")),
        Block.wrap(Section.titled("Empty", lambda: [])),
        Block.wrap(Text("after")),
    ]
    assert _texts(flatten(blocks)) == ["before", "after"]


def test_idempotent_on_flat_input() -> None:
    blocks = [Block.wrap(Section([Text("a"), Section([Text("b")])]))]
    once = flatten(blocks)
    assert flatten(once) == once


def test_depth_does_not_change_result() -> None:
    x = Block.wrap(Text("x"))
    deep = flatten([Block.wrap(_nest(5, x))])
    shallow = flatten([Block.wrap(_nest(1, x))])
    assert deep == shallow == [x]


def test_flatten_does_not_mutate_input() -> None:
    section = Section([Text("a"), Section([Text("b")])])
    before = section.blocks
    flatten([Block.wrap(section)])
    assert section.blocks is before
    assert len(section.blocks) == 2


def test_iter_leaves_is_lazy() -> None:
    leaves = iter_leaves([Block.wrap(Section([Text("a"), Text("b")]))])
    assert next(leaves).content == Text("a")
    assert next(leaves).content == Text("b")


def test_source_without_children_is_kept() -> None:
    """A source reporting ``None`` stays in the output like a leaf."""

    class Placeholder:
        def extract_blocks(self) -> None:
            return None

    block = Block.wrap(Placeholder())
    assert block.is_section
    assert flatten([block]) == [block]


def test_deep_nesting_beyond_recursion_limit() -> None:
    x = Block.wrap(Text("x"))
    assert flatten([Block.wrap(_nest(3000, x))]) == [x]


def test_classes_and_attributes_are_kept_as_leaves() -> None:
    class Labelled:
        extract_blocks = 5

    blocks = [Block.wrap(Section), Block.wrap(Labelled())]
    assert flatten(blocks) == blocks
