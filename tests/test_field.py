import itertools

import pytest

from sandfall.field import build_field, lowest_wall_row, render_field
from sandfall.geometry import MalformedPath, Point


def test_build_field_example(example_lines):
    field = build_field(example_lines)
    assert isinstance(field, frozenset)
    # 3 + 2 (first path, corner shared) + 2 + 5 + 8 (second path, corners shared)
    assert len(field) == 20
    assert Point(498, 5) in field
    assert Point(494, 9) in field
    assert Point(500, 0) not in field


def test_build_field_order_independent(example_lines):
    extra = "490,12 -> 510,12"
    lines = example_lines + [extra]
    expected = build_field(lines)
    for ordering in itertools.permutations(lines):
        assert build_field(ordering) == expected


def test_build_field_skips_blank_lines(example_lines):
    assert build_field(["", *example_lines, "   "]) == build_field(example_lines)


def test_build_field_overlapping_paths_union():
    field = build_field(["0,0 -> 4,0", "2,0 -> 6,0"])
    assert field == frozenset(Point(x, 0) for x in range(7))


def test_build_field_diagonal_fails():
    with pytest.raises(MalformedPath):
        build_field(["0,0 -> 3,3"])


def test_lowest_wall_row(example_lines):
    assert lowest_wall_row(build_field(example_lines)) == 9


def test_lowest_wall_row_empty():
    with pytest.raises(ValueError):
        lowest_wall_row(frozenset())


def test_render_field():
    rock = frozenset([Point(0, 2), Point(1, 2), Point(2, 2)])
    field = set(rock) | {Point(1, 1)}
    assert render_field(rock, field, Point(1, 0)) == "\n".join([
        ".+.",
        ".o.",
        "###",
    ])


def test_render_field_source_covered_by_sand():
    rock = frozenset([Point(0, 1)])
    field = set(rock) | {Point(0, 0)}
    assert render_field(rock, field, Point(0, 0)) == "o\n#"


def test_render_field_empty():
    assert render_field(frozenset(), set()) == ""
