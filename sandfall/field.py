"""
field.py - Sparse occupancy field built from the cave scan
"""
import logging
from typing import AbstractSet, FrozenSet, Iterable, Optional

import numpy as np

from .geometry import Point, parse_polyline, rasterize, segments

logger = logging.getLogger(__name__)

Field = FrozenSet[Point]

ROCK = "#"
SAND = "o"
SOURCE = "+"
AIR = "."


def build_field(lines: Iterable[str]) -> Field:
    """Union the rasterized segments of every scan line into one rock field."""
    points = set()
    n_lines = 0
    for line in lines:
        if not line.strip():
            continue
        n_lines += 1
        for p1, p2 in segments(parse_polyline(line)):
            points.update(rasterize(p1, p2))

    logger.info(f"Built rock field: {len(points)} cells from {n_lines} paths")
    return frozenset(points)


def lowest_wall_row(field: AbstractSet[Point]) -> int:
    """Largest y (deepest row) occupied by the field."""
    if not field:
        raise ValueError("Field has no rock")
    return max(p.y for p in field)


def render_field(
    rock: AbstractSet[Point],
    field: AbstractSet[Point],
    source: Optional[Point] = None
) -> str:
    """
    Draw the field as text, one row per line.

    Cells in `rock` print as '#', any other cell of `field` as 'o' (sand),
    the source as '+' and everything else as '.'.
    """
    cells = set(field) | set(rock)
    if source is not None:
        cells.add(source)
    if not cells:
        return ""

    coords = np.array(list(cells))
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)

    grid = np.full((max_y - min_y + 1, max_x - min_x + 1), AIR, dtype="<U1")
    for p in field:
        grid[p.y - min_y, p.x - min_x] = SAND
    for p in rock:
        grid[p.y - min_y, p.x - min_x] = ROCK
    if source is not None and source not in field:
        grid[source.y - min_y, source.x - min_x] = SOURCE

    return "\n".join("".join(row) for row in grid)
