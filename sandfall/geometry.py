"""
geometry.py - Integer grid geometry for the cave scan

Points are (x, y) with y growing downward, matching the scan format
"498,4 -> 498,6 -> 496,6".
"""
from typing import List, NamedTuple, Sequence, Tuple

from shapely.geometry import LineString, MultiLineString

POINT_DELIMITER = ","
PATH_ARROW = " -> "


class MalformedPoint(ValueError):
    """A vertex that is not of the form "<int>,<int>"."""


class MalformedPath(ValueError):
    """Two consecutive vertices that are neither horizontal nor vertical."""


class Point(NamedTuple):
    x: int
    y: int

    def below(self) -> "Point":
        return Point(self.x, self.y + 1)

    def below_left(self) -> "Point":
        return Point(self.x - 1, self.y + 1)

    def below_right(self) -> "Point":
        return Point(self.x + 1, self.y + 1)


Polyline = List[Point]


def parse_point(text: str) -> Point:
    """Parse "504,23" into Point(504, 23)."""
    head, sep, tail = text.strip().partition(POINT_DELIMITER)
    if not sep:
        raise MalformedPoint(f"No '{POINT_DELIMITER}' in vertex {text!r}")
    try:
        return Point(int(head), int(tail))
    except ValueError:
        raise MalformedPoint(f"Vertex {text!r} is not a pair of integers") from None


def parse_polyline(line: str) -> Polyline:
    """Parse one scan line into its list of vertices."""
    return [parse_point(chunk) for chunk in line.strip().split(PATH_ARROW)]


def rasterize(p1: Point, p2: Point) -> List[Point]:
    """
    Draw a straight line between two vertices.

    The vertices must lie in the same column (vertical line) or the same
    row (horizontal line). The result is inclusive of both ends and ordered
    from the smaller to the larger coordinate, so the vertex order does not
    matter.
    """
    if p1.x == p2.x:
        lo, hi = sorted((p1.y, p2.y))
        return [Point(p1.x, y) for y in range(lo, hi + 1)]
    if p1.y == p2.y:
        lo, hi = sorted((p1.x, p2.x))
        return [Point(x, p1.y) for x in range(lo, hi + 1)]
    raise MalformedPath(f"Segment {p1} -> {p2} is not horizontal or vertical")


def segments(polyline: Sequence[Point]) -> List[Tuple[Point, Point]]:
    """Consecutive vertex pairs of a polyline."""
    return list(zip(polyline, polyline[1:]))


def to_multilinestring(polylines: Sequence[Polyline]) -> MultiLineString:
    """Shapely view of the rock structure. Polylines with fewer than two
    vertices draw no rock and are left out."""
    lines = [
        LineString([(p.x, p.y) for p in polyline])
        for polyline in polylines
        if len(polyline) >= 2
    ]
    return MultiLineString(lines)


def scan_bounds(polylines: Sequence[Polyline]) -> Tuple[int, int, int, int]:
    """Bounding box (min_x, min_y, max_x, max_y) of the rock structure."""
    shape = to_multilinestring(polylines)
    if shape.is_empty:
        return (0, 0, 0, 0)
    min_x, min_y, max_x, max_y = shape.bounds
    return (int(min_x), int(min_y), int(max_x), int(max_y))
