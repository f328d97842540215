"""
validate.py - Scan and result validation
"""
from typing import AbstractSet, Sequence, Tuple

from shapely.geometry import Point as ShapelyPoint

from .geometry import Point, Polyline, segments, to_multilinestring


def validate_scan(
    polylines: Sequence[Polyline],
    source: Point
) -> Tuple[bool, str]:
    """Validate a parsed scan against the given sand source."""

    for i, polyline in enumerate(polylines):
        for p1, p2 in segments(polyline):
            if p1.x != p2.x and p1.y != p2.y:
                return False, f"Path {i}: segment {p1} -> {p2} is diagonal"

    rock = to_multilinestring(polylines)
    if rock.is_empty:
        return False, "Scan has no rock"

    if rock.intersects(ShapelyPoint(source.x, source.y)):
        return False, f"Source {source} lies on rock"

    return True, "OK"


def check_field_growth(
    rock: AbstractSet[Point],
    field: AbstractSet[Point],
    count: int
) -> bool:
    """Final field keeps all rock and holds exactly `count` grains of sand."""
    return rock <= field and len(field) == len(rock) + count
