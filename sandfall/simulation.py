"""
simulation.py - Falling sand simulation

Grains are dropped one at a time from a fixed source. Each grain tries to
move down, then down-left, then down-right, and comes to rest when all three
cells are taken. Two boundary policies decide how a run ends:

1. OpenField: nothing below the lowest rock, grains fall into the abyss
2. FlooredField: an infinite floor two rows below the lowest rock
"""
import logging
import time
from dataclasses import dataclass
from typing import AbstractSet, Dict, Optional, Set, Union

from .field import Field, lowest_wall_row, render_field
from .geometry import Point

logger = logging.getLogger(__name__)

OPEN_FIELD = "open"
BOUNDED = "bounded"


@dataclass
class SimulationConfig:
    """Configuration for the simulation."""
    source_x: int = 500
    source_y: int = 0
    floor_offset: int = 2                 # Floor row = lowest rock row + offset

    @property
    def source(self) -> Point:
        return Point(self.source_x, self.source_y)

    @classmethod
    def default(cls):
        return cls()

    @classmethod
    def from_source(cls, x: int, y: int):
        return cls(source_x=x, source_y=y)


@dataclass(frozen=True)
class AtRest:
    point: Point


@dataclass(frozen=True)
class Abyss:
    pass


GrainOutcome = Union[AtRest, Abyss]


@dataclass(frozen=True)
class OpenField:
    """No floor: a grain whose next cell is at or below `lowest_wall_row`
    can never be stopped."""
    lowest_wall_row: int

    def blocks(self, candidate: Point) -> bool:
        return False

    def escapes(self, candidate: Point) -> bool:
        return candidate.y >= self.lowest_wall_row


@dataclass(frozen=True)
class FlooredField:
    """Infinite floor at `floor_row`, spanning every column."""
    floor_row: int

    def blocks(self, candidate: Point) -> bool:
        return candidate.y >= self.floor_row

    def escapes(self, candidate: Point) -> bool:
        return False


BoundaryPolicy = Union[OpenField, FlooredField]


def next_position(
    field: AbstractSet[Point],
    p: Point,
    policy: BoundaryPolicy
) -> Optional[Point]:
    """
    Find the next place a grain at `p` will fall to.

    Tries straight down, then down-left, then down-right. Returns None when
    all three are occupied (or rejected by the policy), i.e. the grain rests.
    """
    for candidate in (p.below(), p.below_left(), p.below_right()):
        if candidate not in field and not policy.blocks(candidate):
            return candidate
    return None


def settle_grain(
    field: AbstractSet[Point],
    start: Point,
    policy: BoundaryPolicy
) -> GrainOutcome:
    """Step a grain from `start` until it rests or falls into the abyss."""
    pt = start
    while True:
        nxt = next_position(field, pt, policy)
        if nxt is None:
            return AtRest(pt)
        if policy.escapes(nxt):
            return Abyss()
        pt = nxt


def pour_until_abyss(field: Set[Point], source: Point, policy: BoundaryPolicy) -> int:
    """
    Drop grains until one falls into the abyss.

    Resting grains are added to `field` in place. Returns the number of
    grains that came to rest before the first one was lost.
    """
    count = 0
    while True:
        outcome = settle_grain(field, source, policy)
        if isinstance(outcome, Abyss):
            return count
        field.add(outcome.point)
        count += 1


def pour_until_blocked(field: Set[Point], source: Point, policy: BoundaryPolicy) -> int:
    """
    Drop grains until the pile reaches the source.

    Resting grains are added to `field` in place. The grain that comes to
    rest on the source itself is included in the returned count.
    """
    count = 0
    while True:
        outcome = settle_grain(field, source, policy)
        if isinstance(outcome, Abyss):
            raise RuntimeError(f"Grain fell into the abyss under {policy}")
        field.add(outcome.point)
        count += 1
        if outcome.point == source:
            return count


@dataclass
class SimulationResult:
    open_field_count: int
    bounded_count: int
    open_field_seconds: float = 0.0
    bounded_seconds: float = 0.0


class SandSimulator:
    """
    Runs both boundary policies over one rock field.

    Each run works on its own copy of the rock, so sand piled up by one
    policy is never seen by the other.
    """

    def __init__(self, rock: Field, config: Optional[SimulationConfig] = None):
        self.rock = frozenset(rock)
        self.config = config or SimulationConfig.default()

        # Final field of the latest run of each policy
        self.fields: Dict[str, Set[Point]] = {}

    @property
    def source(self) -> Point:
        return self.config.source

    def open_field_policy(self) -> OpenField:
        return OpenField(lowest_wall_row(self.rock))

    def floored_policy(self) -> FlooredField:
        return FlooredField(lowest_wall_row(self.rock) + self.config.floor_offset)

    def run_open_field(self) -> int:
        """Count grains at rest before sand starts flowing into the abyss."""
        field = set(self.rock)
        policy = self.open_field_policy()
        count = pour_until_abyss(field, self.source, policy)
        logger.info(f"Open field: {count} grains at rest ({policy})")
        self.fields[OPEN_FIELD] = field
        self._log_field(field)
        return count

    def run_bounded(self) -> int:
        """Count grains at rest once the pile blocks the source."""
        field = set(self.rock)
        policy = self.floored_policy()
        count = pour_until_blocked(field, self.source, policy)
        logger.info(f"Bounded field: {count} grains at rest ({policy})")
        self.fields[BOUNDED] = field
        self._log_field(field)
        return count

    def run_all(self) -> SimulationResult:
        """Run the open field, then the bounded field."""
        start = time.time()
        open_count = self.run_open_field()
        open_seconds = time.time() - start

        start = time.time()
        bounded_count = self.run_bounded()
        bounded_seconds = time.time() - start

        return SimulationResult(
            open_field_count=open_count,
            bounded_count=bounded_count,
            open_field_seconds=open_seconds,
            bounded_seconds=bounded_seconds,
        )

    def _log_field(self, field: Set[Point]) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final field:\n%s", render_field(self.rock, field, self.source))
