"""
Falling sand simulator

Pours sand into a cave described by a scan of rock paths and counts how
many grains come to rest:
- with an open bottom, until sand starts falling into the abyss
- with an infinite floor, until the pile blocks the source
"""

from .geometry import (
    Point,
    MalformedPoint,
    MalformedPath,
    parse_point,
    parse_polyline,
    rasterize,
)

from .field import (
    build_field,
    lowest_wall_row,
    render_field,
)

from .simulation import (
    SandSimulator,
    SimulationConfig,
    SimulationResult,
    AtRest,
    Abyss,
    OpenField,
    FlooredField,
    next_position,
    settle_grain,
    pour_until_abyss,
    pour_until_blocked,
)

from .validate import (
    validate_scan,
    check_field_growth,
)

__version__ = "1.0.0"
