from dataclasses import replace
from typing import Dict, Tuple

from distributed_load import DistributedLoad
from errors import UnknownUnits
from point_load import PointLoad
from triangular_load import TriangularLoad

SI = "SI"
IMPERIAL = "Imperial"
UNIT_SYSTEMS = (SI, IMPERIAL)

# SI -> Imperial multipliers
LENGTH_FACTOR = 3.28084  # m -> ft
FORCE_FACTOR = 0.224809  # kN -> kip
DISTRIBUTED_FACTOR = 0.068522  # kN/m -> kip/ft

UNIT_LABELS = {
    SI: {"length": "m", "force": "kN", "distributed": "kN/m", "moment": "kN·m"},
    IMPERIAL: {"length": "ft", "force": "kip", "distributed": "kip/ft", "moment": "kip·ft"},
}


def check_units(units: str) -> str:
    if units not in UNIT_SYSTEMS:
        raise UnknownUnits(f"units must be one of {UNIT_SYSTEMS}, got {units!r}")
    return units


def unit_labels(units: str) -> Dict[str, str]:
    return UNIT_LABELS[check_units(units)]


def conversion_factors(from_units: str, to_units: str) -> Tuple[float, float, float]:
    """(length, force, distributed) multipliers from one system to the other."""
    check_units(from_units)
    check_units(to_units)
    if from_units == to_units:
        return 1.0, 1.0, 1.0
    if to_units == IMPERIAL:
        return LENGTH_FACTOR, FORCE_FACTOR, DISTRIBUTED_FACTOR
    return 1 / LENGTH_FACTOR, 1 / FORCE_FACTOR, 1 / DISTRIBUTED_FACTOR


def convert_value(value: float, factor: float, decimal_places: int) -> float:
    return round(value * factor, decimal_places)


def format_value(value: float, decimal_places: int) -> str:
    rounded = round(float(value), decimal_places)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.{decimal_places}f}"


def convert_config(config, to_units: str):
    """Return a copy of ``config`` with every quantity expressed in ``to_units``.

    Each value is rounded to ``config.decimal_places`` after conversion, so
    converting back and forth drifts by up to the rounding step.
    """
    if config.units == check_units(to_units):
        return config
    f_len, f_force, f_dist = conversion_factors(config.units, to_units)
    dp = config.decimal_places

    def length(v):
        return convert_value(v, f_len, dp)

    return replace(
        config,
        length=length(config.length),
        left_support=length(config.left_support),
        right_support=length(config.right_support),
        point_loads=[
            PointLoad(magnitude=convert_value(p.magnitude, f_force, dp), position=length(p.position))
            for p in config.point_loads
        ],
        distributed_loads=[
            DistributedLoad(start=length(d.start), end=length(d.end), magnitude=convert_value(d.magnitude, f_dist, dp))
            for d in config.distributed_loads
        ],
        triangular_loads=[
            TriangularLoad(
                start=length(t.start),
                end=length(t.end),
                magnitude=convert_value(t.magnitude, f_dist, dp),
                start_magnitude=convert_value(t.start_magnitude, f_dist, dp),
            )
            for t in config.triangular_loads
        ],
        units=to_units,
    )
