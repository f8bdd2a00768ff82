from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple

from beam_model import SIMPLY_SUPPORTED, SUPPORT_KINDS, BeamModel, SupportKind
from distributed_load import DistributedLoad
from errors import BeamInputError, DegenerateSpan, InvalidGeometry, InvalidMagnitude
from point_load import PointLoad
from shear_moment import DEFAULT_RESOLUTION
from triangular_load import TriangularLoad
from units import SI, check_units

logger = logging.getLogger(__name__)

MAX_DECIMAL_PLACES = 4


def _number(value: Any, name: str) -> float:
    """Coerce form input to a finite float, falling back to 0."""
    if isinstance(value, bool):
        value = None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric %s %r treated as 0", name, value)
        return 0.0
    if not math.isfinite(number):
        logger.warning("Non-finite %s %r treated as 0", name, value)
        return 0.0
    return number


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _entries(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    entries = []
    for entry in data.get(key) or []:
        if not isinstance(entry, Mapping):
            logger.warning("Skipping %s entry %r: not a mapping", key, entry)
            continue
        entries.append(entry)
    return entries


def _span_entry(entry: Mapping[str, Any], key: str, length: float, strict: bool) -> Tuple[float, float, float]:
    """Read start, end and magnitude of a UDL or triangular load entry.

    An end of 0 (or none at all) means unset and runs the load to the end of the
    beam. This is applied before reversed ranges are swapped, so
    ``{start: 4, end: 0}`` covers ``[4, length]``, not ``[0, 4]``.
    """
    magnitude = _number(entry.get("magnitude", 0.0), f"{key} magnitude")
    start = _number(entry.get("start", 0.0), f"{key} start")
    end = _number(entry.get("end", 0.0), f"{key} end")
    if end == 0:
        end = length
    if strict and start > end:
        raise InvalidGeometry(f"{key} start {start} is past its end {end}")
    return start, end, magnitude


@dataclass
class BeamConfig:
    length: float = 6.0
    support_kind: SupportKind = SIMPLY_SUPPORTED
    left_support: float = 0.0
    right_support: float = 6.0
    point_loads: List[PointLoad] = field(default_factory=list)
    distributed_loads: List[DistributedLoad] = field(default_factory=list)
    triangular_loads: List[TriangularLoad] = field(default_factory=list)
    units: str = SI
    decimal_places: int = 3
    resolution: int = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        if self.support_kind not in SUPPORT_KINDS:
            raise InvalidGeometry(f"support kind must be one of {SUPPORT_KINDS}, got {self.support_kind!r}")
        check_units(self.units)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], strict: bool = False) -> "BeamConfig":
        """Build a configuration from the external (JSON-style) input mapping.

        Missing fields take their defaults, unusable numbers become 0. With
        ``strict`` the first violated invariant is raised instead of repaired.
        """
        length = _number(data.get("length", cls.length), "length")

        supports = data.get("supports") or {}
        if not isinstance(supports, Mapping):
            logger.warning("Ignoring supports %r: not a mapping", supports)
            supports = {}
        left = _number(supports.get("left", 0.0), "left support")
        right = _number(supports.get("right", length), "right support")
        if strict and left > right:
            raise InvalidGeometry(f"left support {left} is right of the right support {right}")

        point_loads = [
            PointLoad(
                magnitude=_number(entry.get("magnitude", 0.0), "point load magnitude"),
                position=_number(entry.get("position", 0.0), "point load position"),
            )
            for entry in _entries(data, "pointLoads")
        ]
        distributed_loads = []
        for entry in _entries(data, "udlLoads"):
            start, end, magnitude = _span_entry(entry, "UDL", length, strict)
            distributed_loads.append(DistributedLoad(start=start, end=end, magnitude=magnitude))
        triangular_loads = []
        for entry in _entries(data, "triangularLoads"):
            start, end, magnitude = _span_entry(entry, "triangular load", length, strict)
            triangular_loads.append(TriangularLoad(start=start, end=end, magnitude=magnitude))

        decimal_places = int(_number(data.get("decimalPlaces", cls.decimal_places), "decimal places"))
        resolution = int(_number(data.get("resolution", cls.resolution), "resolution"))
        if strict and not 0 <= decimal_places <= MAX_DECIMAL_PLACES:
            raise BeamInputError(f"decimal places must be 0-{MAX_DECIMAL_PLACES}, got {decimal_places}")
        if strict and resolution < 1:
            raise BeamInputError(f"resolution must be at least 1, got {resolution}")

        config = cls(
            length=length,
            support_kind=data.get("supportKind", SIMPLY_SUPPORTED),
            left_support=left,
            right_support=right,
            point_loads=point_loads,
            distributed_loads=distributed_loads,
            triangular_loads=triangular_loads,
            units=data.get("units", SI),
            decimal_places=int(_clamp(decimal_places, 0, MAX_DECIMAL_PLACES)),
            resolution=max(1, resolution),
        )
        if strict:
            config.validate()
        return config

    def validate(self) -> None:
        """Raise the first physical invariant this configuration breaks."""
        if self.length <= 0:
            raise InvalidGeometry(f"beam length must be positive, got {self.length}")

        def check_position(name: str, value: float) -> None:
            if not 0 <= value <= self.length:
                raise InvalidGeometry(f"{name} {value} lies outside the beam [0, {self.length}]")

        for label, load in self._unclamped_model().labelled_loads(clipped=False):
            if load.magnitude < 0:
                raise InvalidMagnitude(f"{label} magnitude must not be negative, got {load.magnitude}")
            for point in load.breakpoints():
                check_position(f"{label} position", point)

        if self.support_kind == SIMPLY_SUPPORTED:
            check_position("left support", self.left_support)
            check_position("right support", self.right_support)
            if self.left_support == self.right_support:
                raise DegenerateSpan(f"both supports sit at x = {self.left_support}")

    def _unclamped_model(self) -> BeamModel:
        return BeamModel(
            length=self.length,
            support_kind=self.support_kind,
            left_support=self.left_support,
            right_support=self.right_support,
            point_loads=list(self.point_loads),
            distributed_loads=list(self.distributed_loads),
            triangular_loads=list(self.triangular_loads),
        )

    def to_model(self) -> BeamModel:
        """Normalised model: supports sorted and clamped into the beam, magnitudes non-negative.

        Loads keep their positions; the model cuts them down to the part that lies
        on the beam.
        """
        length = max(0.0, self.length)
        left, right = sorted(
            (_clamp(self.left_support, 0.0, length), _clamp(self.right_support, 0.0, length))
        )
        return BeamModel(
            length=length,
            support_kind=self.support_kind,
            left_support=left,
            right_support=right,
            point_loads=[
                PointLoad(magnitude=max(0.0, p.magnitude), position=p.position)
                for p in self.point_loads
            ],
            distributed_loads=[
                DistributedLoad(start=d.start, end=d.end, magnitude=max(0.0, d.magnitude))
                for d in self.distributed_loads
            ],
            triangular_loads=[
                TriangularLoad(
                    start=t.start,
                    end=t.end,
                    magnitude=max(0.0, t.magnitude),
                    start_magnitude=max(0.0, t.start_magnitude),
                )
                for t in self.triangular_loads
            ],
        )

