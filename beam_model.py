from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Tuple, Union

from distributed_load import DistributedLoad
from point_load import PointLoad
from triangular_load import TriangularLoad

SIMPLY_SUPPORTED = "simply-supported"
CANTILEVER = "cantilever"
SUPPORT_KINDS = (SIMPLY_SUPPORTED, CANTILEVER)

SupportKind = Literal["simply-supported", "cantilever"]
Load = Union[PointLoad, DistributedLoad, TriangularLoad]


@dataclass
class BeamModel:
    length: float
    support_kind: SupportKind = SIMPLY_SUPPORTED
    left_support: float = 0.0
    right_support: float = 0.0
    point_loads: List[PointLoad] = field(default_factory=list)
    distributed_loads: List[DistributedLoad] = field(default_factory=list)
    triangular_loads: List[TriangularLoad] = field(default_factory=list)

    @property
    def is_cantilever(self) -> bool:
        return self.support_kind == CANTILEVER

    @property
    def supports(self) -> Tuple[float, float]:
        """Support positions in ascending order."""
        if self.left_support > self.right_support:
            return self.right_support, self.left_support
        return self.left_support, self.right_support

    @property
    def span(self) -> float:
        left, right = self.supports
        return right - left

    @property
    def loads(self) -> List[Load]:
        """Applied loads, each cut down to the part lying on the beam."""
        return [load for _, load in self.labelled_loads()]

    def labelled_loads(self, clipped: bool = True) -> Iterator[Tuple[str, Load]]:
        length = max(0.0, float(self.length))
        for prefix, group in (
            ("P", self.point_loads),
            ("W", self.distributed_loads),
            ("T", self.triangular_loads),
        ):
            for i, load in enumerate(group, start=1):
                if clipped:
                    load = load.clipped(length)
                    if load is None:
                        continue
                yield f"{prefix}{i}", load

    def total_load(self) -> float:
        return sum(load.resultant() for load in self.loads)

    def breakpoints(self) -> List[float]:
        """Positions where V(x) or M(x) change form, clipped to the beam."""
        points = {0.0, float(self.length)}
        if not self.is_cantilever:
            points.update(self.supports)
        for load in self.loads:
            points.update(load.breakpoints())
        return sorted(p for p in points if 0.0 <= p <= self.length)
