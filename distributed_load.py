from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.polynomial import Polynomial


@dataclass
class DistributedLoad:
    start: float  # Start position along beam [m or ft]
    end: float    # End position along beam [m or ft]
    magnitude: float  # Constant intensity [kN/m or kip/ft]

    def __post_init__(self) -> None:
        if self.start > self.end:
            self.start, self.end = self.end, self.start

    @property
    def loaded_length(self) -> float:
        return self.end - self.start

    def resultant(self) -> float:
        return self.magnitude * self.loaded_length

    def centroid(self) -> float:
        return self.start + self.loaded_length / 2

    def breakpoints(self) -> Tuple[float, ...]:
        return (self.start, self.end)

    def clipped(self, length: float) -> Optional["DistributedLoad"]:
        """The part of this load lying on a beam ``[0, length]``, or None."""
        start, end = max(self.start, 0.0), min(self.end, length)
        if start > end:
            return None
        if (start, end) == (self.start, self.end):
            return self
        return DistributedLoad(start=start, end=end, magnitude=self.magnitude)

    def left_of(self, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Shear and moment of the loaded part left of each section.

        ``d`` is the loaded length that lies left of the cut. Its resultant
        ``w*d`` acts at the middle of that length.
        """
        x = np.asarray(x, dtype=float)
        d = np.clip(x - self.start, 0.0, self.loaded_length)
        force = self.magnitude * d
        moment = force * (x - self.start - d / 2)
        return force, moment

    def section_polynomials(self, x_mid: float) -> Tuple[Polynomial, Polynomial]:
        if x_mid <= self.start or self.loaded_length <= 0:
            return Polynomial([0.0]), Polynomial([0.0])
        if x_mid >= self.end:
            total = self.resultant()
            return Polynomial([total]), total * Polynomial([-self.centroid(), 1.0])
        d = Polynomial([-self.start, 1.0])
        return self.magnitude * d, self.magnitude * d**2 / 2
