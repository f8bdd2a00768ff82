from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.polynomial import Polynomial


@dataclass
class PointLoad:
    magnitude: float  # Downward force [kN or kip]
    position: float  # Distance from the left end / fixed end [m or ft]

    def resultant(self) -> float:
        return self.magnitude

    def centroid(self) -> float:
        return self.position

    def breakpoints(self) -> Tuple[float, ...]:
        return (self.position,)

    def clipped(self, length: float) -> Optional["PointLoad"]:
        # Off the beam: nothing left to carry
        if not 0.0 <= self.position <= length:
            return None
        return self

    def left_of(self, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Shear and moment this load applies to the free body left of each section."""
        x = np.asarray(x, dtype=float)
        passed = x > self.position
        force = np.where(passed, self.magnitude, 0.0)
        moment = np.where(passed, self.magnitude * (x - self.position), 0.0)
        return force, moment

    def section_polynomials(self, x_mid: float) -> Tuple[Polynomial, Polynomial]:
        if x_mid <= self.position:
            return Polynomial([0.0]), Polynomial([0.0])
        return Polynomial([self.magnitude]), self.magnitude * Polynomial([-self.position, 1.0])
