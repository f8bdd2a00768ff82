from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.polynomial import Polynomial


@dataclass
class TriangularLoad:
    """Load varying linearly from ``start_magnitude`` at ``start`` to ``magnitude`` at ``end``.

    ``start_magnitude`` is 0 for a true triangle. A triangle cut off by a beam
    end keeps the intensities of the part that remains, which can leave a
    trapezoid.
    """

    start: float
    end: float
    magnitude: float  # Intensity at ``end`` [kN/m or kip/ft]
    start_magnitude: float = 0.0  # Intensity at ``start``

    def __post_init__(self) -> None:
        if self.start > self.end:
            self.start, self.end = self.end, self.start

    @property
    def loaded_length(self) -> float:
        return self.end - self.start

    @property
    def slope(self) -> float:
        # Intensity gained per unit length
        if self.loaded_length <= 0:
            return 0.0
        return (self.magnitude - self.start_magnitude) / self.loaded_length

    def intensity_at(self, position: float) -> float:
        return self.start_magnitude + self.slope * (position - self.start)

    def resultant(self) -> float:
        return (self.start_magnitude + self.magnitude) * self.loaded_length / 2

    def centroid(self) -> float:
        q0, q1 = self.start_magnitude, self.magnitude
        if q0 + q1 == 0:
            return self.start + 2 * self.loaded_length / 3
        # Two thirds of the way from the zero-intensity end for a triangle
        return self.start + self.loaded_length * (q0 + 2 * q1) / (3 * (q0 + q1))

    def breakpoints(self) -> Tuple[float, ...]:
        return (self.start, self.end)

    def clipped(self, length: float) -> Optional["TriangularLoad"]:
        """The part of this load lying on a beam ``[0, length]``, or None."""
        start, end = max(self.start, 0.0), min(self.end, length)
        if start > end:
            return None
        if (start, end) == (self.start, self.end):
            return self
        return TriangularLoad(
            start=start,
            end=end,
            magnitude=self.intensity_at(end),
            start_magnitude=self.intensity_at(start),
        )

    def left_of(self, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Shear and moment of the loaded part left of each section.

        Inside the load the partial triangle ``k*d**2/2`` acts at ``d/3`` back
        from the cut, on top of the ``q0*d`` rectangle at ``d/2``. Past the end
        the whole resultant acts at the centroid.
        """
        x = np.asarray(x, dtype=float)
        q0, k = self.start_magnitude, self.slope
        d = np.clip(x - self.start, 0.0, self.loaded_length)
        inside = x < self.end
        force = np.where(inside, q0 * d + k * d**2 / 2, self.resultant())
        moment = np.where(
            inside,
            q0 * d**2 / 2 + k * d**3 / 6,
            self.resultant() * (x - self.centroid()),
        )
        return force, moment

    def section_polynomials(self, x_mid: float) -> Tuple[Polynomial, Polynomial]:
        if x_mid <= self.start or self.loaded_length <= 0:
            return Polynomial([0.0]), Polynomial([0.0])
        if x_mid >= self.end:
            total = self.resultant()
            return Polynomial([total]), total * Polynomial([-self.centroid(), 1.0])
        q0, k = self.start_magnitude, self.slope
        d = Polynomial([-self.start, 1.0])
        return q0 * d + k * d**2 / 2, q0 * d**2 / 2 + k * d**3 / 6
