import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from beam_model import CANTILEVER, SIMPLY_SUPPORTED, BeamModel, SupportKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reactions:
    support_kind: SupportKind
    ra: float
    rb: float = 0.0
    m_fix: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        if self.support_kind == CANTILEVER:
            return {"RA": self.ra, "Mfix": self.m_fix}
        return {"RA": self.ra, "RB": self.rb}


def solve_reactions(model: BeamModel) -> Reactions:
    """Solve support reactions from vertical force and moment equilibrium."""
    total_load = model.total_load()

    if model.is_cantilever:
        # Fixed end at x = 0 carries everything
        m_fix = -sum(load.resultant() * load.centroid() for load in model.loads)
        logger.debug("Cantilever reactions: RA=%g Mfix=%g", total_load, m_fix)
        return Reactions(CANTILEVER, ra=total_load, m_fix=m_fix)

    x1, x2 = model.supports
    span = x2 - x1
    moment_about_x1 = sum(load.resultant() * (load.centroid() - x1) for load in model.loads)

    # R1 + R2 = total_load
    # R2 * span = moment_about_x1
    if span == 0:
        logger.debug("Zero support span at x=%g, RB taken as 0", x1)
        R2 = 0.0
    else:
        R2 = moment_about_x1 / span
    R1 = total_load - R2
    logger.debug("Simply supported reactions: RA=%g RB=%g", R1, R2)
    return Reactions(SIMPLY_SUPPORTED, ra=R1, rb=R2)


def equilibrium_residuals(model: BeamModel, reactions: Reactions, about: float = 0.0) -> Tuple[float, float]:
    """Out-of-balance vertical force and moment about ``about``.

    Both are zero (to rounding) for a correctly solved beam. Upward reactions and
    anticlockwise moments count positive.
    """
    loads = model.loads
    force = -sum(load.resultant() for load in loads)
    moment = -sum(load.resultant() * (load.centroid() - about) for load in loads)

    if model.is_cantilever:
        force += reactions.ra
        moment += reactions.ra * (0.0 - about) - reactions.m_fix
    else:
        x1, x2 = model.supports
        force += reactions.ra + reactions.rb
        moment += reactions.ra * (x1 - about) + reactions.rb * (x2 - about)
    return force, moment
