import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from beam_model import BeamModel
from reactions import Reactions, solve_reactions

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 200
SAMPLE_DECIMALS = 6


@dataclass(frozen=True)
class Extrema:
    max_abs_shear: float
    max_abs_moment: float
    shear_position: float = 0.0
    moment_position: float = 0.0


def _support_sections(x: np.ndarray, position: float, length: float) -> np.ndarray:
    # A support at the far end sits beyond the last sampled section
    if position >= length:
        return np.zeros_like(x, dtype=bool)
    return x >= position


def shear_moment(
    model: BeamModel,
    reactions: Optional[Reactions] = None,
    resolution: int = DEFAULT_RESOLUTION,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sample shear V(x) and moment M(x) at ``resolution + 1`` sections.

    Each section sums the reactions and loads on the free body to its left.
    Loads act downward.
    """
    if reactions is None:
        reactions = solve_reactions(model)
    resolution = max(1, int(resolution))
    L = max(0.0, float(model.length))

    x = np.linspace(0.0, L, resolution + 1)
    shear = np.zeros_like(x)
    moment = np.zeros_like(x)

    if model.is_cantilever:
        shear += reactions.ra
        moment += reactions.ra * x + reactions.m_fix
    else:
        for position, R in zip(model.supports, (reactions.ra, reactions.rb)):
            active = _support_sections(x, position, L)
            shear += np.where(active, R, 0.0)
            moment += np.where(active, R * (x - position), 0.0)

    for load in model.loads:
        force, load_moment = load.left_of(x)
        shear -= force
        moment -= load_moment

    if model.is_cantilever:
        # Shear measured from the fixed end outward
        shear = -shear

    shear = np.round(shear, SAMPLE_DECIMALS) + 0.0
    moment = np.round(moment, SAMPLE_DECIMALS) + 0.0
    logger.debug("Sampled %d sections over L=%g", x.size, L)
    return x, shear, moment


def extrema(x: np.ndarray, shear: np.ndarray, moment: np.ndarray) -> Extrema:
    """Largest |V| and |M| over the samples and where they occur."""
    if len(x) == 0:
        return Extrema(0.0, 0.0)
    i_v = int(np.argmax(np.abs(shear)))
    i_m = int(np.argmax(np.abs(moment)))
    return Extrema(
        max_abs_shear=float(abs(shear[i_v])),
        max_abs_moment=float(abs(moment[i_m])),
        shear_position=float(x[i_v]),
        moment_position=float(x[i_m]),
    )
