import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np

from beam_config import BeamConfig
from beam_model import BeamModel
from derivation import Derivation, narrate, reaction_text
from reactions import Reactions, solve_reactions
from shear_moment import Extrema, extrema, shear_moment
from units import unit_labels

logger = logging.getLogger(__name__)


@dataclass
class BeamResult:
    config: BeamConfig
    model: BeamModel
    reactions: Reactions
    x: np.ndarray
    shear: np.ndarray
    moment: np.ndarray
    extrema: Extrema
    derivation: Derivation

    @property
    def series(self) -> List[Tuple[float, float, float]]:
        return list(zip(self.x.tolist(), self.shear.tolist(), self.moment.tolist()))

    @property
    def labels(self) -> List[str]:
        return [f"{xi:.2f}" for xi in self.x]

    @property
    def reaction_text(self) -> str:
        return reaction_text(self.reactions, self.config.units, self.config.decimal_places)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reactions": self.reactions.as_dict(),
            "reactionText": self.reaction_text,
            "series": [list(row) for row in self.series],
            "labels": self.labels,
            "extrema": {
                "maxAbsShear": self.extrema.max_abs_shear,
                "maxAbsMoment": self.extrema.max_abs_moment,
            },
            "steps": list(self.derivation.steps),
            "equations": self.derivation.equations,
            "units": unit_labels(self.config.units),
        }


def analyze(config: BeamConfig) -> BeamResult:
    """Solve, sample and narrate one configuration from scratch."""
    model = config.to_model()
    reactions = solve_reactions(model)
    x, shear, moment = shear_moment(model, reactions, resolution=config.resolution)
    derivation = narrate(model, reactions, units=config.units, decimal_places=config.decimal_places)
    logger.info(
        "Analyzed %s beam L=%g with %d loads: %s",
        model.support_kind,
        model.length,
        len(model.loads),
        reactions.as_dict(),
    )
    return BeamResult(
        config=config,
        model=model,
        reactions=reactions,
        x=x,
        shear=shear,
        moment=moment,
        extrema=extrema(x, shear, moment),
        derivation=derivation,
    )
