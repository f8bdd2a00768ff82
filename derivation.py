"""Step-by-step narration of a solved beam.

Statements are plain text with numbers rounded to the display precision. The
piecewise V(x)/M(x) equations are LaTeX and only exist for a beam carrying a
single load; combined load sets get empty equation strings.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from numpy.polynomial import Polynomial

from beam_model import CANTILEVER, BeamModel, Load
from distributed_load import DistributedLoad
from point_load import PointLoad
from reactions import Reactions
from units import SI, format_value, unit_labels


@dataclass
class Derivation:
    steps: List[str] = field(default_factory=list)
    shear: str = ""
    moment: str = ""

    @property
    def equations(self) -> Dict[str, str]:
        return {"shear": self.shear, "moment": self.moment}


def _active_loads(model: BeamModel) -> List[Tuple[str, Load]]:
    return [(label, load) for label, load in model.labelled_loads() if load.resultant() > 0]


def _describe_load(label: str, load: Load, fmt, u: Dict[str, str]) -> str:
    if isinstance(load, PointLoad):
        return f"{label} = {fmt(load.magnitude)} {u['force']} at x = {fmt(load.position)} {u['length']}"
    a, b, w = fmt(load.start), fmt(load.end), fmt(load.magnitude)
    if isinstance(load, DistributedLoad):
        return (
            f"{label} = w·(b − a) = {w}·({b} − {a}) = {fmt(load.resultant())} {u['force']}"
            f" acting at x = a + (b − a)/2 = {fmt(load.centroid())} {u['length']}"
        )
    if load.start_magnitude > 0:
        w0 = fmt(load.start_magnitude)
        return (
            f"{label} = (w0 + w)·(b − a)/2 = ({w0} + {w})·({b} − {a})/2 = {fmt(load.resultant())} {u['force']}"
            f" acting at x = a + (b − a)(w0 + 2w)/(3(w0 + w)) = {fmt(load.centroid())} {u['length']}"
        )
    return (
        f"{label} = w·(b − a)/2 = {w}·({b} − {a})/2 = {fmt(load.resultant())} {u['force']}"
        f" acting at x = a + 2(b − a)/3 = {fmt(load.centroid())} {u['length']}"
    )


def _section_polynomials(model: BeamModel, reactions: Reactions, x_mid: float) -> Tuple[Polynomial, Polynomial]:
    """V and M as polynomials in x over the interval containing ``x_mid``."""
    V = Polynomial([0.0])
    M = Polynomial([0.0])
    if model.is_cantilever:
        V = V + reactions.ra
        M = M + Polynomial([reactions.m_fix, reactions.ra])
    else:
        for position, R in zip(model.supports, (reactions.ra, reactions.rb)):
            if position <= x_mid and position < model.length:
                V = V + R
                M = M + R * Polynomial([-position, 1.0])
    for load in model.loads:
        v, m = load.section_polynomials(x_mid)
        V = V - v
        M = M - m
    if model.is_cantilever:
        V = -V
    return V, M


def _latex_polynomial(poly: Polynomial, decimal_places: int) -> str:
    terms = []
    for power, coef in enumerate(poly.coef):
        text = format_value(abs(coef), decimal_places)
        if float(text) == 0:
            continue
        if power == 1:
            text += "x"
        elif power > 1:
            text += f"x^{{{power}}}"
        sign = "-" if coef < 0 else "+"
        terms.append((sign, text))
    if not terms:
        return "0"
    first_sign, first = terms[0]
    out = ("-" if first_sign == "-" else "") + first
    for sign, text in terms[1:]:
        out += f" {sign} {text}"
    return out


def _cases(name: str, pieces: List[Tuple[float, float, str]], decimal_places: int) -> str:
    merged: List[List] = []
    for lo, hi, expr in pieces:
        if merged and merged[-1][2] == expr:
            merged[-1][1] = hi
        else:
            merged.append([lo, hi, expr])
    if not merged:
        return ""

    def fmt(v):
        return format_value(v, decimal_places)

    if len(merged) == 1:
        lo, hi, expr = merged[0]
        return f"{name}(x) = {expr} \\quad ({fmt(lo)} \\leq x \\leq {fmt(hi)})"
    rows = []
    for i, (lo, hi, expr) in enumerate(merged):
        upper = "\\leq" if i == len(merged) - 1 else "<"
        rows.append(f"{expr} & {fmt(lo)} \\leq x {upper} {fmt(hi)}")
    return f"{name}(x) = \\begin{{cases}} " + " \\\\ ".join(rows) + " \\end{cases}"


def piecewise_equations(model: BeamModel, reactions: Reactions, decimal_places: int = 3) -> Tuple[str, str]:
    """LaTeX piecewise V(x) and M(x) assembled interval by interval."""
    bps = model.breakpoints()
    shear_pieces, moment_pieces = [], []
    for lo, hi in zip(bps, bps[1:]):
        if hi <= lo:
            continue
        V, M = _section_polynomials(model, reactions, (lo + hi) / 2)
        shear_pieces.append((lo, hi, _latex_polynomial(V, decimal_places)))
        moment_pieces.append((lo, hi, _latex_polynomial(M, decimal_places)))
    return _cases("V", shear_pieces, decimal_places), _cases("M", moment_pieces, decimal_places)


def reaction_text(reactions: Reactions, units: str = SI, decimal_places: int = 3) -> str:
    u = unit_labels(units)

    def fmt(v):
        return format_value(v, decimal_places)

    if reactions.support_kind == CANTILEVER:
        return (
            f"At fixed support: vertical = {fmt(reactions.ra)} {u['force']}, "
            f"moment = {fmt(reactions.m_fix)} {u['moment']}"
        )
    return f"Reactions: RA = {fmt(reactions.ra)} {u['force']}, RB = {fmt(reactions.rb)} {u['force']}"


def narrate(model: BeamModel, reactions: Reactions, units: str = SI, decimal_places: int = 3) -> Derivation:
    u = unit_labels(units)

    def fmt(v):
        return format_value(v, decimal_places)

    loads = _active_loads(model)
    total = model.total_load()
    steps = []

    if model.is_cantilever:
        steps.append(
            f"Fixed support at x = {fmt(0.0)} {u['length']}, free end at x = {fmt(model.length)} {u['length']}"
        )
    else:
        s1, s2 = model.supports
        steps.append(
            f"Supports at S1 = {fmt(s1)} {u['length']} and S2 = {fmt(s2)} {u['length']}"
            f" (span = {fmt(model.span)} {u['length']})"
        )

    if not loads:
        steps.append("No loads applied")
    for label, load in loads:
        steps.append(_describe_load(label, load, fmt, u))
    names = " + ".join(label for label, _ in loads) or "0"
    steps.append(f"Total load W = {names} = {fmt(total)} {u['force']}")

    if model.is_cantilever:
        arms = " + ".join(f"{fmt(load.resultant())}·{fmt(load.centroid())}" for _, load in loads) or "0"
        steps.append(f"Vertical reaction RA = W = {fmt(reactions.ra)} {u['force']}")
        steps.append(f"Fixed-end moment Mfix = −Σ F·x = −({arms}) = {fmt(reactions.m_fix)} {u['moment']}")
    else:
        s1, _ = model.supports
        span = model.span
        arms = " + ".join(
            f"{fmt(load.resultant())}·({fmt(load.centroid())} − {fmt(s1)})" for _, load in loads
        ) or "0"
        moment = sum(load.resultant() * (load.centroid() - s1) for _, load in loads)
        steps.append(f"ΣM about S1: RB·{fmt(span)} = {arms} = {fmt(moment)} {u['moment']}")
        if span == 0:
            steps.append(f"Supports coincide (span = 0): RB taken as 0 {u['force']}")
        else:
            steps.append(f"RB = {fmt(moment)} / {fmt(span)} = {fmt(reactions.rb)} {u['force']}")
        steps.append(f"RA = W − RB = {fmt(total)} − {fmt(reactions.rb)} = {fmt(reactions.ra)} {u['force']}")
        steps.append(f"Check: RA + RB = {fmt(reactions.ra + reactions.rb)} {u['force']} = W")

    derivation = Derivation(steps=steps)
    if len(loads) == 1:
        derivation.shear, derivation.moment = piecewise_equations(model, reactions, decimal_places)
    return derivation
