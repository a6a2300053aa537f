# beam_design/analysis.py
"""
BEAM ANALYSIS ENGINE
====================

Simply supported single-span beam under any mix of UDLs, point loads,
applied moments and a tributary area load. Produces the governing design
actions (M*, V*) over the ULS combinations and the initial, short-term and
long-term deflections.

    analyze(span, loads, ws, wl, j2, section) -> AnalysisResult | None

The function is pure: it re-normalises its inputs, holds no state between
calls, and never mutates the loads or the section. It returns None until a
section with positive stiffness is supplied.

PROCESS:
--------
1. Clamp span and factors, normalise the load set against the span
2. EI from the section (MPa × mm⁴ = N·mm²)
3. Per load, evaluate the dead and live contribution separately
   (deflection in mm, moment in N·mm, shear in N)
4. Deflection categories = SLS weighting of the dead/live sums
5. ULS actions per combination; keep the first combination that gives
   the largest moment (and, independently, shear)

UNITS:
------
Inputs in kN, kN/m, kN·m and m are converted to N, N/mm, N·mm and mm.
1 kN/m is exactly 1 N/mm, so distributed loads need no scaling.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from .catalog import Section, SteelSection, density_for
from .combinations import ULS_COMBINATIONS, LoadCombination, serviceability_combinations
from .config import CONFIG
from .loads import (
    LoadSet,
    clamp_span,
    moment_deflection,
    normalize_load_set,
    point_load_deflection,
    point_load_max_deflection_location,
    point_load_moment,
    point_load_shear,
    udl_full_deflection,
    udl_full_moment,
    udl_full_shear,
    udl_partial_deflection,
    udl_partial_moment,
    udl_partial_shear,
)

M_TO_MM = 1000.0
KN_TO_N = 1000.0
KNM_TO_NMM = 1e6


@dataclass(frozen=True)
class CombinationAction:
    """Design actions for one ULS combination."""
    name: str
    moment: float   # kN·m
    shear: float    # kN


@dataclass(frozen=True)
class AnalysisResult:
    """Governing deflections (mm) and ULS actions (kN·m, kN)."""
    max_initial_deflection: float
    max_short_deflection: float
    max_long_deflection: float
    max_moment: float
    max_shear: float
    controlling_moment_case: Optional[str]
    controlling_shear_case: Optional[str]
    self_weight: float = 0.0    # kN/m, 0 when not included
    combination_actions: Tuple[CombinationAction, ...] = ()


def effective_creep_factor(section: Optional[Section], j2: Any) -> float:
    """
    Creep factor applied to long-term deflection.

    Steel does not creep, so any supplied J2 is replaced with 1.0. Other
    materials use J2 clamped to >= 1.0 (CONFIG.default_j2 if unusable).
    """
    if isinstance(section, SteelSection):
        return 1.0
    try:
        value = float(j2)
    except (TypeError, ValueError):
        value = CONFIG.default_j2
    if not math.isfinite(value):
        value = CONFIG.default_j2
    return max(1.0, value)


def self_weight(section: Section) -> float:
    """
    Member self-weight (kN/m).

    Uses mass per length when the catalog supplies it, otherwise
    cross-sectional area × material density. Steel without a mass or gross
    area is idealised as an I-section from its plate thicknesses; without
    those its self-weight is taken as zero.
    """
    if section.mass:
        return section.mass * CONFIG.gravity / 1000

    if isinstance(section, SteelSection):
        area_mm2 = section.area or _i_section_area(section)
        if not area_mm2:
            logger.debug("No mass or plate data for {}; self-weight taken as 0",
                         section.designation)
            return 0.0
    else:
        area_mm2 = (section.width or 0.0) * (section.depth or 0.0)
    density = density_for(section.material)
    return area_mm2 / 1e6 * density * CONFIG.gravity / 1000


def _i_section_area(section: SteelSection) -> float:
    """Two flanges plus the web between them (mm²), 0.0 without plate data."""
    tw, tf = section.web_thickness, section.flange_thickness
    if not tw or not tf or not section.depth or not section.width:
        return 0.0
    return 2 * section.width * tf + (section.depth - 2 * tf) * tw


def flexural_stiffness(section: Optional[Section]) -> float:
    """EI in N·mm², or 0.0 when the section cannot provide it."""
    if section is None:
        return 0.0
    try:
        EI = float(section.E) * float(section.I)
    except (TypeError, ValueError):
        return 0.0
    return EI if math.isfinite(EI) and EI > 0 else 0.0


def _factor(value: Any) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, value) if math.isfinite(value) else 0.0


# ============================================================================
# PER-LOAD CONTRIBUTIONS
# ============================================================================

def _deflection_terms(loads: LoadSet, L: float, EI: float, sw: float) -> np.ndarray:
    """
    Deflection contribution of every load as rows of [dead, live] (mm).

    L in mm; load magnitudes converted from kN / kN·m on the way in.
    """
    rows: List[Tuple[float, float]] = []

    for udl in loads.udls:
        if udl.is_full_span(L / M_TO_MM):
            rows.append((udl_full_deflection(udl.dead, L, EI),
                         udl_full_deflection(udl.live, L, EI)))
        else:
            a, b = udl.start * M_TO_MM, udl.finish * M_TO_MM
            rows.append((udl_partial_deflection(udl.dead, a, b, L, EI),
                         udl_partial_deflection(udl.live, a, b, L, EI)))

    for point in loads.point_loads:
        a = point.location * M_TO_MM
        rows.append((point_load_deflection(point.dead * KN_TO_N, a, L, EI),
                     point_load_deflection(point.live * KN_TO_N, a, L, EI)))
        if point.dead or point.live:
            logger.debug("Point load {} at {} m: max deflection at x = {:.3f} m",
                         point.id, point.location,
                         point_load_max_deflection_location(a, L) / M_TO_MM)

    for moment in loads.moments:
        a = moment.location * M_TO_MM
        rows.append((moment_deflection(moment.dead * KNM_TO_NMM, a, L, EI),
                     moment_deflection(moment.live * KNM_TO_NMM, a, L, EI)))

    tributary = loads.tributary
    rows.append((udl_full_deflection(tributary.dead_udl, L, EI),
                 udl_full_deflection(tributary.live_udl, L, EI)))
    rows.append((udl_full_deflection(sw, L, EI), 0.0))

    return np.array(rows, dtype=float).reshape(-1, 2)


def _action_terms(loads: LoadSet, L: float, sw: float) -> np.ndarray:
    """
    ULS contribution of every load as rows of
    [dead moment, live moment, dead shear, live shear] (N·mm, N).

    Applied moments do not contribute to M* or V*.
    """
    rows: List[Tuple[float, float, float, float]] = []

    for udl in loads.udls:
        if udl.is_full_span(L / M_TO_MM):
            rows.append((udl_full_moment(udl.dead, L), udl_full_moment(udl.live, L),
                         udl_full_shear(udl.dead, L), udl_full_shear(udl.live, L)))
        else:
            a, b = udl.start * M_TO_MM, udl.finish * M_TO_MM
            rows.append((udl_partial_moment(udl.dead, a, b, L), udl_partial_moment(udl.live, a, b, L),
                         udl_partial_shear(udl.dead, a, b), udl_partial_shear(udl.live, a, b)))

    for point in loads.point_loads:
        a = point.location * M_TO_MM
        G, Q = point.dead * KN_TO_N, point.live * KN_TO_N
        rows.append((point_load_moment(G, a, L), point_load_moment(Q, a, L),
                     point_load_shear(G, a, L), point_load_shear(Q, a, L)))

    tributary = loads.tributary
    G, Q = tributary.dead_udl, tributary.live_udl
    rows.append((udl_full_moment(G, L), udl_full_moment(Q, L),
                 udl_full_shear(G, L), udl_full_shear(Q, L)))
    rows.append((udl_full_moment(sw, L), 0.0, udl_full_shear(sw, L), 0.0))

    return np.array(rows, dtype=float).reshape(-1, 4)


def _combine(dead: np.ndarray, live: np.ndarray, combination: LoadCombination) -> float:
    """Sum of factored contributions, skipping terms that factor to zero."""
    factored = np.concatenate([dead * combination.dead_factor, live * combination.live_factor])
    return float(np.sum(factored[factored != 0.0]))


def _controlling(actions: Sequence[CombinationAction], attr: str) -> Tuple[float, Optional[str]]:
    """Largest action and its combination; strictly greater replaces, so ties keep the first."""
    best, name = 0.0, None
    for action in actions:
        value = getattr(action, attr)
        if value > best:
            best, name = value, action.name
    return best, name


# ============================================================================
# ENTRY POINT
# ============================================================================

def analyze(
    span: float,
    loads: Optional[LoadSet],
    ws: float,
    wl: float,
    j2: float,
    section: Optional[Section],
    combinations: Sequence[LoadCombination] = ULS_COMBINATIONS,
) -> Optional[AnalysisResult]:
    """
    Analyse a simply supported beam.

    Args:
        span: Beam span (m); clamped to CONFIG.min_span
        loads: Load snapshot; None or malformed input is treated as empty
        ws: Short-term live load factor
        wl: Long-term live load factor
        j2: Creep factor (ignored for steel)
        section: Section properties, already built up for multiple members
        combinations: Ordered ULS combination table

    Returns:
        AnalysisResult, or None when there is no section / stiffness yet.
    """
    EI = flexural_stiffness(section)
    if EI <= 0:
        logger.debug("Analysis skipped: no section stiffness available")
        return None

    span = clamp_span(span)
    loads = normalize_load_set(loads, span)
    ws, wl = _factor(ws), _factor(wl)
    j2_eff = effective_creep_factor(section, j2)
    L = span * M_TO_MM

    sw = self_weight(section) if loads.tributary.include_self_weight else 0.0

    logger.debug(
        "Analysing {}: span={} m, EI={:.4e} N·mm², ws={}, wl={}, J2={} (effective {}), self-weight={:.3f} kN/m",
        getattr(section, 'designation', '?'), span, EI, ws, wl, j2, j2_eff, sw,
    )

    # Serviceability
    deflections = _deflection_terms(loads, L, EI, sw)
    dead_deflection, live_deflection = deflections[:, 0], deflections[:, 1]
    initial, short, long_term = (
        abs(_combine(dead_deflection, live_deflection, combination))
        for combination in serviceability_combinations(ws, wl, j2_eff)
    )

    # Ultimate
    terms = _action_terms(loads, L, sw)
    actions = []
    for combination in combinations:
        moment = _combine(terms[:, 0], terms[:, 1], combination) / KNM_TO_NMM
        shear = _combine(terms[:, 2], terms[:, 3], combination) / KN_TO_N
        actions.append(CombinationAction(name=combination.name, moment=moment, shear=shear))
        logger.debug("ULS {}: M*={:.3f} kNm, V*={:.3f} kN", combination.name, moment, shear)

    max_moment, moment_case = _controlling(actions, 'moment')
    max_shear, shear_case = _controlling(actions, 'shear')

    logger.debug(
        "Deflection initial={:.3f} short={:.3f} long={:.3f} mm; M*={:.3f} ({}), V*={:.3f} ({})",
        initial, short, long_term, max_moment, moment_case, max_shear, shear_case,
    )

    return AnalysisResult(
        max_initial_deflection=initial,
        max_short_deflection=short,
        max_long_deflection=long_term,
        max_moment=max_moment,
        max_shear=max_shear,
        controlling_moment_case=moment_case,
        controlling_shear_case=shear_case,
        self_weight=sw,
        combination_actions=tuple(actions),
    )
