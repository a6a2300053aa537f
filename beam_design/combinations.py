# beam_design/combinations.py
"""
Load combination tables (AS/NZS 1170.0).

ULS combinations factor dead (G) and live (Q) actions for strength design.
SLS combinations weight the same actions for the three deflection
categories. USAGE_FACTORS maps an occupancy category to the short-term and
long-term live load factors ψs and ψl (written ws and wl in the engine).
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .config import CONFIG


@dataclass(frozen=True)
class LoadCombination:
    """Named linear combination: dead_factor * G + live_factor * Q."""
    name: str
    dead_factor: float
    live_factor: float


# Ordered; when two combinations give the same action the first listed controls.
ULS_COMBINATIONS: Tuple[LoadCombination, ...] = (
    LoadCombination(name="1.35G", dead_factor=1.35, live_factor=0.0),
    LoadCombination(name="1.2G + 1.5Q", dead_factor=1.2, live_factor=1.5),
    LoadCombination(name="0.9G", dead_factor=0.9, live_factor=0.0),
)


# AS/NZS 1170.0 Table 4.1 (ψs, ψl)
USAGE_FACTORS: Dict[str, Tuple[float, float]] = {
    "Normal": (0.7, 0.4),
    "No Traffic": (0.7, 0.0),
    "Storage": (1.0, 0.6),
}


def usage_factors(usage: str) -> Tuple[float, float]:
    """(ws, wl) for a usage category; unknown categories fall back to the default usage."""
    if usage not in USAGE_FACTORS:
        usage = CONFIG.default_usage
    return USAGE_FACTORS[usage]


def serviceability_combinations(ws: float, wl: float, j2: float) -> List[LoadCombination]:
    """
    SLS combinations for the initial, short-term and long-term deflection.

    Initial:    1.0 G
    Short-term: ws Q
    Long-term:  J2 (G + wl Q)

    j2 is the effective creep factor (already forced to 1.0 for steel).
    """
    return [
        LoadCombination(name="Initial: G", dead_factor=1.0, live_factor=0.0),
        LoadCombination(name="Short-term: wsQ", dead_factor=0.0, live_factor=ws),
        LoadCombination(name="Long-term: J2(G + wlQ)", dead_factor=j2, live_factor=wl * j2),
    ]
