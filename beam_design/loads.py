# beam_design/loads.py
"""
LOAD ENTITIES AND SINGLE-LOAD FORMULAS
======================================

Load types on a simply supported beam of span L:

    UDL (full or partial)     w over [a, b]           kN/m
    Point load                P at a                  kN
    Applied moment            M at a                  kN·m
    Tributary (full) UDL      pressure × width        kPa, m

Every load carries a dead (G) and a live (Q) component. The analysis engine
combines them per load combination; this module holds the input types, the
normalisation that turns raw UI state into a clean LoadSet, and the
closed-form expressions for a single load.

FORMULA UNITS:
--------------
The formula functions below work in N and mm (w in N/mm, P in N, M in N·mm,
EI in N·mm²) so they agree with section stiffness. Converting from the
kN / m units of the inputs is the engine's job.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger

from .config import CONFIG

# Positions closer than this (m) are considered coincident
POSITION_TOL = 1e-9


@dataclass(frozen=True)
class DistributedLoad:
    """Uniform load between start and finish (m), intensities in kN/m."""
    id: str
    start: float
    finish: float
    dead: float = 0.0
    live: float = 0.0

    def is_full_span(self, span: float) -> bool:
        return abs(self.start) <= POSITION_TOL and abs(self.finish - span) <= POSITION_TOL


@dataclass(frozen=True)
class PointLoad:
    """Concentrated load at location (m), magnitudes in kN."""
    id: str
    location: float
    dead: float = 0.0
    live: float = 0.0


@dataclass(frozen=True)
class AppliedMoment:
    """Concentrated moment at location (m), magnitudes in kN·m."""
    id: str
    location: float
    dead: float = 0.0
    live: float = 0.0


@dataclass(frozen=True)
class TributaryLoad:
    """
    Area load collected over a tributary width.

    The resulting full-span UDL is pressure (kPa) × tributary_width (m).
    include_self_weight adds the member self-weight as a further dead UDL.
    """
    tributary_width: float = 0.0
    dead_pressure: float = 0.0
    live_pressure: float = 0.0
    include_self_weight: bool = False

    @property
    def dead_udl(self) -> float:
        return self.dead_pressure * self.tributary_width

    @property
    def live_udl(self) -> float:
        return self.live_pressure * self.tributary_width


@dataclass(frozen=True)
class LoadSet:
    """Immutable snapshot of every load on the beam."""
    udls: Tuple[DistributedLoad, ...] = ()
    point_loads: Tuple[PointLoad, ...] = ()
    moments: Tuple[AppliedMoment, ...] = ()
    tributary: TributaryLoad = field(default_factory=TributaryLoad)

    @classmethod
    def from_raw(
        cls,
        udls: Any = None,
        point_loads: Any = None,
        moments: Any = None,
        tributary: Any = None,
        span: float = None,
    ) -> "LoadSet":
        """
        Build a LoadSet from loosely typed input (lists of dicts or dataclasses).

        Anything that is not a list/tuple is treated as an empty collection;
        entries that cannot be read are dropped. When span is given, positions
        are clamped to the beam.
        """
        if span is None:
            span = math.inf
        return cls(
            udls=tuple(_read_entries(udls, _read_udl, span, 'UDL')),
            point_loads=tuple(_read_entries(point_loads, _read_point_load, span, 'point load')),
            moments=tuple(_read_entries(moments, _read_moment, span, 'moment')),
            tributary=_read_tributary(tributary),
        )


# ============================================================================
# INPUT NORMALISATION
# ============================================================================

def clamp_span(span: Any) -> float:
    """Span (m) as a finite float no smaller than CONFIG.min_span."""
    try:
        value = float(span)
    except (TypeError, ValueError):
        return CONFIG.min_span
    if not math.isfinite(value):
        return CONFIG.min_span
    return max(CONFIG.min_span, value)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _get(entry: Any, *names: str) -> Any:
    """First present attribute / key among names, else None."""
    for name in names:
        if isinstance(entry, dict):
            if name in entry:
                return entry[name]
        elif hasattr(entry, name):
            return getattr(entry, name)
    return None


def _float(value: Any, default: Optional[float] = None) -> float:
    """Finite float; None maps to default. Raises ValueError otherwise."""
    if value is None:
        if default is None:
            raise ValueError("missing value")
        return default
    if isinstance(value, bool):
        raise ValueError("boolean is not a magnitude")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value {value!r}")
    return result


_TRUE_STRINGS = ('true', 'yes', 'on', '1')
_FALSE_STRINGS = ('false', 'no', 'off', '0', '')


def _flag(value: Any) -> bool:
    """Boolean from a bool, 0/1 or a common string spelling. Raises ValueError otherwise."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"not a boolean flag: {value!r}")


def _load_id(entry: Any, index: int) -> str:
    raw = _get(entry, 'id')
    return str(raw) if raw not in (None, '') else f"load_{index}"


def _read_udl(entry: Any, index: int, span: float) -> DistributedLoad:
    start = _clamp(_float(_get(entry, 'start')), 0.0, span)
    finish = _clamp(_float(_get(entry, 'finish', 'end')), start, span)
    return DistributedLoad(
        id=_load_id(entry, index),
        start=start,
        finish=finish,
        dead=_float(_get(entry, 'dead', 'udlG'), 0.0),
        live=_float(_get(entry, 'live', 'udlQ'), 0.0),
    )


def _read_point_load(entry: Any, index: int, span: float) -> PointLoad:
    return PointLoad(
        id=_load_id(entry, index),
        location=_clamp(_float(_get(entry, 'location')), 0.0, span),
        dead=_float(_get(entry, 'dead', 'pointG'), 0.0),
        live=_float(_get(entry, 'live', 'pointQ'), 0.0),
    )


def _read_moment(entry: Any, index: int, span: float) -> AppliedMoment:
    return AppliedMoment(
        id=_load_id(entry, index),
        location=_clamp(_float(_get(entry, 'location')), 0.0, span),
        dead=_float(_get(entry, 'dead', 'momentG'), 0.0),
        live=_float(_get(entry, 'live', 'momentQ'), 0.0),
    )


def _read_tributary(raw: Any) -> TributaryLoad:
    if raw is None:
        return TributaryLoad()
    try:
        return TributaryLoad(
            tributary_width=max(0.0, _float(_get(raw, 'tributary_width', 'tributaryWidth'), 0.0)),
            dead_pressure=_float(_get(raw, 'dead_pressure', 'deadGkPa'), 0.0),
            live_pressure=_float(_get(raw, 'live_pressure', 'liveQkPa'), 0.0),
            include_self_weight=_flag(_get(raw, 'include_self_weight', 'includeSelfWeight')),
        )
    except (TypeError, ValueError) as exc:
        logger.info("Ignoring malformed tributary load {!r}: {}", raw, exc)
        return TributaryLoad()


def _read_entries(raw: Any, reader: Callable, span: float, kind: str) -> List[Any]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.info("Ignoring {} collection of type {}", kind, type(raw).__name__)
        return []

    entries = []
    for index, entry in enumerate(raw):
        try:
            entries.append(reader(entry, index, span))
        except (TypeError, ValueError) as exc:
            logger.info("Dropping malformed {} #{}: {}", kind, index, exc)
    return entries


def normalize_load_set(loads: Any, span: float) -> LoadSet:
    """
    Re-validate a load snapshot against the span.

    Accepts a LoadSet (positions are re-clamped) or None (empty set).
    """
    span = clamp_span(span)
    if not isinstance(loads, LoadSet):
        if loads is not None:
            logger.info("Ignoring load set of type {}", type(loads).__name__)
        return LoadSet()
    return LoadSet.from_raw(
        udls=loads.udls,
        point_loads=loads.point_loads,
        moments=loads.moments,
        tributary=loads.tributary,
        span=span,
    )


# ============================================================================
# DEFLECTION FORMULAS (N, mm)
# ============================================================================

def udl_full_deflection(w: float, L: float, EI: float) -> float:
    """Midspan deflection of a full-span UDL: δ = 5wL⁴ / (384EI)."""
    return 5 * w * L**4 / (384 * EI)


def udl_partial_deflection(w: float, a: float, b: float, L: float, EI: float) -> float:
    """
    Midspan deflection of a UDL over [a, b] by Macaulay's method.

    With R1 = W(L - c)/L, W = w(b - a), c = (a + b)/2:

        EI·y(x) = R1·x³/6 - w<x-a>⁴/24 + w<x-b>⁴/24 + C1·x

    C1 follows from y(L) = 0. The sign depends on the integration
    convention, so the magnitude is returned.
    """
    if b <= a:
        return 0.0

    def mac(x: float, p: float) -> float:
        return max(x - p, 0.0)

    W = w * (b - a)
    c = (a + b) / 2
    R1 = W * (L - c) / L

    def ei_y(x: float, C1: float) -> float:
        return R1 * x**3 / 6 - w * mac(x, a)**4 / 24 + w * mac(x, b)**4 / 24 + C1 * x

    C1 = -ei_y(L, 0.0) / L
    return abs(ei_y(L / 2, C1) / EI)


def point_load_deflection(P: float, a: float, L: float, EI: float) -> float:
    """Point load deflection: δ = P·a·b·(L + b - a) / (6·EI·L), b = L - a."""
    b = L - a
    return P * a * b * (L + b - a) / (6 * EI * L)


def point_load_max_deflection_location(a: float, L: float) -> float:
    """
    Position (from the left support) of maximum deflection for a point load at a.

    Load in the first half:   x = L - sqrt((L² - a²) / 3)
    Load in the second half:  x = sqrt((L² - b²) / 3)
    """
    b = L - a
    if a <= L / 2:
        return L - math.sqrt((L**2 - a**2) / 3)
    return math.sqrt((L**2 - b**2) / 3)


def moment_deflection(M: float, a: float, L: float, EI: float) -> float:
    """
    Deflection due to an applied moment at a.

    a <= L/2:  δ = M·a·b² / (6·EI·L)
    a >  L/2:  δ = M·b·a² / (6·EI·L)
    """
    b = L - a
    if a <= L / 2:
        return M * a * b**2 / (6 * EI * L)
    return M * b * a**2 / (6 * EI * L)


# ============================================================================
# ULTIMATE ACTION FORMULAS (N, mm)
# ============================================================================

def udl_full_moment(w: float, L: float) -> float:
    """M = wL²/8"""
    return w * L**2 / 8


def udl_full_shear(w: float, L: float) -> float:
    """V = wL/2"""
    return w * L / 2


def udl_partial_moment(w: float, a: float, b: float, L: float) -> float:
    """
    Partial UDL moment, eccentricity-reduced from the full-span case:

        M = w·(b - a)·L²·(1 - 2·|L/2 - mid| / L) / 8

    An approximation, kept as is so reported moments stay comparable
    with earlier results.
    """
    mid = (a + b) / 2
    return w * (b - a) * L**2 * (1 - 2 * abs(L / 2 - mid) / L) / 8


def udl_partial_shear(w: float, a: float, b: float) -> float:
    """Partial UDL shear taken as the whole segment load: V = w·(b - a)."""
    return w * (b - a)


def point_load_moment(P: float, a: float, L: float) -> float:
    """M = P·a·b / L"""
    return P * a * (L - a) / L


def point_load_shear(P: float, a: float, L: float) -> float:
    """V = P·max(a, b) / L"""
    return P * max(a, L - a) / L
