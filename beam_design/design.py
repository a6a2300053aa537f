# beam_design/design.py
"""
Design service: one explicit recompute of section, capacity, analysis and checks.

Callers assemble a DesignInputs snapshot whenever their inputs change and
call run_design(). Nothing is cached between calls.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from loguru import logger

from .analysis import AnalysisResult, analyze
from .catalog import DEFAULT_CATALOG, Section, SectionCatalog, SectionNotFoundError
from .checks import DesignCapacity, compute_capacity
from .combinations import usage_factors
from .config import CONFIG
from .loads import LoadSet, clamp_span
from .report import DeflectionLimits, check_design


@dataclass(frozen=True)
class DesignInputs:
    """
    Everything one design pass needs.

    Supply either `designation` (looked up in the catalog and built up from
    `members`) or a resolved `section` (used as is). ws / wl default to the
    usage profile; j2 defaults to the section's catalog J2, then CONFIG.default_j2.
    """
    span: float = CONFIG.default_span
    members: int = 1
    usage: str = CONFIG.default_usage
    ws: Optional[float] = None
    wl: Optional[float] = None
    j2: Optional[float] = None
    designation: Optional[str] = None
    section: Optional[Section] = None
    loads: LoadSet = field(default_factory=LoadSet)
    limits: DeflectionLimits = field(default_factory=DeflectionLimits)


@dataclass(frozen=True)
class DesignOutcome:
    """Result of a design pass; analysis and checks are None while no section is selected."""
    span: float
    ws: float
    wl: float
    section: Optional[Section]
    capacity: DesignCapacity
    analysis: Optional[AnalysisResult]
    checks: Optional[Dict[str, Any]]


def clamp_members(members: Any) -> int:
    """Member count limited to [CONFIG.min_members, CONFIG.max_members]."""
    try:
        n = int(members)
    except (TypeError, ValueError, OverflowError):
        return CONFIG.min_members
    return max(CONFIG.min_members, min(CONFIG.max_members, n))


def resolve_section(inputs: DesignInputs, catalog: SectionCatalog) -> Optional[Section]:
    if inputs.section is not None:
        return inputs.section
    if not inputs.designation:
        return None
    try:
        return catalog.lookup(inputs.designation, clamp_members(inputs.members))
    except SectionNotFoundError:
        logger.info("Section {} not found in catalog", inputs.designation)
        return None


def run_design(inputs: DesignInputs, catalog: SectionCatalog = DEFAULT_CATALOG) -> DesignOutcome:
    """
    Recompute the full design from an input snapshot.

    Args:
        inputs: Design inputs
        catalog: Section catalog used to resolve inputs.designation

    Returns:
        DesignOutcome. Missing or unknown sections give a pending outcome
        (no analysis, zero capacity with explanation) rather than an error.
    """
    span = clamp_span(inputs.span)
    default_ws, default_wl = usage_factors(inputs.usage)
    ws = default_ws if inputs.ws is None else inputs.ws
    wl = default_wl if inputs.wl is None else inputs.wl

    section = resolve_section(inputs, catalog)
    j2 = inputs.j2
    if j2 is None:
        j2 = getattr(section, 'J2', None) or CONFIG.default_j2

    capacity = compute_capacity(section)
    result = analyze(span, inputs.loads, ws, wl, j2, section)
    checks = None if result is None else check_design(result, capacity, inputs.limits, span)

    return DesignOutcome(
        span=span,
        ws=ws,
        wl=wl,
        section=section,
        capacity=capacity,
        analysis=result,
        checks=checks,
    )
