# beam_design/report.py
"""
Design check reporting: compares analysis results against deflection limits
and section capacities.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pandas as pd

from .analysis import AnalysisResult
from .checks import DesignCapacity
from .config import CONFIG

PASS = 'PASS'
FAIL = 'FAIL'
NOT_AVAILABLE = 'N/A'


@dataclass(frozen=True)
class DeflectionLimit:
    """
    Deflection limit for one category.

    span_ratio: limit = span / span_ratio (e.g. 240 for L/240)
    max_limit: absolute limit in mm
    """
    span_ratio: Optional[float] = None
    max_limit: Optional[float] = None

    def governing_limit(self, span: float) -> Optional[float]:
        """
        Governing limit (mm) for a span in m.

        The lesser of span/ratio and the absolute limit when both are set,
        whichever is set otherwise, None when neither is.
        """
        candidates = []
        if self.span_ratio and self.span_ratio > 0:
            candidates.append(span * 1000 / self.span_ratio)
        if self.max_limit is not None and self.max_limit > 0:
            candidates.append(self.max_limit)
        return min(candidates) if candidates else None


@dataclass(frozen=True)
class DeflectionLimits:
    """Limits for the initial, short-term and long-term deflection."""
    initial: DeflectionLimit = field(
        default_factory=lambda: DeflectionLimit(span_ratio=CONFIG.initial_span_ratio))
    short: DeflectionLimit = field(
        default_factory=lambda: DeflectionLimit(span_ratio=CONFIG.short_span_ratio))
    long: DeflectionLimit = field(
        default_factory=lambda: DeflectionLimit(span_ratio=CONFIG.long_span_ratio))


def _check(value: float, limit: Optional[float], unit: str) -> Dict[str, Any]:
    if limit is None or limit <= 0:
        return {'value': value, 'limit': limit, 'ratio': None, 'unit': unit, 'status': NOT_AVAILABLE}
    ratio = value / limit
    return {
        'value': value,
        'limit': limit,
        'ratio': ratio,
        'unit': unit,
        'status': PASS if ratio <= 1.0 else FAIL,
    }


def check_design(
    result: AnalysisResult,
    capacity: DesignCapacity,
    limits: Optional[DeflectionLimits],
    span: float,
) -> Dict[str, Any]:
    """
    Check analysis results against limits and capacity.

    Args:
        result: Engine output
        capacity: Design capacity of the section used in the analysis
        limits: Deflection limits (defaults L/240, L/180, L/120)
        span: Beam span (m)

    Returns:
        dict with one entry per check ('value', 'limit', 'ratio', 'unit',
        'status'), 'overall_pass' and the controlling load cases. A check
        whose limit or capacity is unavailable is reported as 'N/A' and
        does not count towards overall_pass.
    """
    if limits is None:
        limits = DeflectionLimits()

    checks = {
        'initial_deflection': _check(result.max_initial_deflection,
                                     limits.initial.governing_limit(span), 'mm'),
        'short_deflection': _check(result.max_short_deflection,
                                   limits.short.governing_limit(span), 'mm'),
        'long_deflection': _check(result.max_long_deflection,
                                  limits.long.governing_limit(span), 'mm'),
        'moment': _check(result.max_moment, capacity.phi_m, 'kNm'),
        'shear': _check(result.max_shear, capacity.phi_v, 'kN'),
    }

    return {
        'checks': checks,
        'overall_pass': all(c['status'] != FAIL for c in checks.values()),
        'controlling_moment_case': result.controlling_moment_case,
        'controlling_shear_case': result.controlling_shear_case,
        'moment_details': capacity.moment_details,
        'shear_details': capacity.shear_details,
    }


def summary_table(report: Dict[str, Any]) -> pd.DataFrame:
    """One row per check, rounded for display."""
    rows = []
    for name, check in report['checks'].items():
        rows.append({
            'check': name,
            'value': round(check['value'], 2),
            'limit': None if check['limit'] is None else round(check['limit'], 2),
            'unit': check['unit'],
            'ratio': None if check['ratio'] is None else round(check['ratio'], 2),
            'status': check['status'],
        })
    return pd.DataFrame(rows, columns=['check', 'value', 'limit', 'unit', 'ratio', 'status'])
