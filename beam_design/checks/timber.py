# beam_design/checks/timber.py
"""Timber section capacity per AS 1720.1 style design."""

from typing import Optional, Tuple

from loguru import logger

from ..catalog import TimberSection
from ..config import CONFIG
from .common import DesignCapacity, no_capacity

# Effective shear area of a rectangular section as a fraction of b*d
SHEAR_AREA_FACTOR = 2.0 / 3.0


def section_modulus(section: TimberSection) -> Tuple[Optional[float], str]:
    """
    Section modulus for bending, derived when the catalog omits it.

    For a rectangular section: Z = b × d² / 6

    Returns:
        (Z in mm³ or None, description of where Z came from)
    """
    if section.Z:
        return section.Z, f"Z = {section.Z:.3e} mm³"
    if section.width and section.depth:
        Z = section.width * section.depth**2 / 6
        return Z, f"Z = bd²/6 = {section.width:g}×{section.depth:g}²/6 = {Z:.3e} mm³"
    return None, ''


def timber_design_capacity(section: TimberSection, phi: float = None) -> DesignCapacity:
    """
    Design moment and shear capacity of a timber section.

    φM = φ × Z × fb
    φV = φ × fs × (2/3) × b × d

    Args:
        section: Timber section (already built up if multiple members)
        phi: Capacity reduction factor (default CONFIG.phi_timber = 0.6)

    Returns:
        DesignCapacity; any missing input yields zero with an explanation.
    """
    if phi is None:
        phi = CONFIG.phi_timber

    if not section.fb:
        return no_capacity('Missing bending strength data', 'Missing shear strength data')

    Z, z_details = section_modulus(section)
    if Z is None:
        return no_capacity('Insufficient section data to calculate Z', 'Insufficient section data')

    phi_m = phi * Z * section.fb / 1e6
    moment_details = f"φ = {phi}, fb = {section.fb:g} MPa, {z_details}"

    if section.width and section.depth and section.fs:
        area = section.width * section.depth
        phi_v = phi * section.fs * SHEAR_AREA_FACTOR * area / 1000
        shear_details = f"φ = {phi}, fs = {section.fs:g} MPa, A = {area:.0f} mm²"
    else:
        phi_v = 0.0
        shear_details = 'Missing data for shear calculation'

    logger.debug("Timber capacity {}: φM={:.2f} kNm, φV={:.2f} kN", section.designation, phi_m, phi_v)
    return DesignCapacity(
        phi_m=phi_m,
        phi_v=phi_v,
        moment_details=moment_details,
        shear_details=shear_details,
    )
