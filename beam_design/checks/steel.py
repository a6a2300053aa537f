# beam_design/checks/steel.py
"""Steel section capacity per AS 4100 (section capacity, full lateral restraint)."""

from loguru import logger

from ..catalog import SteelSection
from ..config import CONFIG
from .common import DesignCapacity, no_capacity


def bending_capacity(section: SteelSection) -> float:
    """
    Nominal section moment capacity.

    Ms = fy * Z

    Args:
        section: Steel section properties

    Returns:
        Ms: Nominal moment capacity (kN·m)
    """
    fy = section.fy or CONFIG.default_fy
    return section.Z * fy / 1e6


def shear_capacity(section: SteelSection) -> float:
    """
    Nominal web shear capacity.

    Vv = 0.6 * fy * Aw, with the idealised web area Aw = d * tw

    Args:
        section: Steel section properties (web_thickness required)

    Returns:
        Vv: Nominal shear capacity (kN), 0.0 if web data is missing
    """
    if not section.web_thickness or not section.depth:
        return 0.0
    fy = section.fy or CONFIG.default_fy
    web_area = section.depth * section.web_thickness
    return 0.6 * fy * web_area / 1000


def steel_design_capacity(section: SteelSection, phi: float = None) -> DesignCapacity:
    """
    Design moment and shear capacity of a steel section.

    Args:
        section: Steel section (already built up if multiple members)
        phi: Capacity reduction factor (default CONFIG.phi_steel = 0.9)

    Returns:
        DesignCapacity with φM (kN·m), φV (kN) and explanation strings.
        Missing data yields zero with an explanation, never an exception.
    """
    if phi is None:
        phi = CONFIG.phi_steel
    fy = section.fy or CONFIG.default_fy

    if not section.Z:
        return no_capacity('Missing section modulus data', 'Missing section data')

    phi_m = phi * bending_capacity(section)
    moment_details = f"φ = {phi}, fy = {fy:g} MPa, Z = {section.Z:.3e} mm³"

    if section.web_thickness and section.depth:
        web_area = section.depth * section.web_thickness
        phi_v = phi * shear_capacity(section)
        shear_details = f"φ = {phi}, fv = 0.6fy = {0.6 * fy:g} MPa, Aw = {web_area:.0f} mm²"
    else:
        phi_v = 0.0
        shear_details = 'Missing web thickness data for shear calculation'

    logger.debug("Steel capacity {}: φM={:.2f} kNm, φV={:.2f} kN", section.designation, phi_m, phi_v)
    return DesignCapacity(
        phi_m=phi_m,
        phi_v=phi_v,
        moment_details=moment_details,
        shear_details=shear_details,
    )
