# beam_design/checks/common.py
"""Result type shared by the steel and timber capacity checks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DesignCapacity:
    """Design capacities of a section with the working behind each value."""
    phi_m: float          # Design moment capacity φM (kN·m)
    phi_v: float          # Design shear capacity φV (kN)
    moment_details: str
    shear_details: str


def no_capacity(moment_details: str, shear_details: str) -> DesignCapacity:
    """Zero capacity carrying the reason it could not be computed."""
    return DesignCapacity(
        phi_m=0.0,
        phi_v=0.0,
        moment_details=moment_details,
        shear_details=shear_details,
    )
