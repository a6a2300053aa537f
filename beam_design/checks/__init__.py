# beam_design/checks - Section design capacity
"""Design capacity per steel (AS 4100) and timber (AS 1720.1) codes."""

from .common import DesignCapacity, no_capacity
from .capacity import compute_capacity

from .steel import (
    bending_capacity,
    shear_capacity,
    steel_design_capacity,
)

from .timber import (
    SHEAR_AREA_FACTOR,
    section_modulus,
    timber_design_capacity,
)

__all__ = [
    'DesignCapacity',
    'no_capacity',
    'compute_capacity',
    # Steel
    'bending_capacity',
    'shear_capacity',
    'steel_design_capacity',
    # Timber
    'SHEAR_AREA_FACTOR',
    'section_modulus',
    'timber_design_capacity',
]
