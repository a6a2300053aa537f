# beam_design/checks/capacity.py
"""Capacity dispatch over the steel/timber section variants."""

from typing import Optional

from ..catalog import Section, SteelSection, TimberSection
from .common import DesignCapacity, no_capacity
from .steel import steel_design_capacity
from .timber import timber_design_capacity


def compute_capacity(section: Optional[Section]) -> DesignCapacity:
    """
    Design capacity of a (possibly built-up) section.

    Scale the section with catalog.built_up() first; capacity is computed on
    whatever section is passed in.
    """
    if isinstance(section, SteelSection):
        return steel_design_capacity(section)
    if isinstance(section, TimberSection):
        return timber_design_capacity(section)
    return no_capacity('No section selected', 'No section selected')
