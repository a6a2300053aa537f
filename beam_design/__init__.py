# beam_design - Simply supported beam design
"""
BEAM_DESIGN: Beam Analysis and Section Capacity
===============================================

This package provides:
- Simply supported beam analysis (UDL, partial UDL, point load, moment,
  tributary area load, self-weight) under ULS and SLS combinations
- Design moment / shear capacity for steel and timber sections,
  including built-up members
- Deflection limit and capacity checks

ARCHITECTURE:
-------------
    config.py        Engine constants and defaults (CONFIG)
    catalog.py       Section variants, built-up sections, catalog lookup
    checks/          Steel and timber design capacity
    combinations.py  ULS / SLS combinations and usage factors
    loads.py         Load entities, input normalisation, single-load formulas
    analysis.py      The analysis engine: analyze()
    report.py        Deflection limits and pass/fail reporting
    design.py        run_design(): one full recompute from a DesignInputs snapshot
"""

from .analysis import AnalysisResult, CombinationAction, analyze, effective_creep_factor, self_weight
from .catalog import (
    DEFAULT_CATALOG,
    SectionCatalog,
    SectionNotFoundError,
    SteelSection,
    TimberSection,
    built_up,
    section_from_record,
)
from .checks import DesignCapacity, compute_capacity
from .combinations import LoadCombination, ULS_COMBINATIONS, USAGE_FACTORS, usage_factors
from .design import DesignInputs, DesignOutcome, run_design
from .loads import AppliedMoment, DistributedLoad, LoadSet, PointLoad, TributaryLoad
from .report import DeflectionLimit, DeflectionLimits, check_design

__version__ = "0.1.0"
