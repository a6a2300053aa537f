# beam_design/catalog.py
"""
CATALOG: SECTION PROPERTY PROVIDER
==================================

PURPOSE:
--------
Supplies geometric and material properties for a section designation, and
for a count of identical parallel members (built-up sections). The real
section tables live outside this package; this module defines the shapes
the rest of the engine consumes, the adapter that turns a loosely typed
catalog record into one of them, and a small built-in AS/NZS catalog.

SECTION VARIANTS:
-----------------
A section is either a SteelSection or a TimberSection. Code that needs
material-specific behaviour (capacity, creep, self-weight) dispatches on the
type instead of probing for fields:

    SteelSection   -> fy, web/flange thickness, series (UB, UC, PFC)
    TimberSection  -> grade, bending strength fb, shear strength fs

UNITS:
------
    depth, width, web_thickness   mm
    I                             mm⁴
    Z                             mm³
    E, fy, fb, fs, G              MPa
    mass                          kg/m

These match EI in N·mm² so the analysis engine can work in N and mm without
further conversion of section data.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from .config import CONFIG


STEEL_SERIES = ('UB', 'UC', 'PFC')


class SectionNotFoundError(KeyError):
    """Raised when a designation is not present in the catalog."""
    pass


@dataclass(frozen=True)
class SteelSection:
    """
    Hot-rolled steel section.

    width is the flange width. fy may be None when the catalog does not
    carry a grade; capacity checks then fall back to CONFIG.default_fy.
    """
    designation: str
    series: str           # UB, UC, PFC
    depth: float          # mm
    width: float          # Flange width (mm)
    mass: float           # kg/m
    I: float              # Second moment of area (mm⁴)
    Z: float              # Section modulus (mm³)
    E: float = CONFIG.default_steel_E  # MPa
    fy: Optional[float] = None         # Yield stress (MPa)
    web_thickness: Optional[float] = None     # mm
    flange_thickness: Optional[float] = None  # mm
    area: Optional[float] = None       # Gross area (mm²)
    material: str = "Steel"


@dataclass(frozen=True)
class TimberSection:
    """
    Rectangular sawn, LVL or glulam timber section.

    Z, fb and fs are optional; capacity checks report an explanation
    instead of failing when they are missing. J2 is the catalog creep
    factor; design inputs may override it.
    """
    designation: str
    grade: str
    depth: Optional[float]   # mm
    width: Optional[float]   # mm
    mass: float              # kg/m
    I: float                 # Second moment of area (mm⁴)
    E: float                 # MPa
    Z: Optional[float] = None    # Section modulus (mm³)
    fb: Optional[float] = None   # Bending strength (MPa)
    fs: Optional[float] = None   # Shear strength (MPa)
    G: Optional[float] = None    # Shear modulus (MPa)
    J2: Optional[float] = None   # Creep factor for long-term deflection
    material: str = "Timber"


Section = Union[SteelSection, TimberSection]


def density_for(material: Optional[str]) -> float:
    """Material density (kg/m³) keyed on the section's material name."""
    name = (material or '').lower()
    if 'steel' in name:
        return CONFIG.steel_density
    if any(key in name for key in ('timber', 'lvl', 'mgp', 'glulam')):
        return CONFIG.timber_density
    if 'concrete' in name:
        return CONFIG.concrete_density
    return CONFIG.default_density


def _scaled(value: Optional[float], n: int) -> Optional[float]:
    return None if value is None else value * n


def built_up(section: Section, members: int) -> Section:
    """
    Combine N identical members acting in parallel.

    Mass, I, Z and the width-like dimensions scale linearly with N; depth is
    unchanged. Capacity is always computed on the section this returns.
    """
    n = max(1, int(members))
    if n == 1:
        return section

    if isinstance(section, SteelSection):
        return replace(
            section,
            width=section.width * n,
            mass=section.mass * n,
            I=section.I * n,
            Z=section.Z * n,
            web_thickness=_scaled(section.web_thickness, n),
            flange_thickness=_scaled(section.flange_thickness, n),
            area=_scaled(section.area, n),
        )

    return replace(
        section,
        width=_scaled(section.width, n),
        mass=section.mass * n,
        I=section.I * n,
        Z=_scaled(section.Z, n),
    )


def _number(record: Mapping[str, Any], *keys: str) -> Optional[float]:
    """First truthy numeric value among keys, else None."""
    for key in keys:
        value = record.get(key)
        if value is None or isinstance(value, bool):
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            continue
        if value:
            return value
    return None


def section_from_record(record: Mapping[str, Any], family: str) -> Section:
    """
    Build a section from a raw catalog record.

    Records follow the catalog JSON layout: depth_mm, flange_mm / width_mm,
    mass_kg_m, I_m4, Z_m3, tw_mm, tf_mm, area_mm2 for steel and E_GPa,
    G_GPa, fb_MPa, fs_MPa, J2, grade for timber. Steel families are UB, UC and
    PFC; any other family is taken as a timber grade.
    """
    I_m4 = _number(record, 'I_m4')
    Z_m3 = _number(record, 'Z_m3')
    I = I_m4 * 1e12 if I_m4 else (_number(record, 'I', 'momentOfInertia') or 0.0)
    Z = Z_m3 * 1e9 if Z_m3 else _number(record, 'Z')
    mass = _number(record, 'mass_kg_m', 'mass') or 0.0
    designation = str(record.get('designation', ''))

    if family in STEEL_SERIES:
        return SteelSection(
            designation=designation,
            series=family,
            depth=_number(record, 'depth_mm', 'depth') or 0.0,
            width=_number(record, 'flange_mm', 'width_mm', 'width') or 0.0,
            mass=mass,
            I=I,
            Z=Z or 0.0,
            E=_number(record, 'E', 'E_MPa') or CONFIG.default_steel_E,
            fy=_number(record, 'fy', 'fy_MPa'),
            web_thickness=_number(record, 'tw_mm'),
            flange_thickness=_number(record, 'tf_mm'),
            area=_number(record, 'area_mm2'),
        )

    E_GPa = _number(record, 'E_GPa')
    G_GPa = _number(record, 'G_GPa')
    grade = str(record.get('grade') or family)
    return TimberSection(
        designation=designation,
        grade=grade,
        depth=_number(record, 'depth_mm', 'depth'),
        width=_number(record, 'width_mm', 'width'),
        mass=mass,
        I=I,
        E=E_GPa * 1000 if E_GPa else (_number(record, 'E', 'E_MPa') or 0.0),
        Z=Z,
        fb=_number(record, 'fb_MPa', 'fb'),
        fs=_number(record, 'fs_MPa', 'fs'),
        G=G_GPa * 1000 if G_GPa else None,
        J2=_number(record, 'J2', 'j2'),
        material=str(record.get('material') or _timber_material(grade)),
    )


def _timber_material(grade: str) -> str:
    g = grade.upper().replace(' ', '')
    if g.startswith('LVL'):
        return 'Timber-LVL'
    if g.startswith('MGP'):
        return 'Timber-MGP'
    if g.startswith('GL'):
        return 'Timber-GL'
    return 'Timber-F'


class SectionCatalog:
    """Designation-keyed lookup over an immutable set of sections."""

    def __init__(self, sections: Iterable[Section]):
        self._sections: Dict[str, Section] = {}
        for section in sections:
            self._sections[section.designation] = section

    def __contains__(self, designation: str) -> bool:
        return designation in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def designations(self, family: Optional[str] = None) -> List[str]:
        """Designations in insertion order, optionally filtered by series/grade."""
        if family is None:
            return list(self._sections)
        return [
            name for name, sec in self._sections.items()
            if getattr(sec, 'series', None) == family or getattr(sec, 'grade', None) == family
        ]

    def lookup(self, designation: str, members: int = 1) -> Section:
        """
        Section for a designation, built up from `members` parallel members.

        Raises:
            SectionNotFoundError: If the designation is not in the catalog
        """
        try:
            section = self._sections[designation]
        except KeyError:
            raise SectionNotFoundError(designation) from None
        logger.debug("Catalog lookup {} x{}", designation, members)
        return built_up(section, members)


# ============================================================================
# BUILT-IN SECTIONS
# ============================================================================

# AS/NZS 3679.1 hot-rolled sections, Grade 300. Elastic modulus Zx is used
# as Z. fy left unset so the capacity check applies the 300 MPa default.

STEEL_SECTIONS = [
    SteelSection(designation="150UB14.0", series="UB", depth=150, width=75, mass=14.0,
                 I=6.66e6, Z=88.8e3, web_thickness=5.0, flange_thickness=7.0, area=1780),
    SteelSection(designation="200UB25.4", series="UB", depth=203, width=133, mass=25.4,
                 I=23.6e6, Z=232e3, web_thickness=5.8, flange_thickness=7.8, area=3230),
    SteelSection(designation="250UB31.4", series="UB", depth=252, width=146, mass=31.4,
                 I=44.5e6, Z=354e3, web_thickness=6.1, flange_thickness=8.6, area=4010),
    SteelSection(designation="310UB40.4", series="UB", depth=304, width=165, mass=40.4,
                 I=86.4e6, Z=569e3, web_thickness=6.1, flange_thickness=10.2, area=5210),
    SteelSection(designation="150UC30.0", series="UC", depth=158, width=153, mass=30.0,
                 I=17.6e6, Z=222e3, web_thickness=6.6, flange_thickness=9.4, area=3860),
    SteelSection(designation="200UC46.2", series="UC", depth=203, width=203, mass=46.2,
                 I=45.9e6, Z=452e3, web_thickness=7.3, flange_thickness=11.0, area=5900),
    SteelSection(designation="150PFC", series="PFC", depth=150, width=75, mass=17.7,
                 I=8.33e6, Z=111e3, web_thickness=6.0, flange_thickness=9.5, area=2250),
    SteelSection(designation="200PFC", series="PFC", depth=200, width=75, mass=22.9,
                 I=19.1e6, Z=191e3, web_thickness=6.0, flange_thickness=12.0, area=2920),
]


def _rectangular_timber(depth: float, width: float, grade: str, E: float,
                        fb: float, fs: float, density: float) -> TimberSection:
    """Rectangular timber section with I, Z and mass derived from b × d."""
    area_m2 = depth * width / 1e6
    return TimberSection(
        designation=f"{depth:g}x{width:g} {grade}",
        grade=grade,
        depth=depth,
        width=width,
        mass=round(area_m2 * density, 2),
        I=width * depth**3 / 12,
        E=E,
        Z=width * depth**2 / 6,
        fb=fb,
        fs=fs,
        material=_timber_material(grade),
    )


# Characteristic properties per AS 1720.1 / manufacturer LVL data
# (grade, E MPa, fb MPa, fs MPa, density kg/m³, [(depth, width), ...])
_TIMBER_GRADES = [
    ("LVL 13", 13200, 44.0, 5.3, 620, [(150, 45), (200, 45), (240, 45), (300, 45), (360, 63)]),
    ("MGP10", 10000, 17.0, 2.6, 500, [(90, 45), (140, 45), (190, 45), (240, 45)]),
    ("F17", 14000, 42.0, 3.6, 650, [(140, 45), (190, 45), (240, 45), (290, 45)]),
    ("GL13", 13300, 33.0, 3.7, 550, [(270, 65), (360, 85), (450, 85)]),
]

TIMBER_SECTIONS = [
    _rectangular_timber(depth, width, grade, E, fb, fs, density)
    for grade, E, fb, fs, density, sizes in _TIMBER_GRADES
    for depth, width in sizes
]

DEFAULT_CATALOG = SectionCatalog(STEEL_SECTIONS + TIMBER_SECTIONS)
