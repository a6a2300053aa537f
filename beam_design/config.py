# beam_design/config.py
"""
Engine configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Global engine configuration."""

    # Physical constants
    gravity: float = 9.81  # m/s²

    # Material densities (kg/m³) used for self-weight when no mass is supplied
    steel_density: float = 7850.0
    timber_density: float = 500.0
    concrete_density: float = 2400.0
    default_density: float = 1000.0

    # Capacity reduction factors
    phi_steel: float = 0.9
    phi_timber: float = 0.6

    # Steel defaults
    default_fy: float = 300.0  # MPa
    default_steel_E: float = 200000.0  # MPa

    # Creep factor used when the section does not supply one
    default_j2: float = 2.0

    # General input bounds
    min_span: float = 0.01  # m
    default_span: float = 3.0  # m
    min_members: int = 1
    max_members: int = 4
    default_usage: str = "Normal"

    # Default deflection limits (span / ratio)
    initial_span_ratio: float = 240.0
    short_span_ratio: float = 180.0
    long_span_ratio: float = 120.0


# Global config instance
CONFIG = EngineConfig()
