"""
pycoulomb - Short-range electrostatic interaction schemes.

Pairwise truncation and damping schemes for charges and point dipoles.
Each scheme supplies a short-range function S(q) and its derivatives;
a generic multipole algebra turns it into potentials, fields, forces,
energies and self-energies.

Main features:
- Plain, real-space Ewald, truncated Ewald, Poisson and reaction-field schemes
- Optional Debye (Yukawa) screening from a salt medium
- Temperature dependent permittivities and electrolyte media
- Unit systems: REAL, METAL, GROMACS, SI
- YAML configuration
"""
from .exceptions import (
    CoulombError,
    InvalidMolarityError,
    MissingSaltError,
    StoichiometryError,
    TemperatureOutOfRangeError,
    UnsupportedOperationError,
)
from .medium import Medium, Salt
from .pairwise import (
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    SelfEnergyPrefactors,
    ShortRangeFunction,
    TruncatedEwald,
    multipole,
)
from .permittivity import (
    ConstantPermittivity,
    EmpiricalPermittivity,
    RelativePermittivity,
)
from .units import Units, UnitSystem

__version__ = "0.1.0"
__author__ = "pycoulomb Team"

__all__ = [
    "CoulombError",
    "InvalidMolarityError",
    "MissingSaltError",
    "StoichiometryError",
    "TemperatureOutOfRangeError",
    "UnsupportedOperationError",
    "Medium",
    "Salt",
    "Plain",
    "Poisson",
    "ReactionField",
    "RealSpaceEwald",
    "SelfEnergyPrefactors",
    "ShortRangeFunction",
    "TruncatedEwald",
    "multipole",
    "ConstantPermittivity",
    "EmpiricalPermittivity",
    "RelativePermittivity",
    "Units",
    "UnitSystem",
]
