"""
Physical constants for electrostatic interactions.

CODATA 2018 values used by the unit conversion and medium modules.
"""
import math
from typing import Final

# Avogadro's number (mol^-1)
AVOGADRO: Final[float] = 6.02214076e23

# Boltzmann constant in SI units (J/K)
BOLTZMANN_SI: Final[float] = 1.380649e-23

# Elementary charge (C)
ELEMENTARY_CHARGE: Final[float] = 1.602176634e-19

# Vacuum permittivity (F/m)
EPSILON_0: Final[float] = 8.8541878128e-12

# Coulomb constant 1/(4πε₀) (N·m²/C²)
COULOMB_CONSTANT: Final[float] = 1.0 / (4.0 * math.pi * EPSILON_0)

# Speed of light (m/s)
SPEED_OF_LIGHT: Final[float] = 299792458.0

# Debye unit of dipole moment (C·m)
DEBYE: Final[float] = 1e-21 / SPEED_OF_LIGHT

# Angstrom to meter conversion
ANGSTROM_TO_METER: Final[float] = 1e-10

# Nanometer to meter conversion
NANOMETER_TO_METER: Final[float] = 1e-9

# eV to Joule conversion
EV_TO_JOULE: Final[float] = 1.602176634e-19

# kcal/mol to Joule conversion
KCAL_MOL_TO_JOULE: Final[float] = 4184.0 / AVOGADRO

# kJ/mol to Joule conversion
KJ_MOL_TO_JOULE: Final[float] = 1000.0 / AVOGADRO

# Liter to cubic meter conversion
LITER_TO_CUBIC_METER: Final[float] = 1e-3
