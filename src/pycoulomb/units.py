"""
Unit systems for electrostatic observables.

The multipole algebra works in reduced units: charges in elementary
charges and lengths in the unit of the cutoff, so an energy comes out as
e²/length. This module attaches the Coulomb prefactor 1/(4πε₀εᵣ) and
converts to a chosen unit system.
"""
import math
from dataclasses import dataclass
from enum import Enum

from pycoulomb.constants import (
    ANGSTROM_TO_METER,
    COULOMB_CONSTANT,
    DEBYE,
    ELEMENTARY_CHARGE,
    EPSILON_0,
    EV_TO_JOULE,
    KCAL_MOL_TO_JOULE,
    KJ_MOL_TO_JOULE,
    NANOMETER_TO_METER,
)


class UnitSystemType(Enum):
    """Supported unit systems."""
    REAL = "real"        # Å, kcal/mol (biomolecular)
    METAL = "metal"      # Å, eV (materials science)
    GROMACS = "gromacs"  # nm, kJ/mol
    SI = "si"            # m, J


@dataclass(frozen=True)
class UnitSystem:
    """
    Unit system for electrostatic observables.

    Charges are always in elementary charges.

    Attributes:
        name: The type of unit system.
        length_unit: String name of length unit (e.g., "angstrom").
        energy_unit: String name of energy unit (e.g., "kcal/mol").
        length_to_si: Conversion factor from this length unit to meters.
        energy_to_si: Conversion factor from this energy unit to Joules
            (per particle).

    Example:
        >>> units = Units.GROMACS()
        >>> round(coulomb_prefactor(units), 3)
        138.935
    """
    name: UnitSystemType
    length_unit: str
    energy_unit: str
    length_to_si: float
    energy_to_si: float


class Units:
    """
    Factory for standard unit systems.

    Example:
        >>> units = Units.REAL()
        >>> units.energy_unit
        'kcal/mol'
    """

    @staticmethod
    def REAL() -> UnitSystem:
        """Ångström and kcal/mol."""
        return UnitSystem(
            name=UnitSystemType.REAL,
            length_unit="angstrom",
            energy_unit="kcal/mol",
            length_to_si=ANGSTROM_TO_METER,
            energy_to_si=KCAL_MOL_TO_JOULE,
        )

    @staticmethod
    def METAL() -> UnitSystem:
        """Ångström and eV."""
        return UnitSystem(
            name=UnitSystemType.METAL,
            length_unit="angstrom",
            energy_unit="eV",
            length_to_si=ANGSTROM_TO_METER,
            energy_to_si=EV_TO_JOULE,
        )

    @staticmethod
    def GROMACS() -> UnitSystem:
        """Nanometer and kJ/mol."""
        return UnitSystem(
            name=UnitSystemType.GROMACS,
            length_unit="nanometer",
            energy_unit="kJ/mol",
            length_to_si=NANOMETER_TO_METER,
            energy_to_si=KJ_MOL_TO_JOULE,
        )

    @staticmethod
    def SI() -> UnitSystem:
        """Meter and Joule."""
        return UnitSystem(
            name=UnitSystemType.SI,
            length_unit="meter",
            energy_unit="joule",
            length_to_si=1.0,
            energy_to_si=1.0,
        )

    @staticmethod
    def from_name(name: str) -> UnitSystem:
        """
        Create a unit system by name (case-insensitive).

        Raises:
            ValueError: If the name is unknown.
        """
        units_map = {
            "REAL": Units.REAL,
            "METAL": Units.METAL,
            "GROMACS": Units.GROMACS,
            "SI": Units.SI,
        }
        key = name.upper()
        if key not in units_map:
            raise ValueError(f"Unknown units: {name}")
        return units_map[key]()


def coulomb_prefactor(units: UnitSystem, relative_permittivity: float = 1.0) -> float:
    """
    e² / (4πε₀εᵣ) in units of energy × length.

    Args:
        units: Target unit system.
        relative_permittivity: Relative permittivity εᵣ.

    Returns:
        Prefactor turning a reduced energy (e²/length) into energy units.
    """
    si = COULOMB_CONSTANT * ELEMENTARY_CHARGE**2 / relative_permittivity
    return si / (units.energy_to_si * units.length_to_si)


def to_energy(
    reduced: float, units: UnitSystem, relative_permittivity: float = 1.0
) -> float:
    """
    Convert a reduced energy (e²/length) to the unit system's energy unit.

    Args:
        reduced: Energy from the multipole algebra.
        units: Unit system of the input lengths and the output energy.
        relative_permittivity: Relative permittivity εᵣ.
    """
    return reduced * coulomb_prefactor(units, relative_permittivity)


def to_potential(reduced, units: UnitSystem, relative_permittivity: float = 1.0):
    """
    Convert a reduced potential (e/length) to volts.

    Accepts scalars or numpy arrays.
    """
    scale = ELEMENTARY_CHARGE / (
        4.0 * math.pi * EPSILON_0 * relative_permittivity * units.length_to_si
    )
    return reduced * scale


def to_field(reduced, units: UnitSystem, relative_permittivity: float = 1.0):
    """
    Convert a reduced field (e/length²) to V/m.

    Accepts scalars or numpy arrays.
    """
    scale = ELEMENTARY_CHARGE / (
        4.0 * math.pi * EPSILON_0 * relative_permittivity * units.length_to_si**2
    )
    return reduced * scale


def to_debye(dipole, units: UnitSystem):
    """
    Convert a dipole moment in e·length to debye.

    Accepts scalars or numpy arrays.
    """
    return dipole * ELEMENTARY_CHARGE * units.length_to_si / DEBYE


def from_debye(dipole, units: UnitSystem):
    """Convert a dipole moment in debye to e·length."""
    return dipole * DEBYE / (ELEMENTARY_CHARGE * units.length_to_si)
