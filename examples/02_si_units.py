#!/usr/bin/env python3
"""
Example 2: From reduced to SI units

Two ions, z₁ = 1 and z₂ = 2, 2.3 nm apart in vacuum. The interaction
energy is computed three ways (energy, potential and field) and the
field of the first ion polarises a particle with a 1 nm³
polarisability volume.

Usage:
    python examples/02_si_units.py
"""
import numpy as np

from pycoulomb.constants import AVOGADRO, DEBYE, ELEMENTARY_CHARGE, EPSILON_0
from pycoulomb.pairwise import Plain, multipole
from pycoulomb.units import Units, to_energy, to_field, to_potential


def main():
    scheme = Plain.without_cutoff()
    units = Units.GROMACS()
    z1, z2 = 1.0, 2.0
    r = np.array([2.3, 0.0, 0.0])  # nm
    distance = np.linalg.norm(r)

    energy = to_energy(multipole.ion_ion_energy(scheme, z1, z2, distance), units)
    print(f"Energy:            {energy:.6f} kJ/mol")

    volts = to_potential(multipole.ion_potential(scheme, z1, distance), units)
    print(f"Potential × z₂:    {volts * z2 * ELEMENTARY_CHARGE * AVOGADRO / 1e3:.6f} kJ/mol")

    field = to_field(multipole.ion_field(scheme, z1, r), units)
    work = np.linalg.norm(field) * z2 * ELEMENTARY_CHARGE * distance * units.length_to_si
    print(f"Field × z₂ × r:    {work * AVOGADRO / 1e3:.6f} kJ/mol")

    polarizability = 4.0 * np.pi * EPSILON_0 * 1e-27
    dipole = polarizability * field
    print(f"Induced dipole:    {np.linalg.norm(dipole) / DEBYE:.6f} D")
    polarisation = -0.5 * np.dot(field, dipole) * AVOGADRO / 1e3
    print(f"Polarisation:      {polarisation:.6f} kJ/mol")


if __name__ == "__main__":
    main()
