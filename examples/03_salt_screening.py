#!/usr/bin/env python3
"""
Example 3: Salt screening

Debye lengths of sodium chloride solutions and the effect of screening
on the real-space Ewald interaction between two monovalent ions.

Usage:
    python examples/03_salt_screening.py
"""
import logging

from pycoulomb.medium import SODIUM_CHLORIDE, Medium
from pycoulomb.pairwise import RealSpaceEwald, multipole
from pycoulomb.units import Units, to_energy


def main():
    logging.basicConfig(level=logging.INFO)
    units = Units.REAL()
    medium = Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.01)
    print(f"{'molarity':>10} {'λ_D (Å)':>10} {'u(7 Å) kT':>12}")
    for molarity in (0.01, 0.05, 0.1, 0.5, 1.0):
        medium = medium.with_molarity(molarity)
        scheme = RealSpaceEwald(cutoff=29.0, alpha=0.1, debye_length=medium.debye_length)
        reduced = multipole.ion_ion_energy(scheme, 1.0, -1.0, 7.0)
        kcal = to_energy(reduced, units, medium.relative_permittivity)
        # kT at 298.15 K is 0.5925 kcal/mol
        print(f"{molarity:10.2f} {medium.debye_length:10.2f} {kcal / 0.5925:12.4f}")


if __name__ == "__main__":
    main()
