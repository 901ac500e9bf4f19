#!/usr/bin/env python3
"""
Example 1: Short-range switching functions

Tabulates S(q) for every scheme on the same grid and prints the
self-energy prefactors.

Physics:
    u(r) = z₁ z₂ S(r / r_cut) / r

Each scheme damps the bare Coulomb kernel differently. Ewald decays like
erfc, TruncatedEwald and Poisson reach zero smoothly at the cutoff and
the reaction field vanishes linearly.

Usage:
    python examples/01_switching_functions.py
"""
import math

import numpy as np

from pycoulomb.pairwise import (
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    TruncatedEwald,
)


def main():
    cutoff = 12.0
    schemes = {
        "plain": Plain(cutoff=cutoff),
        "ewald": RealSpaceEwald(cutoff=cutoff, alpha=0.2),
        "ewald_truncated": TruncatedEwald(cutoff=cutoff, alpha=0.2),
        "poisson(3,3)": Poisson(cutoff=cutoff, c=3, d=3),
        "reaction_field": ReactionField(cutoff=cutoff, dielec_out=math.inf),
    }

    grid = np.linspace(0.0, 1.0, 11)
    print(f"{'q':>6}" + "".join(f"{name:>17}" for name in schemes))
    for q in grid:
        row = "".join(f"{s.short_range_f0(q):17.6f}" for s in schemes.values())
        print(f"{q:6.2f}{row}")

    print()
    print("Self-energy prefactors (monopole, dipole):")
    for name, scheme in schemes.items():
        prefactors = scheme.self_energy_prefactors()
        print(f"  {name:<16} {prefactors.monopole}, {prefactors.dipole}")


if __name__ == "__main__":
    main()
