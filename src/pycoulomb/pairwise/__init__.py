"""
Pairwise electrostatic schemes.

Each scheme implements the short-range function S(q) and its derivatives;
the multipole algebra turns any scheme into potentials, fields, forces
and energies for charges and dipoles.

Available schemes:
- Plain: no damping (optionally Yukawa screened)
- RealSpaceEwald: erfc damping with optional Debye screening
- TruncatedEwald: Ewald damping that vanishes smoothly at the cutoff
- Poisson: polynomial switching with controllable smoothness
- ReactionField: dielectric continuum beyond the cutoff
"""
from typing import Union

from . import multipole
from .ewald import RealSpaceEwald
from .ewald_truncated import TruncatedEwald
from .plain import Plain
from .poisson import Poisson
from .reaction_field import ReactionField
from .short_range import SelfEnergyPrefactors, ShortRangeFunction

Scheme = Union[Plain, RealSpaceEwald, TruncatedEwald, Poisson, ReactionField]
"""Closed set of scheme records."""

SCHEMES: dict[str, type] = {
    cls.scheme_type: cls
    for cls in (Plain, RealSpaceEwald, TruncatedEwald, Poisson, ReactionField)
}
"""Scheme classes keyed by their configuration tag."""

__all__ = [
    # Base class
    "ShortRangeFunction",
    "SelfEnergyPrefactors",
    # Schemes
    "Plain",
    "RealSpaceEwald",
    "TruncatedEwald",
    "Poisson",
    "ReactionField",
    "Scheme",
    "SCHEMES",
    # Algebra
    "multipole",
]
