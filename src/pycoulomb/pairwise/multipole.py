"""
Multipole algebra for any short-range scheme.

Potentials, fields, forces and energies of point charges and point
dipoles are derived once from the short-range function S(q) of a scheme
and its derivatives. Any object implementing
:class:`~pycoulomb.pairwise.short_range.ShortRangeFunction` gets all
operations without scheme-specific code.

Screening: when ``scheme.kappa`` is set, the kernel is
Ŝ(q) = S(q)·exp(-κr). Formulas are written with the products

    Dₙ = qⁿ · dⁿŜ/dqⁿ,   n = 0..3

which stay finite for schemes without a cutoff (q = 0).

Units are reduced: charges in elementary charges (or any charge unit),
lengths in the unit of the cutoff, so energies come out as
charge²/length. Multiply by 1/(4πε₀εᵣ) with :mod:`pycoulomb.units`.

All functions return exact zeros for r > r_cut and for r = 0.

Example:
    >>> from pycoulomb.pairwise import RealSpaceEwald, multipole
    >>> scheme = RealSpaceEwald(cutoff=29.0, alpha=0.1)
    >>> energy = multipole.ion_ion_energy(scheme, 1.0, -1.0, 7.0)
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from .short_range import ShortRangeFunction

__all__ = [
    "ion_potential",
    "dipole_potential",
    "ion_field",
    "dipole_field",
    "ion_ion_energy",
    "ion_dipole_energy",
    "dipole_dipole_energy",
    "ion_ion_force",
    "ion_dipole_force",
    "dipole_dipole_force",
    "self_energy",
]


def _interacts(scheme: "ShortRangeFunction", distance: float) -> bool:
    """Pairs at zero separation or beyond the cutoff do not interact."""
    return 0.0 < distance <= scheme.cutoff


def _kernel_terms(
    scheme: "ShortRangeFunction", distance: float, order: int
) -> tuple[float, ...]:
    """
    Compute D₀..D_order for the screened kernel at a given distance.

    Args:
        scheme: Short-range scheme.
        distance: Separation r (0 < r <= r_cut).
        order: Highest derivative needed (0-3).

    Returns:
        Tuple (D₀, ..., D_order).
    """
    q = distance / scheme.cutoff
    derivatives = (
        scheme.short_range_f0,
        scheme.short_range_f1,
        scheme.short_range_f2,
        scheme.short_range_f3,
    )
    # s[n] = qⁿ S⁽ⁿ⁾(q)
    s = [q**n * derivatives[n](q) for n in range(order + 1)]

    kappa = scheme.kappa
    if kappa is None:
        return tuple(s)

    # Leibniz rule for S(q)·exp(-ζq), with x = ζq = κr
    x = kappa * distance
    screening = math.exp(-x)
    terms = []
    for n in range(order + 1):
        total = sum(math.comb(n, k) * s[k] * (-x) ** (n - k) for k in range(n + 1))
        terms.append(total * screening)
    return tuple(terms)


def _unit_vector(r: ArrayLike) -> tuple[NDArray[np.float64], float]:
    vector = np.asarray(r, dtype=np.float64)
    distance = float(np.linalg.norm(vector))
    if distance == 0.0:
        return np.zeros(3), 0.0
    return vector / distance, distance


# ------------------------------------------------------------------ #
#  Potentials
# ------------------------------------------------------------------ #


def ion_potential(
    scheme: "ShortRangeFunction", charge: float, distance: float
) -> float:
    """
    Electrostatic potential from a point charge.

    φ(r) = z · D₀ / r

    Args:
        scheme: Short-range scheme.
        charge: Source charge z.
        distance: Distance r from the charge.

    Returns:
        Potential (charge/length).
    """
    if not _interacts(scheme, distance):
        return 0.0
    (d0,) = _kernel_terms(scheme, distance, 0)
    return charge * d0 / distance


def dipole_potential(
    scheme: "ShortRangeFunction", dipole: ArrayLike, r: ArrayLike
) -> float:
    """
    Electrostatic potential from a point dipole.

    φ(r) = μ·r̂ (D₀ - D₁) / r²

    Args:
        scheme: Short-range scheme.
        dipole: Dipole moment μ (3,).
        r: Vector from the dipole to the evaluation point (3,).

    Returns:
        Potential (charge/length).
    """
    unit, distance = _unit_vector(r)
    if not _interacts(scheme, distance):
        return 0.0
    d0, d1 = _kernel_terms(scheme, distance, 1)
    return float(np.dot(dipole, unit)) * (d0 - d1) / distance**2


# ------------------------------------------------------------------ #
#  Fields
# ------------------------------------------------------------------ #


def ion_field(
    scheme: "ShortRangeFunction", charge: float, r: ArrayLike
) -> NDArray[np.float64]:
    """
    Electric field from a point charge.

    E(r) = z r̂ (D₀ - D₁) / r²

    Args:
        scheme: Short-range scheme.
        charge: Source charge z.
        r: Vector from the charge to the evaluation point (3,).

    Returns:
        (3,) field vector (charge/length²).
    """
    unit, distance = _unit_vector(r)
    if not _interacts(scheme, distance):
        return np.zeros(3)
    d0, d1 = _kernel_terms(scheme, distance, 1)
    return charge * (d0 - d1) / distance**2 * unit


def dipole_field(
    scheme: "ShortRangeFunction", dipole: ArrayLike, r: ArrayLike
) -> NDArray[np.float64]:
    """
    Electric field from a point dipole.

    E(r) = [(3D₀ - 3D₁ + D₂)(μ·r̂) r̂ - (D₀ - D₁) μ] / r³

    Args:
        scheme: Short-range scheme.
        dipole: Dipole moment μ (3,).
        r: Vector from the dipole to the evaluation point (3,).

    Returns:
        (3,) field vector (charge/length²).
    """
    unit, distance = _unit_vector(r)
    if not _interacts(scheme, distance):
        return np.zeros(3)
    mu = np.asarray(dipole, dtype=np.float64)
    d0, d1, d2 = _kernel_terms(scheme, distance, 2)
    radial = (3.0 * d0 - 3.0 * d1 + d2) * np.dot(mu, unit) * unit
    return (radial - (d0 - d1) * mu) / distance**3


# ------------------------------------------------------------------ #
#  Energies
# ------------------------------------------------------------------ #


def ion_ion_energy(
    scheme: "ShortRangeFunction", charge1: float, charge2: float, distance: float
) -> float:
    """
    Interaction energy between two point charges.

    u = z₁ z₂ D₀ / r

    Args:
        scheme: Short-range scheme.
        charge1: First charge.
        charge2: Second charge.
        distance: Separation r.

    Returns:
        Energy (charge²/length).
    """
    return charge1 * ion_potential(scheme, charge2, distance)


def ion_dipole_energy(
    scheme: "ShortRangeFunction", charge: float, dipole: ArrayLike, r: ArrayLike
) -> float:
    """
    Interaction energy between a point charge and a point dipole.

    Args:
        scheme: Short-range scheme.
        charge: Charge z.
        dipole: Dipole moment μ (3,).
        r: Vector from the dipole to the charge (3,).

    Returns:
        Energy (charge²/length).
    """
    return charge * dipole_potential(scheme, dipole, r)


def dipole_dipole_energy(
    scheme: "ShortRangeFunction",
    dipole1: ArrayLike,
    dipole2: ArrayLike,
    r: ArrayLike,
) -> float:
    """
    Interaction energy between two point dipoles.

    u = -μ₁ · E₂(r)

    Args:
        scheme: Short-range scheme.
        dipole1: First dipole moment (3,).
        dipole2: Second dipole moment (3,).
        r: Vector from dipole 2 to dipole 1 (3,).

    Returns:
        Energy (charge²/length).
    """
    return -float(np.dot(dipole1, dipole_field(scheme, dipole2, r)))


# ------------------------------------------------------------------ #
#  Forces
# ------------------------------------------------------------------ #


def ion_ion_force(
    scheme: "ShortRangeFunction", charge1: float, charge2: float, r: ArrayLike
) -> NDArray[np.float64]:
    """
    Force on charge 1 from charge 2.

    Like charges repel: the force points along r for z₁z₂ > 0.

    Args:
        scheme: Short-range scheme.
        charge1: Charge receiving the force.
        charge2: Source charge.
        r: Vector from charge 2 to charge 1 (3,).

    Returns:
        (3,) force vector (charge²/length²).
    """
    return charge1 * ion_field(scheme, charge2, r)


def ion_dipole_force(
    scheme: "ShortRangeFunction", charge: float, dipole: ArrayLike, r: ArrayLike
) -> NDArray[np.float64]:
    """
    Force on a point charge from a point dipole.

    The force on the dipole is the negative of this.

    Args:
        scheme: Short-range scheme.
        charge: Charge z.
        dipole: Dipole moment μ (3,).
        r: Vector from the dipole to the charge (3,).

    Returns:
        (3,) force vector (charge²/length²).
    """
    return charge * dipole_field(scheme, dipole, r)


def dipole_dipole_force(
    scheme: "ShortRangeFunction",
    dipole1: ArrayLike,
    dipole2: ArrayLike,
    r: ArrayLike,
) -> NDArray[np.float64]:
    """
    Force on dipole 1 from dipole 2.

    F = a (μ₁·r̂)(μ₂·r̂) r̂ + b [(μ₁·μ₂) r̂ + (μ₁·r̂) μ₂ + (μ₂·r̂) μ₁]

    with a = (D₃ - 6D₂ + 15D₁ - 15D₀)/r⁴ and b = (3D₀ - 3D₁ + D₂)/r⁴.

    Args:
        scheme: Short-range scheme.
        dipole1: Dipole receiving the force (3,).
        dipole2: Source dipole (3,).
        r: Vector from dipole 2 to dipole 1 (3,).

    Returns:
        (3,) force vector (charge²/length²).
    """
    unit, distance = _unit_vector(r)
    if not _interacts(scheme, distance):
        return np.zeros(3)
    mu1 = np.asarray(dipole1, dtype=np.float64)
    mu2 = np.asarray(dipole2, dtype=np.float64)
    d0, d1, d2, d3 = _kernel_terms(scheme, distance, 3)
    r4 = distance**4
    a = (d3 - 6.0 * d2 + 15.0 * d1 - 15.0 * d0) / r4
    b = (3.0 * d0 - 3.0 * d1 + d2) / r4

    mu1_r = np.dot(mu1, unit)
    mu2_r = np.dot(mu2, unit)
    return a * mu1_r * mu2_r * unit + b * (
        np.dot(mu1, mu2) * unit + mu1_r * mu2 + mu2_r * mu1
    )


# ------------------------------------------------------------------ #
#  Self-energy
# ------------------------------------------------------------------ #


def self_energy(
    scheme: "ShortRangeFunction",
    charges: Sequence[float],
    dipoles: Sequence[float],
) -> float:
    """
    Self-energy correction for a set of charges and dipoles.

    u_self = c_mono Σzᵢ² / r_cut + c_dip Σμᵢ² / r_cut³

    Args:
        scheme: Short-range scheme.
        charges: Charges zᵢ.
        dipoles: Dipole moment magnitudes μᵢ.

    Returns:
        Self-energy (charge²/length); zero for absent prefactors.
    """
    prefactors = scheme.self_energy_prefactors()
    energy = 0.0
    if prefactors.monopole is not None:
        squared = float(np.sum(np.square(np.asarray(charges, dtype=np.float64))))
        energy += prefactors.monopole * squared / scheme.cutoff
    if prefactors.dipole is not None:
        squared = float(np.sum(np.square(np.asarray(dipoles, dtype=np.float64))))
        energy += prefactors.dipole * squared / scheme.cutoff**3
    return energy
