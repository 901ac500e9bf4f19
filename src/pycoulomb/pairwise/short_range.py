"""
Abstract base class for short-range (truncation/damping) functions.

Every pairwise scheme multiplies the bare Coulomb kernel 1/r by a
dimensionless switching function S(q) of the reduced distance
q = r / r_cut. Schemes supply S and its first three derivatives in
closed form; the multipole algebra in :mod:`pycoulomb.pairwise.multipole`
derives potentials, fields, forces and energies from them.
"""
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from pycoulomb.cutoff import Cutoff
from pycoulomb.pairwise.multipole import self_energy as _self_energy


@dataclass(frozen=True)
class SelfEnergyPrefactors:
    """
    Self-energy coefficients of a scheme.

    The self-energy is ``monopole * sum(z**2) / r_cut`` plus
    ``dipole * sum(mu**2) / r_cut**3``. An absent coefficient contributes
    nothing.

    Attributes:
        monopole: Coefficient for charges, or None.
        dipole: Coefficient for point dipoles, or None.
    """
    monopole: Optional[float] = None
    dipole: Optional[float] = None


class ShortRangeFunction(Cutoff):
    """
    Abstract base for ALL pairwise electrostatic schemes.

    ╔══════════════════════════════════════════════════════════╗
    ║  Schemes implement S(q), S'(q), S''(q), S'''(q)          ║
    ║  and the self-energy prefactors.                         ║
    ║                                                          ║
    ║  Potential, field, force and energy for charges and      ║
    ║  dipoles come from pycoulomb.pairwise.multipole.         ║
    ╚══════════════════════════════════════════════════════════╝

    Derivatives are taken with respect to q, not r. S(0) = 1 for every
    scheme in this package.

    Example:
        >>> from dataclasses import dataclass
        >>> @dataclass(frozen=True)
        ... class Bare(ShortRangeFunction):
        ...     cutoff: float
        ...     def short_range_f0(self, q): return 1.0
        ...     def short_range_f1(self, q): return 0.0
        ...     def short_range_f2(self, q): return 0.0
        ...     def short_range_f3(self, q): return 0.0
        ...     def self_energy_prefactors(self):
        ...         return SelfEnergyPrefactors()
    """

    scheme_type: ClassVar[str] = ""
    """Tag identifying the scheme in configuration files."""

    @property
    def kappa(self) -> Optional[float]:
        """
        Inverse Debye screening length.

        None means no ionic screening.
        """
        return None

    @abstractmethod
    def short_range_f0(self, q: float) -> float:
        """
        Short-range function S(q).

        Args:
            q: Reduced distance r / r_cut in [0, 1].

        Returns:
            Dimensionless switching value.
        """
        pass

    @abstractmethod
    def short_range_f1(self, q: float) -> float:
        """First derivative dS/dq."""
        pass

    @abstractmethod
    def short_range_f2(self, q: float) -> float:
        """Second derivative d²S/dq²."""
        pass

    @abstractmethod
    def short_range_f3(self, q: float) -> float:
        """Third derivative d³S/dq³."""
        pass

    @abstractmethod
    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        """Monopole and dipole self-energy coefficients."""
        pass

    def self_energy(self, charges, dipoles) -> float:
        """
        Self-energy of a set of charges and dipole moments.

        Shortcut for :func:`pycoulomb.pairwise.multipole.self_energy`.
        """
        return _self_energy(self, charges, dipoles)
