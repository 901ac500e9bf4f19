"""
Reaction-field scheme.

Molecules inside the cutoff sphere interact directly; everything outside
is a dielectric continuum of permittivity ε_out that polarises in
response. The optional shift makes the potential vanish at the cutoff.

References:
    Barker & Watts, Mol. Phys. 26, 789 (1973).
"""
import math
from dataclasses import dataclass
from typing import ClassVar

from .short_range import SelfEnergyPrefactors, ShortRangeFunction


@dataclass(frozen=True)
class ReactionField(ShortRangeFunction):
    """
    Reaction-field scheme.

    S(q) = 1 + k q³ - s q

    with k = (ε_out - ε_in)/(2ε_out + ε_in) and
    s = 3ε_out/(2ε_out + ε_in) if shifted, else 0.
    A conducting continuum (ε_out = inf) uses k = 1/2, s = 3/2.

    Attributes:
        cutoff: Cutoff distance r_cut.
        dielec_out: Relative permittivity of the surrounding continuum.
        dielec_in: Relative permittivity inside the cutoff sphere.
        shifted: Shift the potential to zero at the cutoff.

    Example:
        >>> scheme = ReactionField(cutoff=12.0, dielec_out=80.0)
        >>> abs(scheme.short_range_f0(1.0)) < 1e-12
        True
    """
    cutoff: float
    dielec_out: float
    dielec_in: float = 1.0
    shifted: bool = True

    scheme_type: ClassVar[str] = "reaction_field"

    def __post_init__(self) -> None:
        if not self.cutoff > 0 or math.isinf(self.cutoff):
            raise ValueError(f"Cutoff must be positive and finite, got {self.cutoff}")
        if not self.dielec_out > 0:
            raise ValueError(f"Outer permittivity must be positive, got {self.dielec_out}")
        if not 0 < self.dielec_in < math.inf:
            raise ValueError(f"Inner permittivity must be positive, got {self.dielec_in}")

    @classmethod
    def from_ratio(
        cls, cutoff: float, permittivity_ratio: float, shifted: bool = True
    ) -> "ReactionField":
        """
        Reaction field from the ratio ε_out/ε_in.

        Args:
            cutoff: Cutoff distance.
            permittivity_ratio: ε_out / ε_in.
            shifted: Shift the potential to zero at the cutoff.
        """
        return cls(cutoff=cutoff, dielec_out=permittivity_ratio, dielec_in=1.0, shifted=shifted)

    @property
    def permittivity_ratio(self) -> float:
        """Ratio ε_out / ε_in."""
        return self.dielec_out / self.dielec_in

    @property
    def _k(self) -> float:
        if math.isinf(self.dielec_out):
            return 0.5
        return (self.dielec_out - self.dielec_in) / (2.0 * self.dielec_out + self.dielec_in)

    @property
    def _s(self) -> float:
        if not self.shifted:
            return 0.0
        if math.isinf(self.dielec_out):
            return 1.5
        return 3.0 * self.dielec_out / (2.0 * self.dielec_out + self.dielec_in)

    def short_range_f0(self, q: float) -> float:
        return 1.0 + self._k * q**3 - self._s * q

    def short_range_f1(self, q: float) -> float:
        return 3.0 * self._k * q**2 - self._s

    def short_range_f2(self, q: float) -> float:
        return 6.0 * self._k * q

    def short_range_f3(self, q: float) -> float:
        return 6.0 * self._k

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        return SelfEnergyPrefactors(monopole=-0.5 * self._s, dipole=-self._k)
