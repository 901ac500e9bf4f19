"""
Real-space Ewald scheme with optional Debye screening.

The short-range function is the complementary error function of the
reduced distance. With a Debye length it splits into two erfc branches
weighted by exp(±2ζq), combining Gaussian and ionic screening.

References:
    P. P. Ewald, Ann. Phys. 369, 253 (1921).
    Stenqvist & Lund, CoulombGalore, doi:10.5281/zenodo.3522058.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from .short_range import SelfEnergyPrefactors, ShortRangeFunction

SQRT_PI = math.sqrt(math.pi)

# Abramowitz & Stegun 7.1.26
_AS_P = 0.3275911
_AS_COEFFICIENTS = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)


def erfc_x(x: float) -> float:
    """
    Complementary error function, Abramowitz & Stegun 7.1.26.

    Absolute error below 1.5e-7. Negative arguments use
    erfc(x) = 2 - erfc(-x).

    Args:
        x: Argument.

    Returns:
        Approximation of erfc(x).
    """
    if x < 0.0:
        return 2.0 - erfc_x(-x)
    t = 1.0 / (1.0 + _AS_P * x)
    polynomial = 0.0
    for a in reversed(_AS_COEFFICIENTS):
        polynomial = t * (a + polynomial)
    return polynomial * math.exp(-x * x)


@dataclass(frozen=True)
class RealSpaceEwald(ShortRangeFunction):
    """
    Real-space Ewald scheme.

    S(q) = ½[erfc(ηq + ζ/2η)·exp(2ζq) + erfc(ηq - ζ/2η)]

    where η = α·r_cut and ζ = r_cut / λ_D. Without a Debye length ζ = 0
    and S(q) = erfc(ηq).

    Attributes:
        cutoff: Real-space cutoff distance r_cut.
        alpha: Ewald splitting parameter α (inverse length).
        debye_length: Debye screening length λ_D (same length unit as the
            cutoff), or None for no salt.

    Example:
        >>> scheme = RealSpaceEwald(cutoff=29.0, alpha=0.1)
        >>> round(scheme.short_range_f0(0.5), 6)
        0.040305
    """
    cutoff: float
    alpha: float
    debye_length: Optional[float] = None

    scheme_type: ClassVar[str] = "ewald"

    def __post_init__(self) -> None:
        if not self.cutoff > 0 or math.isinf(self.cutoff):
            raise ValueError(f"Cutoff must be positive and finite, got {self.cutoff}")
        if self.alpha <= 0:
            raise ValueError(f"Alpha must be positive, got {self.alpha}")
        if self.debye_length is not None and self.debye_length <= 0:
            raise ValueError(f"Debye length must be positive, got {self.debye_length}")

    @classmethod
    def without_salt(cls, cutoff: float, alpha: float) -> "RealSpaceEwald":
        """Salt-free Ewald scheme."""
        return cls(cutoff=cutoff, alpha=alpha)

    @property
    def eta(self) -> float:
        """Reduced splitting parameter η = α·r_cut."""
        return self.alpha * self.cutoff

    @property
    def zeta(self) -> Optional[float]:
        """Reduced inverse Debye length ζ = r_cut / λ_D, or None."""
        if self.debye_length is None:
            return None
        return self.cutoff / self.debye_length

    @property
    def kappa(self) -> Optional[float]:
        """Inverse Debye length if salt is present, otherwise None."""
        if self.debye_length is None:
            return None
        return 1.0 / self.debye_length

    def _branches(self, q: float) -> tuple[float, float, float]:
        """
        Return ζ, the Gaussian branch exp(-(ηq - ζ/2η)²) and the
        screened branch erfc(ηq + ζ/2η)·exp(2ζq).
        """
        eta = self.eta
        zeta = self.zeta or 0.0
        gaussian = math.exp(-((eta * q - zeta / (2.0 * eta)) ** 2))
        screened = erfc_x(eta * q + zeta / (2.0 * eta)) * math.exp(2.0 * zeta * q)
        return zeta, gaussian, screened

    def short_range_f0(self, q: float) -> float:
        eta = self.eta
        zeta = self.zeta or 0.0
        return 0.5 * (
            erfc_x(eta * q + zeta / (2.0 * eta)) * math.exp(2.0 * zeta * q)
            + erfc_x(eta * q - zeta / (2.0 * eta))
        )

    def short_range_f1(self, q: float) -> float:
        eta = self.eta
        zeta, gaussian, screened = self._branches(q)
        return -2.0 * eta / SQRT_PI * gaussian + zeta * screened

    def short_range_f2(self, q: float) -> float:
        eta = self.eta
        zeta, gaussian, screened = self._branches(q)
        return (
            4.0 * eta**2 / SQRT_PI * (eta * q - zeta / eta) * gaussian
            + 2.0 * zeta**2 * screened
        )

    def short_range_f3(self, q: float) -> float:
        eta = self.eta
        zeta, gaussian, screened = self._branches(q)
        polynomial = (
            1.0
            - 2.0 * (eta * q - zeta / eta) * (eta * q - zeta / (2.0 * eta))
            - zeta**2 / eta**2
        )
        return (
            4.0 * eta**3 / SQRT_PI * polynomial * gaussian
            + 4.0 * zeta**3 * screened
        )

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        eta = self.eta
        zeta = self.zeta or 0.0
        gaussian = math.exp(-(zeta**2) / (4.0 * eta**2))
        screened = erfc_x(zeta / (2.0 * eta))

        monopole = -eta / SQRT_PI * (gaussian - SQRT_PI * zeta / (2.0 * eta) * screened)
        dipole = (
            -2.0 * eta**3 / (3.0 * SQRT_PI)
            * (
                SQRT_PI * zeta**3 / (4.0 * eta**3) * screened
                + (1.0 - zeta**2 / (2.0 * eta**2)) * gaussian
            )
        )
        return SelfEnergyPrefactors(monopole=monopole, dipole=dipole)
