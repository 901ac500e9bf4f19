"""
Truncated Gaussian Ewald scheme.

Each point charge is neutralised by a Gaussian charge cloud that is
truncated at the cutoff and shifted so that the cloud density vanishes
there. The resulting short-range function reaches zero at q = 1 with
zero slope.
"""
import math
from dataclasses import dataclass
from typing import ClassVar

from .short_range import SelfEnergyPrefactors, ShortRangeFunction

SQRT_PI = math.sqrt(math.pi)


@dataclass(frozen=True)
class TruncatedEwald(ShortRangeFunction):
    """
    Ewald real-space scheme with a finite-range screening cloud.

    With η = α·r_cut, E = (2η/√π)·exp(-η²) and
    F₀ = erf(η) - E(1 + 2η²/3):

        S(q) = 1 - [erf(ηq) - E(q(1 + η²) - η²q³/3)] / F₀

    S(0) = 1 and S, S' and S'' vanish at q = 1.

    Attributes:
        cutoff: Cutoff distance r_cut.
        alpha: Ewald splitting parameter α (inverse length).

    Example:
        >>> scheme = TruncatedEwald(cutoff=10.0, alpha=0.3)
        >>> abs(scheme.short_range_f0(1.0)) < 1e-12
        True
    """
    cutoff: float
    alpha: float

    scheme_type: ClassVar[str] = "ewald_truncated"

    def __post_init__(self) -> None:
        if not self.cutoff > 0 or math.isinf(self.cutoff):
            raise ValueError(f"Cutoff must be positive and finite, got {self.cutoff}")
        if self.alpha <= 0:
            raise ValueError(f"Alpha must be positive, got {self.alpha}")

    @property
    def eta(self) -> float:
        """Reduced splitting parameter η = α·r_cut."""
        return self.alpha * self.cutoff

    @property
    def _edge(self) -> float:
        """Gaussian prefactor at the cutoff, E = (2η/√π)·exp(-η²)."""
        eta = self.eta
        return 2.0 * eta / SQRT_PI * math.exp(-(eta**2))

    @property
    def _norm(self) -> float:
        """Charge of the truncated cloud, F₀."""
        eta = self.eta
        return math.erf(eta) - self._edge * (1.0 + 2.0 * eta**2 / 3.0)

    def short_range_f0(self, q: float) -> float:
        eta2 = self.eta**2
        cloud = math.erf(self.eta * q) - self._edge * (q * (1.0 + eta2) - eta2 * q**3 / 3.0)
        return 1.0 - cloud / self._norm

    def short_range_f1(self, q: float) -> float:
        eta = self.eta
        gaussian = 2.0 * eta / SQRT_PI * math.exp(-((eta * q) ** 2))
        return -(gaussian - self._edge * (1.0 + eta**2 - eta**2 * q**2)) / self._norm

    def short_range_f2(self, q: float) -> float:
        eta = self.eta
        gaussian = 4.0 * eta**3 * q / SQRT_PI * math.exp(-((eta * q) ** 2))
        return (gaussian - 2.0 * self._edge * eta**2 * q) / self._norm

    def short_range_f3(self, q: float) -> float:
        eta = self.eta
        gaussian = (
            4.0 * eta**3 / SQRT_PI
            * (1.0 - 2.0 * (eta * q) ** 2)
            * math.exp(-((eta * q) ** 2))
        )
        return (gaussian - 2.0 * self._edge * eta**2) / self._norm

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        eta = self.eta
        decay = math.exp(-(eta**2))
        monopole = -eta / SQRT_PI * (1.0 - (1.0 + eta**2) * decay) / self._norm
        dipole = -2.0 * eta**3 / (3.0 * SQRT_PI) * (1.0 - decay) / self._norm
        return SelfEnergyPrefactors(monopole=monopole, dipole=dipole)
