"""
Plain Coulomb scheme.

No damping: S(q) = 1 for all q. Without a cutoff this is the bare
Coulomb law; with a Debye length the algebra adds Yukawa screening.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from .short_range import SelfEnergyPrefactors, ShortRangeFunction


@dataclass(frozen=True)
class Plain(ShortRangeFunction):
    """
    Plain Coulomb (or Yukawa) interaction.

    Attributes:
        cutoff: Cutoff distance (default: no cutoff).
        debye_length: Debye screening length, or None for no salt.

    Example:
        >>> from pycoulomb.pairwise import multipole
        >>> scheme = Plain.without_cutoff()
        >>> multipole.ion_potential(scheme, 1.0, 2.0)
        0.5
    """
    cutoff: float = math.inf
    debye_length: Optional[float] = None

    scheme_type: ClassVar[str] = "plain"

    def __post_init__(self) -> None:
        if not self.cutoff > 0:
            raise ValueError(f"Cutoff must be positive, got {self.cutoff}")
        if self.debye_length is not None and self.debye_length <= 0:
            raise ValueError(f"Debye length must be positive, got {self.debye_length}")

    @classmethod
    def without_cutoff(cls) -> "Plain":
        """Bare Coulomb interaction over all distances."""
        return cls()

    @property
    def kappa(self) -> Optional[float]:
        """Inverse Debye length if salt is present, otherwise None."""
        if self.debye_length is None:
            return None
        return 1.0 / self.debye_length

    def short_range_f0(self, q: float) -> float:
        return 1.0

    def short_range_f1(self, q: float) -> float:
        return 0.0

    def short_range_f2(self, q: float) -> float:
        return 0.0

    def short_range_f3(self, q: float) -> float:
        return 0.0

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        return SelfEnergyPrefactors()
