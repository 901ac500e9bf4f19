"""
Spherical cutoff shared by all pairwise schemes.
"""
from abc import ABC


class Cutoff(ABC):
    """
    Mixin for objects with a spherical interaction radius.

    Subclasses provide a ``cutoff`` attribute (upper radius, may be
    ``math.inf``). The squared cutoff and the lower radius are derived.

    Example:
        >>> from pycoulomb.pairwise import RealSpaceEwald
        >>> scheme = RealSpaceEwald(cutoff=10.0, alpha=0.2)
        >>> scheme.cutoff_squared
        100.0
        >>> scheme.lower_cutoff
        0.0
    """

    cutoff: float

    @property
    def cutoff_squared(self) -> float:
        """Squared upper cutoff distance."""
        return self.cutoff**2

    @property
    def lower_cutoff(self) -> float:
        """Lower cutoff distance (0 unless overridden)."""
        return 0.0
