"""
Poisson scheme: polynomial switching with controllable smoothness.

The short-range function is a polynomial that cancels ``c`` derivatives
of the potential at the origin and lets S and its first ``d``
derivatives vanish at the cutoff. ``c = 1, d = 0`` gives S(q) = 1 - q,
the undamped Wolf potential.

With a Debye length the polynomial is evaluated at the screened reduced
distance x(q) = (1 - exp(2ζq)) / (1 - exp(2ζ)).

References:
    Carlsson & Lund, Mol. Phys. 116, 2155 (2018).
"""
import math
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Optional

import numpy as np
from numpy.polynomial import Polynomial

from .short_range import SelfEnergyPrefactors, ShortRangeFunction


@dataclass(frozen=True)
class Poisson(ShortRangeFunction):
    """
    Poisson short-range scheme.

    S(q) = G(x),  G(x) = (1 - x)^(d+1) Σ_{k<c} (c-k)/c · C(d-1+k, k) xᵏ

    Attributes:
        cutoff: Cutoff distance r_cut.
        c: Number of cancelled derivatives at the origin (>= 1).
        d: Smoothness order at the cutoff (>= 0); S and its first d
            derivatives vanish at q = 1.
        debye_length: Debye screening length, or None for no salt.

    Example:
        >>> scheme = Poisson(cutoff=10.0, c=3, d=3)
        >>> scheme.short_range_f0(0.0)
        1.0
    """
    cutoff: float
    c: int
    d: int
    debye_length: Optional[float] = None

    scheme_type: ClassVar[str] = "poisson"

    def __post_init__(self) -> None:
        if not self.cutoff > 0 or math.isinf(self.cutoff):
            raise ValueError(f"Cutoff must be positive and finite, got {self.cutoff}")
        if self.c < 1:
            raise ValueError(f"c must be at least 1, got {self.c}")
        if self.d < 0:
            raise ValueError(f"d must be non-negative, got {self.d}")
        if self.debye_length is not None and self.debye_length <= 0:
            raise ValueError(f"Debye length must be positive, got {self.debye_length}")

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

    @cached_property
    def _polynomials(self) -> tuple[Polynomial, ...]:
        """G and its first three derivatives."""
        c, d = self.c, self.d
        coefficients = [
            (c - k) / c * (1 if k == 0 else math.comb(d - 1 + k, k)) for k in range(c)
        ]
        g = Polynomial([1.0, -1.0]) ** (d + 1) * Polynomial(coefficients)
        return (g, g.deriv(1), g.deriv(2), g.deriv(3))

    def _screened_distance(self, q: float) -> tuple[float, float, float, float]:
        """
        Screened reduced distance x(q) and its first three q-derivatives.

        x' = -2ζ·exp(2ζq)/(1 - exp(2ζ)), x'' = 2ζ·x', x''' = 4ζ²·x'.
        """
        zeta = self.zeta
        if zeta is None:
            return q, 1.0, 0.0, 0.0
        denominator = 1.0 - math.exp(2.0 * zeta)
        growth = math.exp(2.0 * zeta * q)
        x = (1.0 - growth) / denominator
        x1 = -2.0 * zeta * growth / denominator
        return x, x1, 2.0 * zeta * x1, 4.0 * zeta**2 * x1

    def short_range_f0(self, q: float) -> float:
        g = self._polynomials[0]
        x, _, _, _ = self._screened_distance(q)
        return float(g(x))

    def short_range_f1(self, q: float) -> float:
        g1 = self._polynomials[1]
        x, x1, _, _ = self._screened_distance(q)
        return float(g1(x)) * x1

    def short_range_f2(self, q: float) -> float:
        _, g1, g2, _ = self._polynomials
        x, x1, x2, _ = self._screened_distance(q)
        return float(g2(x)) * x1**2 + float(g1(x)) * x2

    def short_range_f3(self, q: float) -> float:
        _, g1, g2, g3 = self._polynomials
        x, x1, x2, x3 = self._screened_distance(q)
        return (
            float(g3(x)) * x1**3
            + 3.0 * float(g2(x)) * x1 * x2
            + float(g1(x)) * x3
        )

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        monopole = 0.5 * self.short_range_f1(0.0)
        dipole = None
        # The dipole term is finite only when S''(0) vanishes
        if self.c >= 2 and self.debye_length is None:
            dipole = -self.short_range_f3(0.0) / 6.0
        return SelfEnergyPrefactors(monopole=monopole, dipole=dipole)

    def vanishing_derivatives(self, tolerance: float = 1e-9) -> int:
        """
        Count consecutive derivatives of G (from the zeroth) that vanish at the cutoff.

        Evaluates the exact polynomial derivatives of G at x = 1.

        Args:
            tolerance: Absolute tolerance for "zero".

        Returns:
            Number of leading derivatives equal to zero at q = 1.
        """
        g = self._polynomials[0]
        count = 0
        for order in range(g.degree() + 1):
            if abs(g.deriv(order)(1.0)) > tolerance:
                break
            count += 1
        return count

    @property
    def coefficients(self) -> np.ndarray:
        """Power-series coefficients of G in ascending order."""
        return self._polynomials[0].coef.copy()
