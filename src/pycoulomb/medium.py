"""
Electrolyte media: salts, ionic strength, Bjerrum and Debye lengths.

A medium combines a temperature, a relative permittivity model and an
optional salt at a given molarity. Its Debye length feeds the screened
pairwise schemes.

Example:
    >>> from pycoulomb.medium import Medium, SODIUM_CHLORIDE
    >>> medium = Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.1)
    >>> round(medium.debye_length, 1)
    9.6
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from pycoulomb.constants import (
    ANGSTROM_TO_METER,
    AVOGADRO,
    BOLTZMANN_SI,
    ELEMENTARY_CHARGE,
    EPSILON_0,
    LITER_TO_CUBIC_METER,
)
from pycoulomb.exceptions import (
    InvalidMolarityError,
    MissingSaltError,
    StoichiometryError,
)
from pycoulomb.permittivity import WATER, RelativePermittivity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Salt:
    """
    A salt described by ion valencies and stoichiometric coefficients.

    Attributes:
        name: Human-readable name.
        valencies: Valency of each ion species.
        stoichiometry: Number of ions of each species per formula unit.
    """
    name: str
    valencies: Tuple[int, ...]
    stoichiometry: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.valencies) != len(self.stoichiometry):
            raise StoichiometryError(
                f"{len(self.valencies)} valencies but {len(self.stoichiometry)} "
                "stoichiometric coefficients"
            )
        if not any(z > 0 for z in self.valencies) or not any(z < 0 for z in self.valencies):
            raise StoichiometryError(
                "cannot resolve stoichiometry; provide both positive and negative ions"
            )
        if sum(z * n for z, n in zip(self.valencies, self.stoichiometry)) != 0:
            raise StoichiometryError(f"Salt {self.name} is not electroneutral")

    @classmethod
    def binary(cls, cation: int, anion: int, name: str = "") -> "Salt":
        """
        Binary salt with stoichiometry derived from the valencies.

        Args:
            cation: Positive valency, e.g. 2 for Ca²⁺.
            anion: Negative valency, e.g. -1 for Cl⁻.
            name: Optional name.

        Raises:
            StoichiometryError: If the valencies do not have opposite signs.
        """
        if cation <= 0 or anion >= 0:
            raise StoichiometryError(
                "cannot resolve stoichiometry; provide both positive and negative ions"
            )
        gcd = math.gcd(cation, -anion)
        return cls(
            name=name or f"{cation}:{-anion}",
            valencies=(cation, anion),
            stoichiometry=(-anion // gcd, cation // gcd),
        )

    def ionic_strength(self, molarity: float) -> float:
        """
        Ionic strength I = ½ Σ cᵢ zᵢ².

        Args:
            molarity: Salt concentration (mol/L).

        Returns:
            Ionic strength (mol/L).
        """
        return 0.5 * molarity * sum(
            n * z**2 for z, n in zip(self.valencies, self.stoichiometry)
        )


SODIUM_CHLORIDE = Salt.binary(1, -1, "NaCl")
CALCIUM_CHLORIDE = Salt.binary(2, -1, "CaCl₂")
CALCIUM_SULFATE = Salt.binary(2, -2, "CaSO₄")
SODIUM_SULFATE = Salt.binary(1, -2, "Na₂SO₄")
LANTHANUM_CHLORIDE = Salt.binary(3, -1, "LaCl₃")
POTASSIUM_ALUM = Salt("KAl(SO₄)₂", valencies=(1, 3, -2), stoichiometry=(1, 1, 2))

SALTS: Dict[str, Salt] = {
    "sodium_chloride": SODIUM_CHLORIDE,
    "calcium_chloride": CALCIUM_CHLORIDE,
    "calcium_sulfate": CALCIUM_SULFATE,
    "sodium_sulfate": SODIUM_SULFATE,
    "lanthanum_chloride": LANTHANUM_CHLORIDE,
    "potassium_alum": POTASSIUM_ALUM,
}
"""Named salts, as used in configuration files."""


def bjerrum_length(temperature: float, relative_permittivity: float) -> float:
    """
    Bjerrum length l_B = e² / (4πε₀εᵣ k_B T).

    Args:
        temperature: Temperature (K).
        relative_permittivity: Relative permittivity εᵣ.

    Returns:
        Bjerrum length (Å).
    """
    meters = ELEMENTARY_CHARGE**2 / (
        4.0 * math.pi * EPSILON_0 * relative_permittivity * BOLTZMANN_SI * temperature
    )
    return meters / ANGSTROM_TO_METER


def debye_length(
    temperature: float, relative_permittivity: float, ionic_strength: float
) -> float:
    """
    Debye screening length λ_D = (8π l_B N_A I)^(-1/2).

    Args:
        temperature: Temperature (K).
        relative_permittivity: Relative permittivity εᵣ.
        ionic_strength: Ionic strength (mol/L).

    Returns:
        Debye length (Å); infinite for zero ionic strength or infinite
        permittivity.
    """
    if ionic_strength == 0.0:
        return math.inf
    lb = bjerrum_length(temperature, relative_permittivity) * ANGSTROM_TO_METER
    number_density = ionic_strength / LITER_TO_CUBIC_METER * AVOGADRO
    kappa = math.sqrt(8.0 * math.pi * lb * number_density)
    if kappa == 0.0:
        return math.inf
    return 1.0 / kappa / ANGSTROM_TO_METER


@dataclass(frozen=True)
class Medium:
    """
    Electrolyte medium.

    Attributes:
        temperature: Temperature (K).
        permittivity: Relative permittivity model.
        salt: Dissolved salt, or None.
        molarity: Salt concentration (mol/L), required with a salt.

    Example:
        >>> medium = Medium.neat_water(298.15)
        >>> medium.debye_length is None
        True
    """
    temperature: float
    permittivity: RelativePermittivity
    salt: Optional[Salt] = None
    molarity: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.temperature > 0:
            raise ValueError(f"Temperature must be positive, got {self.temperature}")
        if self.molarity is not None:
            if self.salt is None:
                raise MissingSaltError("cannot set molarity without a salt")
            _check_molarity(self.molarity)
        elif self.salt is not None:
            raise InvalidMolarityError(f"Salt {self.salt.name} requires a molarity")
        # Fail early when the temperature is outside the permittivity model
        eps_r = self.permittivity.permittivity(self.temperature)
        logger.debug(f"Medium at {self.temperature} K with εᵣ = {eps_r:.4f}")

    @classmethod
    def neat_water(cls, temperature: float) -> "Medium":
        """Pure water with temperature dependent permittivity."""
        return cls(temperature=temperature, permittivity=WATER)

    @classmethod
    def salt_water(cls, temperature: float, salt: Salt, molarity: float) -> "Medium":
        """Water with a dissolved salt."""
        return cls(temperature=temperature, permittivity=WATER, salt=salt, molarity=molarity)

    def with_molarity(self, molarity: float) -> "Medium":
        """
        Copy of the medium with a new salt concentration.

        Raises:
            MissingSaltError: If the medium has no salt.
            InvalidMolarityError: If the molarity is not positive and finite.
        """
        if self.salt is None:
            raise MissingSaltError("cannot set molarity without a salt")
        _check_molarity(molarity)
        return replace(self, molarity=molarity)

    @property
    def relative_permittivity(self) -> float:
        """Relative permittivity at the medium temperature."""
        return self.permittivity.permittivity(self.temperature)

    @property
    def bjerrum_length(self) -> float:
        """Bjerrum length (Å)."""
        return bjerrum_length(self.temperature, self.relative_permittivity)

    @property
    def ionic_strength(self) -> float:
        """Ionic strength (mol/L); zero without salt."""
        if self.salt is None or self.molarity is None:
            return 0.0
        return self.salt.ionic_strength(self.molarity)

    @property
    def debye_length(self) -> Optional[float]:
        """Debye length (Å), or None without salt."""
        if self.salt is None:
            return None
        return debye_length(self.temperature, self.relative_permittivity, self.ionic_strength)

    def __str__(self) -> str:
        text = f"T = {self.temperature:.2f} K, εᵣ = {self.relative_permittivity:.2f}"
        if self.salt is not None:
            text += f", {self.salt.name} {self.molarity} M, λ_D = {self.debye_length:.2f} Å"
        return text


def _check_molarity(molarity: float) -> None:
    if not (molarity > 0 and math.isfinite(molarity)):
        raise InvalidMolarityError(f"molarity must be positive and finite, got {molarity}")
