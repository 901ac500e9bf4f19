"""
Relative permittivity models.

Provides constant and temperature dependent relative permittivities,
εᵣ(T), for common solvents. Temperatures outside a model's validity
interval raise :class:`~pycoulomb.exceptions.TemperatureOutOfRangeError`;
they are never clamped.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple

from pycoulomb.exceptions import TemperatureOutOfRangeError


class RelativePermittivity(ABC):
    """
    Abstract base for relative permittivity models.

    Example:
        >>> from pycoulomb.permittivity import WATER
        >>> round(WATER.permittivity(298.15), 2)
        78.36
    """

    @abstractmethod
    def permittivity(self, temperature: float) -> float:
        """
        Relative permittivity at a given temperature.

        Args:
            temperature: Temperature in kelvin.

        Returns:
            Relative permittivity εᵣ.

        Raises:
            TemperatureOutOfRangeError: If the model is not valid at this temperature.
        """
        pass

    def temperature_is_ok(self, temperature: float) -> bool:
        """Test if the temperature lies within the model's range."""
        try:
            self.permittivity(temperature)
        except TemperatureOutOfRangeError:
            return False
        return True

    def to_constant(self, temperature: float) -> "ConstantPermittivity":
        """Freeze the model at a given temperature."""
        return ConstantPermittivity(self.permittivity(temperature))


@dataclass(frozen=True)
class ConstantPermittivity(RelativePermittivity):
    """
    Temperature independent relative permittivity, εᵣ = constant.

    Attributes:
        value: Relative permittivity (may be ``math.inf`` for a metal).
    """
    value: float

    def __post_init__(self) -> None:
        if not self.value > 0:
            raise ValueError(f"Permittivity must be positive, got {self.value}")

    def permittivity(self, temperature: float) -> float:
        return self.value

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        value = "∞" if math.isinf(self.value) else f"{self.value:.2f}"
        return f"εᵣ = {value}"


@dataclass(frozen=True)
class EmpiricalPermittivity(RelativePermittivity):
    """
    Empirical model for the temperature dependent permittivity.

    εᵣ(T) = a + bT + cT² + d/T + e·ln(T)

    See Neau and Raspo, Fluid Phase Equilib. 504, 112371 (2020).

    Attributes:
        coeffs: The five coefficients (a, b, c, d, e).
        temperature_interval: Closed interval (K) where the model is valid.
    """
    coeffs: Tuple[float, float, float, float, float]
    temperature_interval: Tuple[float, float]

    def __post_init__(self) -> None:
        if len(self.coeffs) != 5:
            raise ValueError(f"Expected 5 coefficients, got {len(self.coeffs)}")
        low, high = self.temperature_interval
        if low > high:
            raise ValueError(f"Invalid temperature interval [{low}, {high}]")

    def permittivity(self, temperature: float) -> float:
        low, high = self.temperature_interval
        if not low <= temperature <= high:
            raise TemperatureOutOfRangeError(temperature, self.temperature_interval)
        a, b, c, d, e = self.coeffs
        return (
            a
            + b * temperature
            + c * temperature**2
            + d / temperature
            + e * math.log(temperature)
        )

    def __str__(self) -> str:
        a, b, c, d, e = self.coeffs
        low, high = self.temperature_interval
        return (
            f"εᵣ(𝑇) = {a:.2e} + {b:.2e}𝑇 + {c:.2e}𝑇² + {d:.2e}/𝑇 + {e:.2e}㏑(𝑇); "
            f"𝑇 = [{low:.1f}, {high:.1f}]"
        )


# Perfect conductor with infinite permittivity, εᵣ = ∞
METAL = ConstantPermittivity(math.inf)

# Relative permittivity of free space, εᵣ = 1
VACUUM = ConstantPermittivity(1.0)

# Relative permittivity of water at 25 °C, εᵣ = 78.4
WATER_25C = ConstantPermittivity(78.4)

# Water, εᵣ(T); doi:10.1016/j.fluid.2019.112371
WATER = EmpiricalPermittivity(
    coeffs=(-1664.4988, -0.884533, 0.0003635, 64839.1736, 308.3394),
    temperature_interval=(273.0, 403.0),
)

# Methanol, εᵣ(T)
METHANOL = EmpiricalPermittivity(
    coeffs=(-1750.3069, -0.99026, 0.0004666, 51360.2652, 327.3124),
    temperature_interval=(176.0, 318.0),
)

# Ethanol, εᵣ(T)
ETHANOL = EmpiricalPermittivity(
    coeffs=(-1522.2782, -1.00508, 0.0005211, 38733.9481, 293.1133),
    temperature_interval=(288.0, 328.0),
)

PERMITTIVITY_MODELS: Dict[str, RelativePermittivity] = {
    "water": WATER,
    "methanol": METHANOL,
    "ethanol": ETHANOL,
    "metal": METAL,
    "vacuum": VACUUM,
    "water25": WATER_25C,
}
"""Named permittivity models, as used in configuration files."""


def get_permittivity_model(name: str) -> RelativePermittivity:
    """
    Look up a named permittivity model.

    Args:
        name: Model name (case-insensitive), e.g. "water".

    Returns:
        The permittivity model.

    Raises:
        ValueError: If the name is unknown.
    """
    key = name.lower()
    if key not in PERMITTIVITY_MODELS:
        raise ValueError(
            f"Unknown permittivity model: {name}. "
            f"Available: {sorted(PERMITTIVITY_MODELS)}"
        )
    return PERMITTIVITY_MODELS[key]
