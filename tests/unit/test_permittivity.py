"""
Unit tests for permittivity models.
"""
import math

import pytest

from pycoulomb.exceptions import CoulombError, TemperatureOutOfRangeError
from pycoulomb.permittivity import (
    ETHANOL,
    METAL,
    METHANOL,
    VACUUM,
    WATER,
    WATER_25C,
    ConstantPermittivity,
    EmpiricalPermittivity,
    get_permittivity_model,
)


class TestEmpiricalPermittivity:
    """Tests for the temperature dependent models."""

    @pytest.mark.parametrize(
        "model, expected",
        [
            (WATER, 78.35565171480539),
            (METHANOL, 33.081980713895064),
            (ETHANOL, 24.33523434183735),
        ],
    )
    def test_reference_values(self, model: EmpiricalPermittivity, expected: float) -> None:
        assert pytest.approx(model.permittivity(298.15), rel=1e-10) == expected

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(TemperatureOutOfRangeError) as excinfo:
            WATER.permittivity(500.0)
        assert excinfo.value.temperature == 500.0
        assert excinfo.value.interval == (273.0, 403.0)

    def test_error_hierarchy(self) -> None:
        """Out-of-range errors are both library errors and ValueErrors."""
        with pytest.raises(CoulombError):
            ETHANOL.permittivity(200.0)
        with pytest.raises(ValueError):
            ETHANOL.permittivity(200.0)

    def test_interval_is_closed(self) -> None:
        assert WATER.temperature_is_ok(273.0)
        assert WATER.temperature_is_ok(403.0)
        assert not WATER.temperature_is_ok(272.9)
        assert not WATER.temperature_is_ok(403.1)

    def test_decreases_with_temperature(self) -> None:
        assert WATER.permittivity(280.0) > WATER.permittivity(350.0)

    def test_to_constant(self) -> None:
        frozen = WATER.to_constant(298.15)
        assert isinstance(frozen, ConstantPermittivity)
        assert frozen.permittivity(1000.0) == WATER.permittivity(298.15)

    def test_str(self) -> None:
        text = str(WATER)
        assert text.startswith("εᵣ(𝑇) = -1.66e+03")
        assert "[273.0, 403.0]" in text

    def test_wrong_number_of_coefficients(self) -> None:
        with pytest.raises(ValueError):
            EmpiricalPermittivity(coeffs=(1.0, 2.0), temperature_interval=(200.0, 300.0))


class TestConstantPermittivity:
    """Tests for temperature independent permittivities."""

    def test_constants(self) -> None:
        assert VACUUM.permittivity(300.0) == 1.0
        assert WATER_25C.permittivity(10.0) == 78.4
        assert math.isinf(METAL.permittivity(300.0))

    def test_any_temperature_is_ok(self) -> None:
        assert VACUUM.temperature_is_ok(1e6)

    def test_float(self) -> None:
        assert float(WATER_25C) == 78.4

    def test_str(self) -> None:
        assert str(WATER_25C) == "εᵣ = 78.40"
        assert str(METAL) == "εᵣ = ∞"

    def test_non_positive_raises(self) -> None:
        with pytest.raises(ValueError):
            ConstantPermittivity(0.0)


class TestNamedModels:
    """Tests for the model registry."""

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_permittivity_model("Water") is WATER

    def test_unknown_model(self) -> None:
        with pytest.raises(ValueError, match="Unknown permittivity model"):
            get_permittivity_model("glycerol")
