"""
Unit tests for salts and electrolyte media.
"""
import math

import pytest

from pycoulomb.exceptions import (
    InvalidMolarityError,
    MissingSaltError,
    StoichiometryError,
    TemperatureOutOfRangeError,
)
from pycoulomb.medium import (
    CALCIUM_CHLORIDE,
    LANTHANUM_CHLORIDE,
    POTASSIUM_ALUM,
    SODIUM_CHLORIDE,
    SODIUM_SULFATE,
    Medium,
    Salt,
    bjerrum_length,
    debye_length,
)
from pycoulomb.permittivity import METAL, VACUUM, WATER


class TestSalt:
    """Tests for Salt."""

    def test_binary_stoichiometry(self) -> None:
        assert SODIUM_CHLORIDE.stoichiometry == (1, 1)
        assert CALCIUM_CHLORIDE.stoichiometry == (1, 2)
        assert SODIUM_SULFATE.stoichiometry == (2, 1)
        assert Salt.binary(2, -2).stoichiometry == (1, 1)

    @pytest.mark.parametrize(
        "salt, expected",
        [
            (SODIUM_CHLORIDE, 1.0),
            (CALCIUM_CHLORIDE, 3.0),
            (LANTHANUM_CHLORIDE, 6.0),
            (POTASSIUM_ALUM, 9.0),
        ],
    )
    def test_ionic_strength(self, salt: Salt, expected: float) -> None:
        assert pytest.approx(salt.ionic_strength(1.0)) == expected

    @pytest.mark.parametrize("cation, anion", [(1, 1), (-1, -1), (0, -1)])
    def test_binary_needs_opposite_signs(self, cation: int, anion: int) -> None:
        with pytest.raises(StoichiometryError):
            Salt.binary(cation, anion)

    def test_not_electroneutral(self) -> None:
        with pytest.raises(StoichiometryError):
            Salt("bad", valencies=(2, -1), stoichiometry=(1, 1))

    def test_length_mismatch(self) -> None:
        with pytest.raises(StoichiometryError):
            Salt("bad", valencies=(1, -1), stoichiometry=(1,))


class TestLengths:
    """Tests for Bjerrum and Debye lengths."""

    def test_bjerrum_length_in_water(self) -> None:
        eps = WATER.permittivity(298.15)
        assert pytest.approx(bjerrum_length(298.15, eps), abs=0.01) == 7.15

    def test_bjerrum_length_in_vacuum(self) -> None:
        assert pytest.approx(bjerrum_length(298.15, 1.0), rel=1e-3) == 560.4

    def test_debye_length(self) -> None:
        eps = WATER.permittivity(298.15)
        assert pytest.approx(debye_length(298.15, eps, 0.1), abs=0.02) == 9.61

    def test_debye_length_scales_with_ionic_strength(self) -> None:
        eps = WATER.permittivity(298.15)
        ratio = debye_length(298.15, eps, 0.01) / debye_length(298.15, eps, 0.04)
        assert pytest.approx(ratio) == 2.0

    def test_infinite_without_ions(self) -> None:
        assert math.isinf(debye_length(298.15, 78.0, 0.0))

    def test_infinite_in_a_conductor(self) -> None:
        """A conducting medium has zero Bjerrum length and no screening length."""
        assert bjerrum_length(298.15, math.inf) == 0.0
        assert math.isinf(debye_length(298.15, math.inf, 0.1))


class TestMedium:
    """Tests for Medium."""

    @pytest.fixture
    def salt_water(self) -> Medium:
        return Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.1)

    def test_neat_water(self) -> None:
        medium = Medium.neat_water(298.15)
        assert medium.debye_length is None
        assert medium.ionic_strength == 0.0
        assert pytest.approx(medium.relative_permittivity) == 78.35565171480539

    def test_salt_water(self, salt_water: Medium) -> None:
        assert pytest.approx(salt_water.ionic_strength) == 0.1
        assert pytest.approx(salt_water.debye_length, abs=0.02) == 9.61
        assert pytest.approx(salt_water.bjerrum_length, abs=0.01) == 7.15

    def test_with_molarity(self, salt_water: Medium) -> None:
        diluted = salt_water.with_molarity(0.025)
        assert diluted.molarity == 0.025
        assert salt_water.molarity == 0.1
        assert pytest.approx(diluted.debye_length / salt_water.debye_length) == 2.0

    def test_with_molarity_requires_salt(self) -> None:
        with pytest.raises(MissingSaltError):
            Medium.neat_water(298.15).with_molarity(0.1)

    @pytest.mark.parametrize("molarity", [0.0, -0.1, math.inf, math.nan])
    def test_invalid_molarity(self, salt_water: Medium, molarity: float) -> None:
        with pytest.raises(InvalidMolarityError):
            salt_water.with_molarity(molarity)

    def test_molarity_without_salt(self) -> None:
        with pytest.raises(MissingSaltError):
            Medium(temperature=298.15, permittivity=WATER, molarity=0.1)

    def test_salt_without_molarity(self) -> None:
        with pytest.raises(InvalidMolarityError):
            Medium(temperature=298.15, permittivity=WATER, salt=SODIUM_CHLORIDE)

    def test_temperature_out_of_range(self) -> None:
        with pytest.raises(TemperatureOutOfRangeError):
            Medium.neat_water(450.0)

    def test_non_positive_temperature(self) -> None:
        with pytest.raises(ValueError):
            Medium(temperature=0.0, permittivity=VACUUM)

    def test_str(self, salt_water: Medium) -> None:
        text = str(salt_water)
        assert "T = 298.15 K" in text
        assert "NaCl" in text

    def test_salt_in_a_conductor(self) -> None:
        medium = Medium(
            temperature=298.15, permittivity=METAL, salt=SODIUM_CHLORIDE, molarity=0.1
        )
        assert math.isinf(medium.debye_length)
        assert "λ_D = inf Å" in str(medium)
