"""
Unit tests for the configuration layer.

Tests for the pydantic scheme union, medium models and YAML loading.
"""
import math

import pytest
import yaml
from pydantic import ValidationError

from pycoulomb.config import (
    ElectrostaticsConfig,
    EwaldConfig,
    MediumConfig,
    PoissonConfig,
    build_from_config,
    load_config,
    load_scheme,
    load_yaml,
    parse_scheme_config,
    scheme_to_config,
    with_debye_length,
)
from pycoulomb.config.schemas import _SchemeModel
from pycoulomb.exceptions import UnsupportedOperationError
from pycoulomb.medium import CALCIUM_CHLORIDE
from pycoulomb.pairwise import (
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    TruncatedEwald,
)
from pycoulomb.permittivity import METHANOL, ConstantPermittivity, EmpiricalPermittivity
from pycoulomb.units import UnitSystemType

EWALD_CONFIG = {
    "units": "REAL",
    "scheme": {"type": "ewald", "cutoff": 29.0, "alpha": 0.1, "debye_length": "auto"},
    "medium": {
        "temperature": 298.15,
        "permittivity": "water",
        "salt": "sodium_chloride",
        "molarity": 0.1,
    },
}


class TestSchemeConfig:
    """Tests for the tagged scheme union."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"type": "plain"}, Plain()),
            ({"type": "ewald", "cutoff": 29.0, "alpha": 0.1}, RealSpaceEwald(29.0, 0.1)),
            (
                {"type": "ewald_truncated", "cutoff": 12.0, "alpha": 0.2},
                TruncatedEwald(12.0, 0.2),
            ),
            ({"type": "poisson", "cutoff": 10.0, "c": 3, "d": 2}, Poisson(10.0, 3, 2)),
            (
                {"type": "reaction_field", "cutoff": 12.0, "dielec_out": 80.0},
                ReactionField(12.0, 80.0),
            ),
        ],
    )
    def test_build(self, data, expected) -> None:
        assert parse_scheme_config(data).build() == expected

    def test_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            parse_scheme_config({"type": "wolf", "cutoff": 10.0})

    def test_missing_parameter(self) -> None:
        with pytest.raises(ValidationError):
            parse_scheme_config({"type": "ewald", "cutoff": 10.0})

    def test_extra_parameter(self) -> None:
        with pytest.raises(ValidationError):
            parse_scheme_config({"type": "ewald", "cutoff": 10.0, "alpha": 0.1, "beta": 1})

    def test_invalid_poisson_order(self) -> None:
        with pytest.raises(ValidationError):
            PoissonConfig(cutoff=10.0, c=0, d=1)

    def test_explicit_debye_length(self) -> None:
        scheme = EwaldConfig(cutoff=29.0, alpha=0.1, debye_length=23.0).build()
        assert pytest.approx(scheme.kappa) == 1.0 / 23.0

    def test_auto_debye_length_needs_medium(self) -> None:
        with pytest.raises(ValueError, match="auto"):
            EwaldConfig(cutoff=29.0, alpha=0.1, debye_length="auto").build()

    def test_base_model_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            _SchemeModel()


class TestSchemeToConfig:
    """Scheme records serialise back to their configuration."""

    @pytest.mark.parametrize(
        "scheme",
        [
            Plain(cutoff=15.0, debye_length=8.0),
            RealSpaceEwald(cutoff=29.0, alpha=0.1, debye_length=23.0),
            TruncatedEwald(cutoff=12.0, alpha=0.2),
            Poisson(cutoff=10.0, c=4, d=3),
            ReactionField(cutoff=12.0, dielec_out=80.0, dielec_in=2.0, shifted=False),
        ],
    )
    def test_rebuild(self, scheme) -> None:
        config = scheme_to_config(scheme)
        assert config.type == scheme.scheme_type
        assert parse_scheme_config(config.model_dump()).build() == scheme

    def test_unknown_scheme(self) -> None:
        with pytest.raises(TypeError):
            scheme_to_config(object())


class TestMediumConfig:
    """Tests for MediumConfig."""

    def test_defaults_to_neat_water(self) -> None:
        medium = MediumConfig().build()
        assert medium.salt is None
        assert pytest.approx(medium.relative_permittivity) == 78.35565171480539

    def test_constant_permittivity(self) -> None:
        config = MediumConfig(permittivity=80.0)
        assert config.build_permittivity() == ConstantPermittivity(80.0)

    def test_named_permittivity(self) -> None:
        assert MediumConfig(permittivity="methanol").build_permittivity() is METHANOL

    def test_empirical_permittivity(self) -> None:
        config = MediumConfig.model_validate(
            {
                "permittivity": {
                    "coeffs": [80.0, 0.0, 0.0, 0.0, 0.0],
                    "temperature_interval": [250.0, 350.0],
                }
            }
        )
        permittivity = config.build_permittivity()
        assert isinstance(permittivity, EmpiricalPermittivity)
        assert permittivity.permittivity(300.0) == 80.0

    def test_named_salt(self) -> None:
        medium = MediumConfig(salt="calcium_chloride", molarity=0.05).build()
        assert medium.salt is CALCIUM_CHLORIDE
        assert pytest.approx(medium.ionic_strength) == 0.15

    def test_custom_salt(self) -> None:
        medium = MediumConfig.model_validate(
            {"salt": {"valencies": [2, -2], "stoichiometry": [1, 1]}, "molarity": 0.1}
        ).build()
        assert pytest.approx(medium.ionic_strength) == 0.4

    def test_unknown_salt(self) -> None:
        with pytest.raises(ValidationError):
            MediumConfig(salt="unobtainium", molarity=0.1)

    def test_unknown_permittivity(self) -> None:
        with pytest.raises(ValidationError):
            MediumConfig(permittivity="glycerol")


class TestElectrostaticsConfig:
    """Tests for the top-level configuration and loader."""

    def test_auto_debye_length_in_angstrom(self) -> None:
        scheme, medium, units = build_from_config(load_config(EWALD_CONFIG))
        assert units.name == UnitSystemType.REAL
        assert pytest.approx(scheme.debye_length) == medium.debye_length
        assert pytest.approx(scheme.debye_length, abs=0.02) == 9.61

    def test_auto_debye_length_in_nanometer(self) -> None:
        data = dict(EWALD_CONFIG, units="gromacs")
        scheme, _, _ = build_from_config(load_config(data))
        assert pytest.approx(scheme.debye_length, abs=0.002) == 0.961

    def test_without_medium(self) -> None:
        scheme, medium, _ = build_from_config(
            load_config({"scheme": {"type": "plain", "cutoff": 10.0}})
        )
        assert medium is None
        assert scheme == Plain(cutoff=10.0)

    def test_unknown_units(self) -> None:
        with pytest.raises(ValidationError):
            ElectrostaticsConfig.model_validate({"units": "LJ", "scheme": {"type": "plain"}})

    def test_load_yaml(self, tmp_path) -> None:
        path = tmp_path / "ewald.yaml"
        path.write_text(yaml.safe_dump(EWALD_CONFIG))
        assert load_yaml(path) == EWALD_CONFIG
        scheme = load_scheme(path)
        assert isinstance(scheme, RealSpaceEwald)
        assert scheme.kappa is not None

    def test_load_yaml_rejects_non_mapping(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_yaml(path)

    def test_load_scheme_with_override(self) -> None:
        scheme = load_scheme({"scheme": {"type": "poisson", "cutoff": 10.0, "c": 3, "d": 3}}, 5.0)
        assert scheme.debye_length == 5.0

    def test_override_unsupported(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            with_debye_length(ReactionField(cutoff=12.0, dielec_out=80.0), 5.0)

    def test_plain_defaults_to_no_cutoff(self) -> None:
        scheme = load_scheme({"scheme": {"type": "plain"}})
        assert math.isinf(scheme.cutoff)

    def test_conducting_medium_with_salt(self) -> None:
        """A conductor gives no finite screening length to the scheme."""
        data = {
            "scheme": {"type": "ewald", "cutoff": 29.0, "alpha": 0.1},
            "medium": {"permittivity": "metal", "salt": "sodium_chloride", "molarity": 0.1},
        }
        scheme, medium, _ = build_from_config(load_config(data))
        assert math.isinf(medium.debye_length)
        assert scheme.debye_length is None

    def test_auto_debye_length_in_a_conductor(self) -> None:
        data = {
            "scheme": {"type": "poisson", "cutoff": 10.0, "c": 3, "d": 3, "debye_length": "auto"},
            "medium": {"permittivity": "metal", "salt": "sodium_chloride", "molarity": 0.1},
        }
        with pytest.raises(ValueError, match="auto"):
            build_from_config(load_config(data))
