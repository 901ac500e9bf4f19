"""
Pydantic models for scheme and medium configuration.

All validation and serialisation of configuration payloads lives here.
A scheme configuration is a tagged union over the closed set of schemes,
discriminated by ``type``; ``build()`` turns it into the immutable scheme
record used for evaluation.
"""
from __future__ import annotations

import math
from abc import abstractmethod
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from pycoulomb.medium import SALTS, Medium, Salt
from pycoulomb.pairwise import (
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    Scheme,
    TruncatedEwald,
)
from pycoulomb.permittivity import (
    ConstantPermittivity,
    EmpiricalPermittivity,
    RelativePermittivity,
    get_permittivity_model,
)

DebyeLength = Union[Annotated[float, Field(gt=0)], Literal["auto"], None]
"""A Debye length in the cutoff's length unit, "auto" (from the medium) or None."""


class _SchemeModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    @abstractmethod
    def build(self, debye_length: Optional[float] = None) -> Scheme:
        """
        Build the scheme record described by this model.

        Args:
            debye_length: Debye length of the medium, used when the
                model asks for "auto".

        Returns:
            The frozen scheme record.
        """
        pass

    def _resolve_debye(self, value: DebyeLength, debye_length: Optional[float]) -> Optional[float]:
        if value == "auto":
            if debye_length is None:
                raise ValueError(
                    "debye_length 'auto' requires a screening medium (salt and finite permittivity)"
                )
            return debye_length
        return value


# ------------------------------------------------------------------ #
#  Scheme models
# ------------------------------------------------------------------ #


class PlainConfig(_SchemeModel):
    """Plain Coulomb scheme."""

    type: Literal["plain"] = "plain"
    cutoff: float = Field(math.inf, gt=0, description="Cutoff distance (default: none)")
    debye_length: DebyeLength = Field(None, description="Debye screening length")

    def build(self, debye_length: Optional[float] = None) -> Plain:
        return Plain(
            cutoff=self.cutoff,
            debye_length=self._resolve_debye(self.debye_length, debye_length),
        )


class EwaldConfig(_SchemeModel):
    """Real-space Ewald scheme."""

    type: Literal["ewald"] = "ewald"
    cutoff: float = Field(..., gt=0, description="Real-space cutoff distance")
    alpha: float = Field(..., gt=0, description="Splitting parameter (inverse length)")
    debye_length: DebyeLength = Field(None, description="Debye screening length")

    def build(self, debye_length: Optional[float] = None) -> RealSpaceEwald:
        return RealSpaceEwald(
            cutoff=self.cutoff,
            alpha=self.alpha,
            debye_length=self._resolve_debye(self.debye_length, debye_length),
        )


class TruncatedEwaldConfig(_SchemeModel):
    """Truncated Gaussian Ewald scheme."""

    type: Literal["ewald_truncated"] = "ewald_truncated"
    cutoff: float = Field(..., gt=0, description="Cutoff distance")
    alpha: float = Field(..., gt=0, description="Splitting parameter (inverse length)")

    def build(self, debye_length: Optional[float] = None) -> TruncatedEwald:
        return TruncatedEwald(cutoff=self.cutoff, alpha=self.alpha)


class PoissonConfig(_SchemeModel):
    """Poisson polynomial scheme."""

    type: Literal["poisson"] = "poisson"
    cutoff: float = Field(..., gt=0, description="Cutoff distance")
    c: int = Field(..., ge=1, description="Cancelled derivatives at the origin")
    d: int = Field(..., ge=0, description="Smoothness order at the cutoff")
    debye_length: DebyeLength = Field(None, description="Debye screening length")

    def build(self, debye_length: Optional[float] = None) -> Poisson:
        return Poisson(
            cutoff=self.cutoff,
            c=self.c,
            d=self.d,
            debye_length=self._resolve_debye(self.debye_length, debye_length),
        )


class ReactionFieldConfig(_SchemeModel):
    """Reaction-field scheme."""

    type: Literal["reaction_field"] = "reaction_field"
    cutoff: float = Field(..., gt=0, description="Cutoff distance")
    dielec_out: float = Field(..., gt=0, description="Permittivity of the continuum")
    dielec_in: float = Field(1.0, gt=0, description="Permittivity inside the cutoff")
    shifted: bool = Field(True, description="Shift the potential to zero at the cutoff")

    def build(self, debye_length: Optional[float] = None) -> ReactionField:
        return ReactionField(
            cutoff=self.cutoff,
            dielec_out=self.dielec_out,
            dielec_in=self.dielec_in,
            shifted=self.shifted,
        )


SchemeConfig = Annotated[
    Union[
        PlainConfig,
        EwaldConfig,
        TruncatedEwaldConfig,
        PoissonConfig,
        ReactionFieldConfig,
    ],
    Field(discriminator="type"),
]
"""Tagged union of all scheme configurations."""

_SCHEME_ADAPTER: TypeAdapter = TypeAdapter(SchemeConfig)


def parse_scheme_config(data: dict) -> _SchemeModel:
    """
    Validate a scheme configuration dictionary.

    Raises:
        pydantic.ValidationError: On unknown ``type`` or invalid fields.
    """
    return _SCHEME_ADAPTER.validate_python(data)


def scheme_to_config(scheme: Scheme) -> _SchemeModel:
    """
    Serialise a scheme record to its configuration model.

    Args:
        scheme: Any scheme record.

    Returns:
        The matching configuration model.
    """
    if isinstance(scheme, Plain):
        return PlainConfig(cutoff=scheme.cutoff, debye_length=scheme.debye_length)
    if isinstance(scheme, RealSpaceEwald):
        return EwaldConfig(
            cutoff=scheme.cutoff, alpha=scheme.alpha, debye_length=scheme.debye_length
        )
    if isinstance(scheme, TruncatedEwald):
        return TruncatedEwaldConfig(cutoff=scheme.cutoff, alpha=scheme.alpha)
    if isinstance(scheme, Poisson):
        return PoissonConfig(
            cutoff=scheme.cutoff, c=scheme.c, d=scheme.d, debye_length=scheme.debye_length
        )
    if isinstance(scheme, ReactionField):
        return ReactionFieldConfig(
            cutoff=scheme.cutoff,
            dielec_out=scheme.dielec_out,
            dielec_in=scheme.dielec_in,
            shifted=scheme.shifted,
        )
    raise TypeError(f"Unknown scheme: {type(scheme).__name__}")


# ------------------------------------------------------------------ #
#  Medium models
# ------------------------------------------------------------------ #


class EmpiricalPermittivityConfig(BaseModel):
    """Coefficients of an empirical εᵣ(T) model."""

    model_config = ConfigDict(extra="forbid")

    coeffs: Tuple[float, float, float, float, float]
    temperature_interval: Tuple[float, float]

    def build(self) -> EmpiricalPermittivity:
        return EmpiricalPermittivity(
            coeffs=self.coeffs, temperature_interval=self.temperature_interval
        )


class SaltConfig(BaseModel):
    """A custom salt given by valencies and stoichiometry."""

    model_config = ConfigDict(extra="forbid")

    name: str = "custom"
    valencies: List[int]
    stoichiometry: List[int]

    def build(self) -> Salt:
        return Salt(
            name=self.name,
            valencies=tuple(self.valencies),
            stoichiometry=tuple(self.stoichiometry),
        )


class MediumConfig(BaseModel):
    """Temperature, permittivity and optional salt."""

    model_config = ConfigDict(extra="forbid")

    temperature: float = Field(298.15, gt=0, description="Temperature (K)")
    permittivity: Union[float, str, EmpiricalPermittivityConfig] = Field(
        "water", description="Named model, constant value, or empirical coefficients"
    )
    salt: Union[str, SaltConfig, None] = Field(None, description="Named or custom salt")
    molarity: Optional[float] = Field(None, gt=0, description="Salt concentration (mol/L)")

    @field_validator("permittivity")
    @classmethod
    def known_permittivity(cls, v):
        if isinstance(v, str):
            get_permittivity_model(v)
        elif isinstance(v, float) and not v > 0:
            raise ValueError(f"Permittivity must be positive, got {v}")
        return v

    @field_validator("salt")
    @classmethod
    def known_salt(cls, v):
        if isinstance(v, str) and v.lower() not in SALTS:
            raise ValueError(f"Unknown salt: {v}. Available: {sorted(SALTS)}")
        return v

    def build_permittivity(self) -> RelativePermittivity:
        if isinstance(self.permittivity, str):
            return get_permittivity_model(self.permittivity)
        if isinstance(self.permittivity, EmpiricalPermittivityConfig):
            return self.permittivity.build()
        return ConstantPermittivity(self.permittivity)

    def build(self) -> Medium:
        salt: Optional[Salt] = None
        if isinstance(self.salt, str):
            salt = SALTS[self.salt.lower()]
        elif isinstance(self.salt, SaltConfig):
            salt = self.salt.build()
        return Medium(
            temperature=self.temperature,
            permittivity=self.build_permittivity(),
            salt=salt,
            molarity=self.molarity,
        )


class ElectrostaticsConfig(BaseModel):
    """Top-level configuration: scheme, optional medium and unit system."""

    model_config = ConfigDict(extra="forbid")

    units: str = Field("REAL", description="Unit system (REAL, METAL, GROMACS, SI)")
    scheme: SchemeConfig
    medium: Optional[MediumConfig] = None

    @field_validator("units")
    @classmethod
    def known_units(cls, v: str) -> str:
        if v.upper() not in {"REAL", "METAL", "GROMACS", "SI"}:
            raise ValueError(f"Unknown units: {v}")
        return v.upper()
