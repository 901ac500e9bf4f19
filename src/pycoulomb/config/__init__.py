"""
Configuration layer: pydantic schemas and YAML loading.
"""
from .loader import (
    build_from_config,
    build_medium,
    load_config,
    load_scheme,
    load_yaml,
    with_debye_length,
)
from .schemas import (
    ElectrostaticsConfig,
    EwaldConfig,
    MediumConfig,
    PlainConfig,
    PoissonConfig,
    ReactionFieldConfig,
    SchemeConfig,
    TruncatedEwaldConfig,
    parse_scheme_config,
    scheme_to_config,
)

__all__ = [
    "ElectrostaticsConfig",
    "MediumConfig",
    "SchemeConfig",
    "PlainConfig",
    "EwaldConfig",
    "TruncatedEwaldConfig",
    "PoissonConfig",
    "ReactionFieldConfig",
    "parse_scheme_config",
    "scheme_to_config",
    "load_yaml",
    "load_config",
    "load_scheme",
    "build_medium",
    "build_from_config",
    "with_debye_length",
]
