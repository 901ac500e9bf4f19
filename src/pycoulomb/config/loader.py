"""
Configuration loader for YAML-based scheme setup.

Provides functions to load schemes and media from YAML files.

Example config:
    units: REAL
    scheme:
      type: ewald
      cutoff: 29.0
      alpha: 0.1
      debye_length: auto
    medium:
      temperature: 298.15
      permittivity: water
      salt: sodium_chloride
      molarity: 0.1
"""
import dataclasses
import math
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from pycoulomb.exceptions import UnsupportedOperationError
from pycoulomb.medium import Medium
from pycoulomb.pairwise import Scheme
from pycoulomb.units import Units, UnitSystem

from .schemas import ElectrostaticsConfig, MediumConfig

logger = logging.getLogger(__name__)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a mapping")
    logger.debug(f"Loaded configuration from {path}")
    return data


def load_config(source: Union[str, Path, Dict[str, Any]]) -> ElectrostaticsConfig:
    """
    Validate a configuration from a YAML file or a dictionary.

    Raises:
        pydantic.ValidationError: If the configuration is invalid.
    """
    data = source if isinstance(source, dict) else load_yaml(source)
    return ElectrostaticsConfig.model_validate(data)


def build_medium(config: Optional[MediumConfig]) -> Optional[Medium]:
    """Build the medium, if any, and log its properties."""
    if config is None:
        return None
    medium = config.build()
    logger.info(f"Medium: {medium}")
    return medium


def _medium_debye_length(medium: Optional[Medium], units: UnitSystem) -> Optional[float]:
    """
    Debye length of the medium converted from Å to the configured length unit.

    An infinite Debye length means no screening and gives None.
    """
    if medium is None or medium.debye_length is None or math.isinf(medium.debye_length):
        return None
    angstrom = Units.REAL().length_to_si
    return medium.debye_length * angstrom / units.length_to_si


def with_debye_length(scheme: Scheme, debye_length: Optional[float]) -> Scheme:
    """
    Copy of a scheme with a new Debye length.

    Raises:
        UnsupportedOperationError: If the scheme does not support screening.
    """
    if "debye_length" not in {f.name for f in dataclasses.fields(scheme)}:
        raise UnsupportedOperationError(
            f"{type(scheme).__name__} does not support Debye screening"
        )
    return dataclasses.replace(scheme, debye_length=debye_length)


def build_from_config(
    config: ElectrostaticsConfig,
) -> Tuple[Scheme, Optional[Medium], UnitSystem]:
    """
    Build scheme, medium and unit system from a validated configuration.

    A scheme ``debye_length`` of ``auto`` takes the Debye length of the
    medium, converted to the length unit of the unit system.

    Returns:
        Tuple of (scheme, medium or None, unit system).
    """
    units = Units.from_name(config.units)
    medium = build_medium(config.medium)
    scheme = config.scheme.build(debye_length=_medium_debye_length(medium, units))
    logger.info(f"Scheme: {scheme}")
    return scheme, medium, units


def load_scheme(
    source: Union[str, Path, Dict[str, Any]],
    debye_length: Optional[float] = None,
) -> Scheme:
    """
    Load a scheme from a YAML file or dictionary.

    Args:
        source: Path to YAML file, or already parsed configuration.
        debye_length: Optional override of the scheme's Debye length.

    Returns:
        The scheme record.

    Raises:
        UnsupportedOperationError: If an override is given for a scheme
            without screening.
    """
    scheme, _, _ = build_from_config(load_config(source))
    if debye_length is not None:
        scheme = with_debye_length(scheme, debye_length)
    return scheme
