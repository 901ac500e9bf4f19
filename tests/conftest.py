"""
Shared fixtures for pycoulomb tests.
"""
import math

import pytest

from pycoulomb.pairwise import (
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    TruncatedEwald,
)


def numerical_derivative(func, x: float, h: float = 1e-5) -> float:
    """Central finite difference of a scalar function."""
    return (func(x + h) - func(x - h)) / (2.0 * h)


SCHEMES = {
    "plain": Plain(cutoff=12.0),
    "yukawa": Plain(cutoff=12.0, debye_length=8.0),
    "ewald": RealSpaceEwald(cutoff=29.0, alpha=0.1),
    "ewald_screened": RealSpaceEwald(cutoff=29.0, alpha=0.1, debye_length=23.0),
    "ewald_truncated": TruncatedEwald(cutoff=12.0, alpha=0.2),
    "poisson": Poisson(cutoff=12.0, c=4, d=3),
    "poisson_screened": Poisson(cutoff=12.0, c=3, d=3, debye_length=23.0),
    "reaction_field": ReactionField(cutoff=12.0, dielec_out=80.0),
    "reaction_field_metal": ReactionField(cutoff=12.0, dielec_out=math.inf),
}


@pytest.fixture(params=sorted(SCHEMES), ids=sorted(SCHEMES))
def scheme(request):
    """Every scheme, with and without screening."""
    return SCHEMES[request.param]


@pytest.fixture
def derivative():
    """Central finite difference helper."""
    return numerical_derivative
