"""
Error kinds raised by pycoulomb.

Evaluation of short-range functions and multipole observables never
raises; these errors are limited to invalid inputs at the permittivity
and medium boundary.
"""


class CoulombError(Exception):
    """Base class for all pycoulomb errors."""


class TemperatureOutOfRangeError(CoulombError, ValueError):
    """Temperature lies outside the validity interval of a permittivity model."""

    def __init__(self, temperature: float, interval: tuple[float, float]) -> None:
        self.temperature = temperature
        self.interval = interval
        super().__init__(
            f"Temperature {temperature} K out of range for permittivity model "
            f"[{interval[0]}, {interval[1]}]"
        )


class StoichiometryError(CoulombError, ValueError):
    """Cannot resolve stoichiometry; both positive and negative ions are needed."""


class InvalidMolarityError(CoulombError, ValueError):
    """Molarity must be positive and finite."""


class MissingSaltError(CoulombError):
    """Cannot set a molarity on a medium without a salt."""


class UnsupportedOperationError(CoulombError, NotImplementedError):
    """The requested operation is not supported by this model."""
