"""Telescope calculator package.

Compute magnification, useful magnification limits, focal ratio, exit pupil
and Dawes limit of a telescope/eyepiece setup, optionally with a Barlow lens
or focal reducer.
"""

from .core.errors import (
    ConfigError,
    InputParseError,
    MissingArgumentError,
    OutOfRangeError,
    TelescopeCalcError,
)
from .core.telescope import OpticalConfiguration

__version__ = "0.1.0"

__all__ = [
    "OpticalConfiguration",
    "TelescopeCalcError",
    "ConfigError",
    "MissingArgumentError",
    "OutOfRangeError",
    "InputParseError",
]
