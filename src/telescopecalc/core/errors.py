"""Custom exception types for the telescope calculator."""

from __future__ import annotations

from typing import Any


class TelescopeCalcError(Exception):
    """Base exception for all telescope calculator errors."""

    pass


class ConfigError(TelescopeCalcError):
    """An optical configuration value was rejected.

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class MissingArgumentError(ConfigError, TypeError):
    """One or more required fields were not supplied."""

    def __init__(self, fields: list[str]):
        super().__init__(f"arguments {', '.join(fields)} are required", field=fields[0])
        self.fields = fields


class OutOfRangeError(ConfigError, ValueError):
    """A field value is not a strictly positive, finite number."""

    def __init__(self, field: str, value: Any):
        super().__init__(f"{field} has to be greater than 0, got {value!r}", field=field)
        self.value = value


class InputParseError(TelescopeCalcError, ValueError):
    """Raw input could not be interpreted as a number."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


__all__ = [
    "TelescopeCalcError",
    "ConfigError",
    "MissingArgumentError",
    "OutOfRangeError",
    "InputParseError",
]
