"""Telescope and eyepiece configuration with derived optical quantities.

Lengths are in millimeters; the Barlow and focal reducer factors are
dimensionless. Every derived quantity is recomputed from the current field
values on each call.
"""

from __future__ import annotations

import math
from typing import Any

from .errors import MissingArgumentError, OutOfRangeError

# Largest exit pupil a dark-adapted eye can use, in mm.
MAX_EXIT_PUPIL_MM = 6.0
# Usable magnification ceiling per mm of aperture.
MAX_POWER_PER_MM = 2.0
# Dawes' empirical constant, arcsec * mm.
DAWES_CONSTANT = 116.0

_FIELDS = (
    "aperture_diameter",
    "focal_length",
    "eyepiece_focal_length",
    "barlow_factor",
    "focal_reducer_factor",
)


def _require_positive(name: str, value: Any) -> Any:
    """Return value unchanged if it is a positive finite number."""
    if value is None or not value > 0 or not math.isfinite(value):
        raise OutOfRangeError(name, value)
    return value


class OpticalConfiguration:
    """Telescope aperture and focal lengths plus optional Barlow/reducer factors.

    Each field is validated on construction and whenever it is replaced
    through its property setter. Reads never re-validate.

    Args:
        aperture_diameter: Objective or mirror diameter in mm
        focal_length: Native telescope focal length in mm
        eyepiece_focal_length: Eyepiece focal length in mm
        barlow_factor: Barlow lens magnification multiplier; None means 1
        focal_reducer_factor: Focal reducer multiplier, typically below 1; None means 1

    Raises:
        MissingArgumentError: If any of the three lengths is not supplied
        OutOfRangeError: If any value is not strictly positive and finite
    """

    __slots__ = (
        "_aperture_diameter",
        "_focal_length",
        "_eyepiece_focal_length",
        "_barlow_factor",
        "_focal_reducer_factor",
    )

    def __init__(
        self,
        aperture_diameter: float | None = None,
        focal_length: float | None = None,
        eyepiece_focal_length: float | None = None,
        barlow_factor: float | None = 1.0,
        focal_reducer_factor: float | None = 1.0,
    ):
        required = {
            "aperture_diameter": aperture_diameter,
            "focal_length": focal_length,
            "eyepiece_focal_length": eyepiece_focal_length,
        }
        missing = [name for name, value in required.items() if value is None]
        if missing:
            raise MissingArgumentError(missing)

        self._aperture_diameter = _require_positive("aperture_diameter", aperture_diameter)
        self._focal_length = _require_positive("focal_length", focal_length)
        self._eyepiece_focal_length = _require_positive(
            "eyepiece_focal_length", eyepiece_focal_length
        )
        if barlow_factor is None:
            barlow_factor = 1.0
        if focal_reducer_factor is None:
            focal_reducer_factor = 1.0
        self._barlow_factor = _require_positive("barlow_factor", barlow_factor)
        self._focal_reducer_factor = _require_positive(
            "focal_reducer_factor", focal_reducer_factor
        )

    @property
    def aperture_diameter(self) -> float:
        return self._aperture_diameter

    @aperture_diameter.setter
    def aperture_diameter(self, value: float) -> None:
        self._aperture_diameter = _require_positive("aperture_diameter", value)

    @property
    def focal_length(self) -> float:
        return self._focal_length

    @focal_length.setter
    def focal_length(self, value: float) -> None:
        self._focal_length = _require_positive("focal_length", value)

    @property
    def eyepiece_focal_length(self) -> float:
        return self._eyepiece_focal_length

    @eyepiece_focal_length.setter
    def eyepiece_focal_length(self, value: float) -> None:
        self._eyepiece_focal_length = _require_positive("eyepiece_focal_length", value)

    @property
    def barlow_factor(self) -> float:
        return self._barlow_factor

    @barlow_factor.setter
    def barlow_factor(self, value: float) -> None:
        self._barlow_factor = _require_positive("barlow_factor", value)

    @property
    def focal_reducer_factor(self) -> float:
        return self._focal_reducer_factor

    @focal_reducer_factor.setter
    def focal_reducer_factor(self, value: float) -> None:
        self._focal_reducer_factor = _require_positive("focal_reducer_factor", value)

    def magnification(self) -> float:
        """Magnifying power of the telescope/eyepiece combination."""
        return (
            self._barlow_factor
            * self._focal_length
            * self._focal_reducer_factor
            / self._eyepiece_focal_length
        )

    def lower_magnification_limit(self) -> float:
        """Lowest useful magnification, assuming a 6.0 mm exit pupil."""
        return self._aperture_diameter / MAX_EXIT_PUPIL_MM

    def upper_magnification_limit(self) -> float:
        """Highest useful magnification (2x per mm of aperture)."""
        return MAX_POWER_PER_MM * self._aperture_diameter

    def focal_ratio(self) -> float:
        """Effective f-number including Barlow and reducer."""
        return (
            self._barlow_factor * self._focal_length / self._aperture_diameter
        ) * self._focal_reducer_factor

    def exit_pupil(self) -> float:
        """Exit pupil diameter in mm."""
        return self._aperture_diameter / self.magnification()

    def dawes_limit(self) -> float:
        """Dawes resolving-power limit in arcseconds."""
        return DAWES_CONSTANT / self._aperture_diameter

    def as_dict(self) -> dict[str, float]:
        """Return the five input fields keyed by property name."""
        return {name: getattr(self, name) for name in _FIELDS}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpticalConfiguration):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"OpticalConfiguration({args})"


__all__ = [
    "OpticalConfiguration",
    "MAX_EXIT_PUPIL_MM",
    "MAX_POWER_PER_MM",
    "DAWES_CONSTANT",
]
