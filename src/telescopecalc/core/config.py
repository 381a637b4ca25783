"""Input schema and file I/O for telescope setups.

Raw values (numbers or text) are parsed into a pydantic model. Only the
numeric parse happens here; range checks belong to OpticalConfiguration so
that out-of-range values are always reported the same way.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import InputParseError
from .telescope import OpticalConfiguration


class TelescopeSetup(BaseModel):
    """Telescope, eyepiece and optional Barlow/reducer as entered by a user."""

    aperture_mm: float | None = Field(default=None, description="Aperture diameter in mm")
    focal_length_mm: float | None = Field(default=None, description="Telescope focal length in mm")
    eyepiece_focal_length_mm: float | None = Field(
        default=None, description="Eyepiece focal length in mm"
    )
    barlow: float | None = Field(
        default=None, description="Barlow factor; None when no Barlow is used"
    )
    focal_reducer: float | None = Field(
        default=None, description="Focal reducer factor; None when no reducer is used"
    )

    def to_configuration(self) -> OpticalConfiguration:
        """Build the validated optical configuration.

        Raises:
            MissingArgumentError: If a required length is absent
            OutOfRangeError: If any value is not strictly positive
        """
        return OpticalConfiguration(
            self.aperture_mm,
            self.focal_length_mm,
            self.eyepiece_focal_length_mm,
            barlow_factor=1.0 if self.barlow is None else self.barlow,
            focal_reducer_factor=1.0 if self.focal_reducer is None else self.focal_reducer,
        )


def parse_setup(data: Mapping[str, Any]) -> TelescopeSetup:
    """Parse raw values into a TelescopeSetup.

    Args:
        data: Mapping of field name to number or numeric text

    Returns:
        Parsed setup

    Raises:
        InputParseError: If a value is not a number
    """
    try:
        return TelescopeSetup.model_validate(dict(data))
    except ValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
        raise InputParseError(
            f"input for {', '.join(fields) or 'setup'} is not a number", fields=fields
        ) from e


def load_config(path: str | Path) -> TelescopeSetup:
    """Load a telescope setup from a YAML or JSON file.

    The setup may sit at the document root or under a ``telescope`` key.

    Args:
        path: Path to configuration file

    Returns:
        Parsed TelescopeSetup

    Raises:
        FileNotFoundError: If config file doesn't exist
        InputParseError: If the document is not a mapping or holds non-numbers
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            # Try YAML first, then JSON
            content = f.read()
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError:
                data = json.loads(content)

    if data is None:
        data = {}
    if isinstance(data, Mapping) and isinstance(data.get("telescope"), Mapping):
        data = data["telescope"]
    if not isinstance(data, Mapping):
        raise InputParseError(f"Config file {path} does not contain a mapping")

    return parse_setup(data)


__all__ = [
    "TelescopeSetup",
    "parse_setup",
    "load_config",
]
