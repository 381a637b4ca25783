"""Computed results for one optical configuration and their text rendering."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .core.telescope import OpticalConfiguration


def format_value(value: float, suffix: str = "") -> str:
    """Format a result with two decimals and an optional unit suffix."""
    text = f"{value:.2f}"
    return f"{text} {suffix}" if suffix else text


@dataclass(slots=True, frozen=True)
class TelescopeReport:
    """Snapshot of every derived quantity of a configuration."""

    magnification: float
    lower_magnification_limit: float
    upper_magnification_limit: float
    focal_ratio: float
    exit_pupil: float
    dawes_limit: float

    @classmethod
    def from_configuration(cls, cfg: OpticalConfiguration) -> TelescopeReport:
        return cls(
            magnification=cfg.magnification(),
            lower_magnification_limit=cfg.lower_magnification_limit(),
            upper_magnification_limit=cfg.upper_magnification_limit(),
            focal_ratio=cfg.focal_ratio(),
            exit_pupil=cfg.exit_pupil(),
            dawes_limit=cfg.dawes_limit(),
        )

    def render(self) -> list[tuple[str, str]]:
        """Return (label, text) rows ready for display."""
        return [
            ("Magnification", format_value(self.magnification, "x")),
            ("Lower magnification limit", format_value(self.lower_magnification_limit, "x")),
            ("Upper magnification limit", format_value(self.upper_magnification_limit, "x")),
            ("Focal ratio", format_value(self.focal_ratio)),
            ("Exit pupil", format_value(self.exit_pupil, "mm")),
            ("Dawes limit", format_value(self.dawes_limit, "arcsec")),
        ]

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


__all__ = ["TelescopeReport", "format_value"]
