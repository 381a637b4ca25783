"""Core module with the optical configuration, errors, config and logging."""

__all__ = [
    "telescope",
    "errors",
    "logging",
    "config",
]
