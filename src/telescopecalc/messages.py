"""Localized user-facing error messages."""

from __future__ import annotations

from .core.errors import ConfigError, InputParseError

DEFAULT_LANG = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "input_type": "Error: Incorrect input type, please check that your inputs are numbers.",
        "range": (
            "Error: Please check that the telescope and eyepiece focal lengths, "
            "Barlow lens power and/or Focal reducer factor are positive."
        ),
    },
    "es": {
        "input_type": (
            "Error: dato de entrada incorrecto, por favor revise que las entradas sean numeros."
        ),
        "range": (
            "Error: Por favor revise que las longitudes focales de telescopio, ocular, "
            "el aumento de la lente de Barlow y/o el factor de reduccion focal sean positivos."
        ),
    },
}


def error_message(error: Exception, lang: str = DEFAULT_LANG) -> str:
    """Map a calculator error to its message in the requested language.

    Unknown languages fall back to English.

    Raises:
        TypeError: If error is not an input or configuration error
    """
    if isinstance(error, InputParseError):
        key = "input_type"
    elif isinstance(error, ConfigError):
        key = "range"
    else:
        raise TypeError(f"No message for {type(error).__name__}")
    catalog = MESSAGES.get(lang, MESSAGES[DEFAULT_LANG])
    return catalog[key]


__all__ = ["MESSAGES", "DEFAULT_LANG", "error_message"]
