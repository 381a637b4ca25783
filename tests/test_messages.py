"""Tests for localized error messages."""

from __future__ import annotations

import pytest

from telescopecalc.core.errors import InputParseError, MissingArgumentError, OutOfRangeError
from telescopecalc.messages import MESSAGES, error_message


def test_parse_error_message():
    msg = error_message(InputParseError("bad"))
    assert msg == MESSAGES["en"]["input_type"]
    assert "numbers" in msg


@pytest.mark.parametrize(
    "error",
    [OutOfRangeError("barlow_factor", -1.0), MissingArgumentError(["focal_length"])],
)
def test_config_errors_use_range_message(error):
    assert error_message(error) == MESSAGES["en"]["range"]


def test_spanish_messages():
    assert error_message(OutOfRangeError("aperture_diameter", 0), "es").startswith(
        "Error: Por favor"
    )
    assert "numeros" in error_message(InputParseError("bad"), "es")


def test_unknown_language_falls_back_to_english():
    assert error_message(InputParseError("bad"), "de") == MESSAGES["en"]["input_type"]


def test_catalogs_have_same_keys():
    assert set(MESSAGES["en"]) == set(MESSAGES["es"])


def test_unrelated_error_rejected():
    with pytest.raises(TypeError):
        error_message(RuntimeError("boom"))
