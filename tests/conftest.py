from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from telescopecalc.core.logging import PACKAGE_LOGGER
from telescopecalc.core.telescope import OpticalConfiguration


def pytest_configure(config: pytest.Config) -> None:  # noqa: ARG001
    config.addinivalue_line("markers", "subprocess: marks tests that spawn the CLI")


@pytest.fixture()
def reflector() -> OpticalConfiguration:
    """200 mm f/5 reflector with a 10 mm eyepiece."""
    return OpticalConfiguration(200.0, 1000.0, 10.0)


@pytest.fixture()
def setup_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "scope.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "telescope": {
                    "aperture_mm": 200,
                    "focal_length_mm": 1000,
                    "eyepiece_focal_length_mm": 10,
                    "barlow": 2,
                }
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
