"""Tests for the logging helpers."""

import pytest

from src.common.logging import get_logger, is_configured, mask_dni, setup_logging


@pytest.mark.parametrize(
    ("dni", "masked"),
    [
        ("12345678", "****5678"),
        ("1234", "****"),
        ("12", "**"),
        ("", ""),
        (None, ""),
    ],
)
def test_mask_dni(dni: str | None, masked: str) -> None:
    assert mask_dni(dni) == masked


def test_setup_logging_marks_configured() -> None:
    setup_logging(level="DEBUG", json_format=True)

    assert is_configured()
    # loggers work after configuration
    get_logger("tests").info("configured", dni=mask_dni("12345678"))
