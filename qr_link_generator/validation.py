"""Command-line option validation."""

import logging
from dataclasses import dataclass

import qrcode

from qr_link_generator import (
    MAX_URL_LENGTH, MIN_QR_SIZE, MAX_QR_SIZE, SUPPORTED_FORMATS,
)

logger = logging.getLogger(__name__)


_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,  # ~7% recovery
    "M": qrcode.constants.ERROR_CORRECT_M,  # ~15%
    "Q": qrcode.constants.ERROR_CORRECT_Q,  # ~25%
    "H": qrcode.constants.ERROR_CORRECT_H,  # ~30%
}


class UsageError(ValueError):
    """Raised when a command-line option has an invalid value."""


@dataclass(frozen=True)
class GenerationOptions:
    """Validated options for a single QR code generation run."""

    url: str
    level: str
    fmt: str
    size: int
    directory: str
    filename: str | None = None
    display: bool = True


def resolve_correction_level(level: str) -> int:
    """Map a correction level letter to its python-qrcode constant.

    Raises:
        UsageError: If the letter is not one of L, M, Q, H.
    """
    try:
        return _CORRECTION_LEVELS[level]
    except KeyError:
        raise UsageError("Invalid correction level. Choose from L, M, Q, H.") from None


def validate_options(
    url: str,
    level: str,
    fmt: str,
    size: int,
    directory: str = ".",
    filename: str | None = None,
    display: bool = True,
) -> GenerationOptions:
    """Check raw option values and bundle them into GenerationOptions.

    Checks run in a fixed order (URL, size, level, format) and the first
    failure is reported.

    Raises:
        UsageError: On the first invalid value.
    """
    if not url:
        raise UsageError("URL is required. Please use -u <URL>")
    if len(url) > MAX_URL_LENGTH:
        raise UsageError(
            f"URL must be at most {MAX_URL_LENGTH} characters (got {len(url)})."
        )

    if size < MIN_QR_SIZE or size > MAX_QR_SIZE:
        raise UsageError(
            f"Size of the QR code must be between {MIN_QR_SIZE} and {MAX_QR_SIZE}."
        )

    resolve_correction_level(level)

    if fmt not in SUPPORTED_FORMATS:
        raise UsageError(
            f"Unsupported file format '{fmt}'. Only png and svg are supported."
        )

    logger.debug("Options valid: level=%s format=%s size=%d", level, fmt, size)
    return GenerationOptions(
        url=url,
        level=level,
        fmt=fmt,
        size=size,
        directory=directory,
        filename=filename or None,
        display=display,
    )
