"""Encode URLs into QR codes with python-qrcode."""

import io
import logging

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from qr_link_generator import QUIET_ZONE
from qr_link_generator.validation import resolve_correction_level

logger = logging.getLogger(__name__)


def build_qr(data: str, level: str = "M") -> qrcode.QRCode:
    """Encode data into a QR code at the given correction level.

    The smallest symbol version that can hold the data is chosen.

    Args:
        data: The URL or text to encode.
        level: Correction level letter (L, M, Q, H).

    Returns:
        A QRCode whose module matrix is already computed.

    Raises:
        DataOverflowError: If the data does not fit in a version 40
            symbol at this correction level.
    """
    qr = qrcode.QRCode(
        error_correction=resolve_correction_level(level),
        box_size=1,
        border=QUIET_ZONE,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except ValueError as e:
        # qrcode 8 reports overflow as an out-of-range version
        raise DataOverflowError(str(e)) from e
    logger.debug("Encoded %d chars as version %d, level %s", len(data), qr.version, level)
    return qr


def get_bitmap(qr: qrcode.QRCode) -> list[list[bool]]:
    """Return the module bitmap, quiet zone included. True is a dark module."""
    return [[bool(cell) for cell in row] for row in qr.get_matrix()]


def render_png(qr: qrcode.QRCode, size: int) -> Image.Image:
    """Rasterize the QR code to a size x size black-on-white image.

    Nearest-neighbour resampling keeps module edges hard at any size.
    """
    qr_image = qr.make_image(fill_color="black", back_color="white")
    qr_image = qr_image.convert("RGB")
    qr_image = qr_image.resize((size, size), Image.NEAREST)
    return qr_image


def to_terminal_string(qr: qrcode.QRCode) -> str:
    """Render the QR code as half-block characters for console preview."""
    out = io.StringIO()
    qr.print_ascii(out=out)
    return out.getvalue()
