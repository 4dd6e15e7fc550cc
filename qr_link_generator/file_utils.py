"""Output file naming and writing."""

import logging
import os
import re
from datetime import datetime

from PIL import Image

from qr_link_generator.validation import UsageError

logger = logging.getLogger(__name__)

_UNSAFE_RUN = re.compile(r"[^a-zA-Z0-9]+")


def sanitize_filename(text: str) -> str:
    """Replace every run of non-alphanumeric characters with a single underscore."""
    return _UNSAFE_RUN.sub("_", text)


def default_filename(url: str, fmt: str, now: datetime | None = None) -> str:
    """Build the automatic output name: qrcode<timestamp><sanitized url>.<fmt>.

    Args:
        url: The encoded URL.
        fmt: Output format, used as the extension.
        now: Timestamp to use. Defaults to the current local time.
    """
    now = now or datetime.now()
    return f"qrcode{now.strftime('%Y%m%d%H%M%S')}{sanitize_filename(url)}.{fmt}"


def explicit_filename(name: str, fmt: str) -> str:
    """Sanitize a user-supplied output name and give it the format's extension.

    Directory components are dropped; the output directory comes from -d.
    An extension matching fmt (any case) is kept, anything else is
    treated as part of the stem.

    Raises:
        UsageError: If nothing is left of the name to build a filename from.
    """
    base = os.path.basename(name)
    stem, ext = os.path.splitext(base)
    if ext.lower() != f".{fmt}":
        stem = base
    stem = sanitize_filename(stem)
    if not stem:
        raise UsageError(f"Output filename '{name}' has no usable characters.")
    return f"{stem}.{fmt}"


def resolve_output_path(directory: str, filename: str) -> str:
    """Join the absolute output directory with the filename."""
    return os.path.join(os.path.abspath(directory), filename)


def save_png(image: Image.Image, path: str) -> str:
    """Write a PNG image, creating the parent directory if needed."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    image.save(path, "PNG")
    logger.debug("Wrote PNG %s (%dx%d)", path, *image.size)
    return path


def save_svg(svg: str, path: str) -> str:
    """Write an SVG document, creating the parent directory if needed."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(svg)
    logger.debug("Wrote SVG %s (%d bytes)", path, len(svg))
    return path
