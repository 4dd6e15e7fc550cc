"""Serialize a QR module bitmap as an SVG document."""

from qr_link_generator import UNIT_SIZE

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def generate_svg(bitmap: list[list[bool]], unit_size: int = UNIT_SIZE) -> str:
    """Build an SVG string with one filled square per dark module.

    Modules are emitted row by row. No path merging is done, so the number
    of <rect> elements always equals the number of True cells.

    Args:
        bitmap: Square boolean matrix, True for dark modules.
        unit_size: Side length of one module in SVG pixels.

    Returns:
        The SVG document as a string.

    Raises:
        ValueError: If the bitmap is not square.
    """
    dim = len(bitmap)
    for row in bitmap:
        if len(row) != dim:
            raise ValueError(
                f"Bitmap must be square: expected rows of {dim}, got {len(row)}."
            )

    side = dim * unit_size
    lines = [f'<svg width="{side}" height="{side}" xmlns="{SVG_NAMESPACE}">']
    for y, row in enumerate(bitmap):
        for x, dark in enumerate(row):
            if dark:
                lines.append(
                    f'<rect x="{x * unit_size}" y="{y * unit_size}" '
                    f'width="{unit_size}" height="{unit_size}" fill="#000"/>'
                )
    lines.append("</svg>")
    return "\n".join(lines)
