"""QR Link Generator: turn a URL into a PNG or SVG QR code."""

__version__ = "1.0.0"

# Shared constants
MAX_URL_LENGTH = 2048
MIN_QR_SIZE = 100
MAX_QR_SIZE = 4096
DEFAULT_QR_SIZE = 256
DEFAULT_LEVEL = "M"
DEFAULT_FORMAT = "png"
UNIT_SIZE = 6  # SVG pixels per module
QUIET_ZONE = 4  # Border modules around the symbol
SUPPORTED_FORMATS = ("png", "svg")

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
