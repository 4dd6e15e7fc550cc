"""CLI entry point for QR Link Generator."""

import argparse
import logging
import os
import sys

from qr_link_generator import (
    __version__,
    DEFAULT_FORMAT, DEFAULT_LEVEL, DEFAULT_QR_SIZE,
    MAX_QR_SIZE, MAX_URL_LENGTH, MIN_QR_SIZE,
    EXIT_FAILURE, EXIT_OK, EXIT_USAGE,
)

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    prog = "qr-link-generator"
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Generate a QR code image (PNG or SVG) for a URL.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  {prog} -u 'https://www.example.com' -s 256 -l M -f png -d /path/to/save
  {prog} -u 'https://www.example.com' -s 512 -l Q -f svg

Environment:
  QR_LINK_OUTPUT_DIR   default output directory (-d)
  QR_LINK_LOG_LEVEL    default log level (e.g. INFO, DEBUG)
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "-u", "--url",
        default="",
        help=f"URL to generate QR code for (max URL length {MAX_URL_LENGTH})",
    )
    parser.add_argument(
        "-l", "--level",
        default=DEFAULT_LEVEL,
        help=f"Correction level (L, M, Q, H). Default: {DEFAULT_LEVEL}",
    )
    parser.add_argument(
        "-f", "--format",
        dest="fmt",
        default=DEFAULT_FORMAT,
        help=f"Output format (png, svg). Default: {DEFAULT_FORMAT}",
    )
    parser.add_argument(
        "-s", "--size",
        type=int,
        default=DEFAULT_QR_SIZE,
        help=f"Size of the PNG in pixels (min {MIN_QR_SIZE}, max {MAX_QR_SIZE}). "
             f"Default: {DEFAULT_QR_SIZE}",
    )
    parser.add_argument(
        "-d", "--dir",
        dest="directory",
        default=os.environ.get("QR_LINK_OUTPUT_DIR", "."),
        help="Directory to save the file. Default: current directory",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Filename to save QR code to. Default: qrcode<timestamp><url>.<format>",
    )

    # Flags
    parser.add_argument(
        "-nodisplay", "--nodisplay",
        dest="nodisplay",
        action="store_true",
        help="Skip QR code output to console",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )

    return parser


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get("QR_LINK_LOG_LEVEL", "WARNING").strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]

    # Show usage when called bare
    if not argv:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    args = parser.parse_args(argv)

    # Lazy imports for faster --help
    from qr_link_generator.logging_config import setup_logging
    from qr_link_generator.validation import UsageError, validate_options

    setup_logging(_log_level(args.verbose))

    try:
        options = validate_options(
            url=args.url,
            level=args.level,
            fmt=args.fmt,
            size=args.size,
            directory=args.directory,
            filename=args.output,
            display=not args.nodisplay,
        )
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        return _generate(options)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (ValueError, OSError) as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


def _generate(options) -> int:
    from qrcode.exceptions import DataOverflowError

    from qr_link_generator.file_utils import (
        default_filename, explicit_filename, resolve_output_path,
        save_png, save_svg,
    )
    from qr_link_generator.qr_generator import (
        build_qr, get_bitmap, render_png, to_terminal_string,
    )
    from qr_link_generator.svg_renderer import generate_svg

    if options.filename:
        filename = explicit_filename(options.filename, options.fmt)
    else:
        filename = default_filename(options.url, options.fmt)
    output_path = resolve_output_path(options.directory, filename)
    logger.info("Output path: %s", output_path)

    try:
        qr = build_qr(options.url, options.level)
    except DataOverflowError:
        raise ValueError(
            f"URL is too long to fit in a QR code at correction level {options.level}."
        ) from None

    if options.display:
        try:
            print(to_terminal_string(qr))
        except UnicodeEncodeError:
            logger.warning("Console cannot show the QR preview; skipping it.")

    if options.fmt == "svg":
        save_svg(generate_svg(get_bitmap(qr)), output_path)
    else:
        save_png(render_png(qr, options.size), output_path)

    print("QR code saved as:", output_path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
