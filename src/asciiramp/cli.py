import argparse
import logging
import sys

from asciiramp.charsets import DEFAULT_PRESET, PRESETS
from asciiramp.converter import ImageSession
from asciiramp.errors import DecodeFailure, InvalidInput
from asciiramp.model import ConversionConfig
from asciiramp.sinks import DEFAULT_FILENAME, FileSink, StreamSink
from asciiramp.terminal import default_width

MIN_WIDTH = 20
MAX_WIDTH = 300


def _width(value: str) -> int:
    width = int(value)
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {width}")
    return width


def setup_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger = logging.getLogger("asciiramp")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w",
        "--width",
        type=_width,
        default=None,
        help=f"Output width in columns, {MIN_WIDTH}-{MAX_WIDTH} (default: terminal width)",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=DEFAULT_PRESET,
        choices=list(PRESETS),
        help=f"Character ramp to use (default: {DEFAULT_PRESET})",
    )
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const=DEFAULT_FILENAME,
        default=None,
        help=f"Save to a text file instead of printing (default name: {DEFAULT_FILENAME})",
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Log conversion details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    width = args.width if args.width is not None else default_width(MIN_WIDTH, MAX_WIDTH)
    session = ImageSession()
    try:
        session.load(args.image)
        config = ConversionConfig.from_preset(args.charset, width, invert=args.invert)
        art = session.render(config)
    except (DecodeFailure, InvalidInput) as e:
        print(e, file=sys.stderr)
        return 1

    sink = FileSink(args.output) if args.output is not None else StreamSink()
    try:
        sink.write(art)
    except OSError as e:
        print(f"Could not write output: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
