import argparse
import sys
from pathlib import Path

from termpic.dimensions import DEFAULT_WIDTH
from termpic.log import logger, setup_logging
from termpic.show import ShowConfig, show_image
from termpic.terminal import RESET


def _positive(kind):
    def convert(value: str):
        number = kind(value)
        if number <= 0:
            raise argparse.ArgumentTypeError(f"must be positive: {value}")
        return number

    return convert


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def _emit(text: str) -> None:
    print(text, flush=True)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Show an image, or play an animated one, as truecolor half-blocks")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w", "--width", type=_positive(int), default=DEFAULT_WIDTH, help="Output width in columns (default: 80)"
    )
    parser.add_argument(
        "-l",
        "--loop-seconds",
        type=_non_negative_float,
        default=5.0,
        help="How long to play an animated image, in seconds (default: 5)",
    )
    parser.add_argument(
        "-r", "--frame-rate", type=_positive(float), default=10.0, help="Animation frames per second (default: 10)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    config = ShowConfig(
        image_path=image_path,
        width=args.width,
        loop_seconds=args.loop_seconds,
        frame_rate=args.frame_rate,
    )
    try:
        show_image(config, emit=_emit)
    except KeyboardInterrupt:
        logger.debug("Interrupted, resetting colours")
        _emit(RESET)
        sys.exit(130)
