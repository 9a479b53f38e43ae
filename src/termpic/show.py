import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from termpic.dimensions import DEFAULT_WIDTH, target_size
from termpic.log import logger
from termpic.playback import play
from termpic.renderer import render_frame
from termpic.source import ImageSource, PillowSource


@dataclass
class ShowConfig:
    image_path: str | Path
    width: int = DEFAULT_WIDTH
    loop_seconds: float = 5.0
    frame_rate: float = 10.0

    def validate(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Width must be positive: {self.width}")
        if self.frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive: {self.frame_rate}")
        if self.loop_seconds < 0:
            raise ValueError(f"Loop seconds must not be negative: {self.loop_seconds}")


def render_image(
    image_path: str | Path,
    width: int = DEFAULT_WIDTH,
    source: ImageSource | None = None,
) -> tuple[list[str], int]:
    """Decode an image and render every frame.

    Returns the rendered blocks in display order and the pixel height they were
    rendered at.
    """
    if source is None:
        source = PillowSource()

    frames = source.decode(image_path)
    first = frames[0]
    target_width, target_height = target_size(first.width, first.height, width)
    logger.debug(f"Rendering {len(frames)} frame(s) at {target_width}x{target_height}")

    blocks = [render_frame(source.pixels(source.resize(frame, target_width, target_height))) for frame in frames]
    return blocks, target_height


def show_image(
    config: ShowConfig,
    emit: Callable[[str], object] = print,
    source: ImageSource | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], object] = time.sleep,
) -> None:
    config.validate()
    blocks, target_height = render_image(config.image_path, config.width, source)
    if len(blocks) > 1:
        logger.debug(f"Playing {len(blocks)} frames at {config.frame_rate} fps for {config.loop_seconds}s")
    play(
        blocks,
        target_height,
        frame_rate=config.frame_rate,
        loop_seconds=config.loop_seconds,
        emit=emit,
        clock=clock,
        sleep=sleep,
    )
