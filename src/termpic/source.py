from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, ImageSequence

from termpic.log import logger


class ImageSource(Protocol):
    def decode(self, path: str | Path) -> list[Image.Image]:
        """Load every frame of an image, in display order."""
        ...

    def resize(self, frame: Image.Image, width: int, height: int) -> Image.Image: ...

    def pixels(self, frame: Image.Image) -> np.ndarray:
        """Return the frame's pixels as a (height, width, 4) uint8 RGBA array."""
        ...


class PillowSource:
    """Image source backed by Pillow."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.BICUBIC):
        self.resample = resample

    def decode(self, path: str | Path) -> list[Image.Image]:
        with Image.open(path) as image:
            # convert() copies, so frames stay valid after the file is closed
            frames = [frame.convert("RGBA") for frame in ImageSequence.Iterator(image)]
        logger.debug(f"Decoded {path}: {len(frames)} frame(s) at {frames[0].width}x{frames[0].height}")
        return frames

    def resize(self, frame: Image.Image, width: int, height: int) -> Image.Image:
        return frame.resize((width, height), self.resample)

    def pixels(self, frame: Image.Image) -> np.ndarray:
        return np.asarray(frame.convert("RGBA"), dtype=np.uint8)
