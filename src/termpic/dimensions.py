# Terminal cells are taller than wide; roughly 7:8 width to height for common fonts
CELL_ASPECT = 7 / 8
DEFAULT_WIDTH = 80


def target_size(source_width: int, source_height: int, width: int = DEFAULT_WIDTH) -> tuple[int, int]:
    """Return the (width, height) in pixels to resize a source image to before rendering.

    Each glyph row consumes two pixel rows, so the height is always even and at
    least 2.
    """
    if source_width <= 0 or source_height <= 0:
        raise ValueError(f"Source dimensions must be positive: {source_width}x{source_height}")
    if width <= 0:
        raise ValueError(f"Width must be positive: {width}")

    half_height = source_height * width * CELL_ASPECT / source_width / 2
    height = round(half_height) * 2
    return width, max(height, 2)
