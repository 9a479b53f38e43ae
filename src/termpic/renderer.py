import numpy as np

from termpic.encoder import encode_cell

# Stands in for the missing bottom row of an odd-height grid
_CLEAR = (0, 0, 0, 0)


def render_frame(grid: np.ndarray) -> str:
    """Render an RGBA pixel grid of shape (height, width, 4) as half-block text.

    Every pair of pixel rows becomes one line terminated by a newline.
    """
    if grid.ndim != 3 or grid.shape[2] != 4:
        raise ValueError(f"Expected an RGBA grid of shape (height, width, 4), got {grid.shape}")

    height, width, _ = grid.shape
    if height == 0 or width == 0:
        return ""

    # Plain ints format faster than numpy scalars
    rows = grid.tolist()
    out = []
    for y in range(0, height, 2):
        top = rows[y]
        bottom = rows[y + 1] if y + 1 < height else [_CLEAR] * width
        was_transparent = False
        parts = []
        for x in range(width):
            cell, was_transparent = encode_cell(top[x], bottom[x], was_transparent)
            parts.append(cell)
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)
