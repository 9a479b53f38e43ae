from collections.abc import Sequence

from termpic.terminal import DARK_FOREGROUND, HALF_BLOCK, PLACEHOLDER, RESET, background, foreground

ALPHA_THRESHOLD = 100


def is_transparent(pixel: Sequence[int]) -> bool:
    return pixel[3] < ALPHA_THRESHOLD


def encode_cell(bg: Sequence[int], fg: Sequence[int], was_transparent: bool) -> tuple[str, bool]:
    """Encode a vertical pixel pair as one terminal cell.

    `bg` is the top pixel and `fg` the bottom one, both RGBA. `was_transparent`
    says whether the previous cell in the row was fully transparent; the second
    element of the result is the value to pass for the next cell.

    Runs of fully transparent cells only emit the reset once, since it stays in
    effect until the next colour code.
    """
    bg_clear = is_transparent(bg)
    fg_clear = is_transparent(fg)

    if bg_clear and fg_clear:
        if was_transparent:
            return PLACEHOLDER, True
        return RESET + PLACEHOLDER, True
    if bg_clear:
        return RESET + foreground(*fg[:3]) + HALF_BLOCK, False
    if fg_clear:
        return background(*bg[:3]) + DARK_FOREGROUND + HALF_BLOCK, False
    return background(*bg[:3]) + foreground(*fg[:3]) + HALF_BLOCK, False
