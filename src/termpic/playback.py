import time
from collections.abc import Callable, Sequence

from termpic.terminal import CURSOR_RESTORE, CURSOR_SAVE, cursor_up


def frame_interval(frame_rate: float) -> float:
    """Seconds each frame should stay on screen."""
    if frame_rate <= 0:
        raise ValueError(f"Frame rate must be positive: {frame_rate}")
    return 1 / frame_rate


def play(
    blocks: Sequence[str],
    target_height: int,
    frame_rate: float = 10.0,
    loop_seconds: float = 5.0,
    emit: Callable[[str], object] = print,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], object] = time.sleep,
) -> None:
    """Emit rendered frames, animating them in place when there is more than one.

    An animation replays whole cycles of `blocks` until `loop_seconds` have
    passed since the start, checked after each cycle, so at least one cycle is
    always shown. Each frame is followed by a cursor save and a move back up
    over the frame, so the next one overwrites it. The saved position is
    restored once at the end, also when playback is interrupted.
    """
    if not blocks:
        raise ValueError("Nothing to play")

    if len(blocks) == 1:
        emit(blocks[0])
        return

    interval = frame_interval(frame_rate)
    rewind = CURSOR_SAVE + cursor_up(target_height + 1)

    start = clock()
    try:
        while True:
            for block in blocks:
                frame_started = clock()
                emit(block + rewind)
                remaining = interval - (clock() - frame_started)
                if remaining > 0:
                    sleep(remaining)
            if clock() - start >= loop_seconds:
                break
    finally:
        emit(CURSOR_RESTORE)
