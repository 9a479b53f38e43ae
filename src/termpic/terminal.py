import re

ESC = "\033"

RESET = f"{ESC}[0m"
DARK_FOREGROUND = f"{ESC}[30m"
CURSOR_SAVE = f"{ESC}[s"
CURSOR_RESTORE = f"{ESC}[u"

# Lower half block: background colour shows on top, foreground on the bottom
HALF_BLOCK = "▄"
PLACEHOLDER = "·"

_CSI_RE = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def foreground(r: int, g: int, b: int) -> str:
    return f"{ESC}[38;2;{r};{g};{b}m"


def background(r: int, g: int, b: int) -> str:
    return f"{ESC}[48;2;{r};{g};{b}m"


def cursor_up(lines: int) -> str:
    return f"{ESC}[{lines}A"


def strip_escapes(text: str) -> str:
    """Remove all CSI escape sequences, leaving only the visible glyphs."""
    return _CSI_RE.sub("", text)
