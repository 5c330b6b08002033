"""VT100 terminal output with an oversized block-letter font."""
import logging
import os
import sys
from typing import BinaryIO, Optional

from config import hall_config

logger = logging.getLogger(__name__)

VT_BLACK = 30
VT_RED = 31
VT_GREEN = 32
VT_YELLOW = 33
VT_BLUE = 34
VT_MAGENTA = 35
VT_CYAN = 36
VT_WHITE = 37

FIRST_GLYPH = ord("!")
SPACE_GLYPH = " " * 5

Glyph = list[str]


def load_big_font(filename: str) -> list[Glyph]:
    """Load a figlet-style font file.

    Glyph rows are the text of each line up to the first '@'; a line
    containing '@@' is a separator that ends the glyph. Glyphs are stored
    in character order starting at '!', so the font is indexed directly by
    character code.
    A missing file gives an empty font and big text falls back to plain text.
    """
    if not os.path.exists(filename):
        logger.warning(f"font file not found: {filename}")
        return []

    font: list[Glyph] = [[""] * hall_config.FONT_HEIGHT for _ in range(FIRST_GLYPH)]
    glyph: Glyph = []
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if "@@" in line:
                font.append(glyph)
                glyph = []
            else:
                glyph.append(line.split("@", 1)[0])
    logger.debug(f"loaded {len(font) - FIRST_GLYPH} glyphs from {filename}")
    return font


class Console:
    """Writes text and control sequences to a byte stream, stdout by default.

    Also serves as the byte sink for ttyrec replays.
    """

    def __init__(self, out: Optional[BinaryIO] = None, font: Optional[list[Glyph]] = None) -> None:
        self.out = out if out is not None else sys.stdout.buffer
        self.font = font if font is not None else []

    @classmethod
    def with_font_file(cls, filename: str, out: Optional[BinaryIO] = None) -> 'Console':
        return cls(out, load_big_font(filename))

    def write(self, data: bytes) -> None:
        self.out.write(data)
        self.out.flush()

    def text(self, s: str) -> None:
        self.write(s.encode("utf-8", errors="replace"))

    def hide_cursor(self) -> None:
        self.text("\x1b[?25l\n")

    def show_cursor(self) -> None:
        self.text("\x1b[?25h\n")

    def go_to(self, x: int, y: int) -> None:
        self.text(f"\x1b[{y};{x}H")

    def clear(self) -> None:
        self.text("\x1b[2J\n")

    def set_color(self, color: int) -> None:
        self.text(f"\x1b[1;{color}m")

    def print_big(self, at_x: int, at_y: int, color: int, text: str) -> None:
        self.set_color(color)
        if not self.font:
            self.go_to(at_x, at_y)
            self.text(text)
            return

        for y in range(hall_config.FONT_HEIGHT):
            self.go_to(at_x, at_y + y)
            row = []
            for ch in text:
                idx = ord(ch)
                if idx >= len(self.font):
                    continue
                if ch == " ":
                    row.append(SPACE_GLYPH)
                else:
                    glyph = self.font[idx]
                    row.append(glyph[y] if y < len(glyph) else "")
            self.text("".join(f"{cell} " for cell in row))
