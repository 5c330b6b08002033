"""Tests for terminal output and the big font."""
import io

from rendering.console import Console, VT_GREEN, load_big_font


FONT = (
    "!@\n"
    "!@\n"
    "!@\n"
    "@\n"
    "!@\n"
    "@\n"
    "@@\n"
    "\"\"@\n"
    "\"\"@\n"
    "@\n"
    "@\n"
    "@\n"
    "@\n"
    "@@\n"
)


def make_console(font=None):
    out = io.BytesIO()
    return Console(out, font), out


def test_load_big_font(tmp_path):
    path = tmp_path / "font.txt"
    path.write_text(FONT)
    font = load_big_font(str(path))
    assert len(font) == ord('"') + 1
    assert font[ord("!")] == ["!", "!", "!", "", "!", ""]
    assert font[ord('"')][0] == '""'


def test_missing_font_file(tmp_path):
    assert load_big_font(str(tmp_path / "nope.txt")) == []


def test_control_sequences():
    console, out = make_console()
    console.go_to(3, 7)
    console.set_color(VT_GREEN)
    console.clear()
    console.hide_cursor()
    console.show_cursor()
    assert out.getvalue() == b"\x1b[7;3H\x1b[1;32m\x1b[2J\n\x1b[?25l\n\x1b[?25h\n"


def test_write_is_raw_bytes():
    console, out = make_console()
    console.write(b"\x1b[HYou die...\xff")
    assert out.getvalue() == b"\x1b[HYou die...\xff"


def test_print_big_without_font_is_plain_text():
    console, out = make_console()
    console.print_big(4, 6, VT_GREEN, "DED.")
    assert out.getvalue() == b"\x1b[1;32m\x1b[6;4HDED."


def test_print_big_with_font(tmp_path):
    path = tmp_path / "font.txt"
    path.write_text(FONT)
    console, out = make_console(load_big_font(str(path)))
    console.print_big(1, 1, VT_GREEN, "! Z")
    text = out.getvalue().decode()
    # six rows, each positioned and made of glyph cells followed by a space
    assert text.count("\x1b[") == 7
    assert "\x1b[1;1H!" + " " * 7 + "\x1b[2;1H" in text
    assert text.endswith("\x1b[6;1H" + " " * 7)
