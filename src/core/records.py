"""
Parsing of NetHack xlogfile lines.

Each completed game appends one line of tab separated NAME=VALUE pairs:

    version=3.6.1<TAB>points=1234<TAB>...<TAB>name=bob<TAB>death=killed by a jackal

Fields are located by the "<TAB>NAME=" needle, so order does not matter and
unknown fields are ignored. A value runs until the next tab or end of line.
"""
from dataclasses import dataclass
import re

from core.errors import MalformedNumberError, MissingFieldError

_INTEGER_RE = re.compile(r'[+-]?\d+')

TEXT_FIELDS = ("name", "role", "race", "gender", "align", "death")
NUMERIC_FIELDS = ("points", "maxlvl", "maxhp", "turns")


@dataclass(frozen=True)
class GameRecord:
    """One completed game as recorded in the xlogfile."""
    name: str
    points: int
    maxlvl: int   # deepest dungeon level reached
    maxhp: int
    turns: int
    role: str
    race: str
    gender: str
    align: str
    death: str    # free text ending cause, "quit" for a voluntary exit

    def summary(self) -> str:
        return (f"({self.role} {self.race} {self.gender} {self.align}) "
                f"P: {self.points}, T: {self.turns}, L: {self.maxlvl}, HP: {self.maxhp}")


def get_value(name: str, line: str) -> str:
    needle = f"\t{name}="
    pos = line.find(needle)
    if pos == -1:
        raise MissingFieldError(name)
    pos += len(needle)
    end = line.find("\t", pos)
    if end == -1:
        return line[pos:]
    return line[pos:end]


def to_int(name: str, value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise MalformedNumberError(name, value)
    return int(value)


def parse_record_line(line: str) -> GameRecord:
    """Parse one xlogfile line into a GameRecord.

    Args:
        line: A single line, with or without its line terminator

    Returns:
        The parsed record

    Raises:
        MissingFieldError: A required field is absent
        MalformedNumberError: A numeric field is not an integer
    """
    line = line.rstrip("\r\n")
    # Every field must be present before any number is converted.
    raw = {name: get_value(name, line) for name in TEXT_FIELDS + NUMERIC_FIELDS}
    for name in NUMERIC_FIELDS:
        raw[name] = to_int(name, raw[name])
    return GameRecord(**raw)
