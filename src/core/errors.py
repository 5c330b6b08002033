"""Error kinds raised by the hall of fame core."""


class HallOfFameError(Exception):
    """Base class for all hall of fame errors."""


class RecordParseError(HallOfFameError):
    """A line of the xlogfile could not be turned into a GameRecord."""


class MissingFieldError(RecordParseError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing value in xlogfile: {field}")
        self.field = field


class MalformedNumberError(RecordParseError):
    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Field {field} is not an integer: {value!r}")
        self.field = field
        self.value = value


class TruncatedRecordingError(HallOfFameError):
    """A ttyrec header or payload is shorter than declared."""
