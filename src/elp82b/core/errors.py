class Elp82bError(Exception):
    """Base error."""

class TheoryDataError(Elp82bError):
    """Raised when a series table is missing or does not match its ELP file number."""

class TableFormatError(TheoryDataError):
    """Raised when a line of a published ELP data file cannot be parsed."""

    def __init__(self, path: str, line_no: int, message: str):
        super().__init__(f"{path}:{line_no}: {message}")
        self.path = path
        self.line_no = line_no

class EphemerisUnavailableError(Elp82bError):
    """Raised when the optional JPL ephemeris support (jplephem + kernel) is not available."""
