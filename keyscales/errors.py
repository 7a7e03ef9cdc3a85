"""Errors raised while reading scale definitions. All of them are fatal."""


class KeyScaleError(ValueError):
    """Base class for malformed scale input."""


class MalformedRecordError(KeyScaleError):
    """A formula line has fewer than two tab-separated fields."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Expected at least 2 tab-separated fields in {line!r}")


class UnrecognizedAccidentalError(KeyScaleError):
    def __init__(self, symbol: str, token: str = ""):
        self.symbol = symbol
        self.token = token
        super().__init__(f"No mod available for '{symbol}'")


class UnrecognizedDegreeError(KeyScaleError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"No tone for '{token}'")
