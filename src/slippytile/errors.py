"""Exceptions raised when parsing the text forms of tiles and boxes."""


class SlippyTileError(Exception):
    pass


class BBoxParseError(SlippyTileError, ValueError):
    """A bounding box could not be parsed from text."""


class BBoxFieldCountError(BBoxParseError):
    """The text did not hold exactly four comma-separated values."""

    def __init__(self, count=None):
        self.count = count
        super().__init__("Expected exactly 4 comma-separated values")


class BBoxNumberError(BBoxParseError):
    """One of the four fields is not a floating point number.

    The float parse failure is chained as ``__cause__`` and its message is
    reused as the message of this error.
    """

    def __init__(self, field, error):
        self.field = field
        self.error = error
        super().__init__(str(error))


class TileParseError(SlippyTileError, ValueError):
    def __init__(self, text=None):
        self.text = text
        super().__init__("Invalid tile format")
