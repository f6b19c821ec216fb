class CVParserError(Exception):
    """Base class for errors raised by the parsing pipeline."""


class UnsupportedFormatError(CVParserError):
    """The declared document format is not one the loader can read."""

    def __init__(self, fmt: object):
        self.format = fmt
        super().__init__(f"unsupported format: {fmt!r} (expected 'pdf' or 'word-processor')")
