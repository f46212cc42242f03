"""Errors raised by the UTF-8 helpers."""


class Utf8Error(Exception):
    """Base class for errors raised by utf8_toolkit."""
    pass


class InvalidEncodingError(Utf8Error, ValueError):
    """Raised when a byte string assumed to be UTF-8 is malformed."""

    def __init__(self, offset: int, byte: int | None = None):
        self.offset = offset
        self.byte = byte
        if byte is None:
            msg = f"Invalid UTF-8 string: truncated sequence at byte {offset}"
        else:
            msg = f"Invalid UTF-8 string: unexpected byte 0x{byte:02X} at byte {offset}"
        super().__init__(msg)


class MarkerTooLongError(Utf8Error, ValueError):
    """Raised when a truncation marker leaves no room for content."""
    pass
