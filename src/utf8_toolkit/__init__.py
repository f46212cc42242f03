"""Validate, repair, split and shorten UTF-8 byte strings."""

from .utf8.char_length import char_length
from .utf8.config import DEFAULT_MARKER
from .utf8.errors import InvalidEncodingError, MarkerTooLongError, Utf8Error
from .utf8.is_valid_utf8 import is_valid_utf8
from .utf8.shorten import shorten
from .utf8.split_codepoints import split_codepoints
from .utf8.to_valid_utf8 import to_valid_utf8
from .utf8.truncate_bytes import truncate_bytes

__all__ = [
    "DEFAULT_MARKER",
    "InvalidEncodingError",
    "MarkerTooLongError",
    "Utf8Error",
    "char_length",
    "is_valid_utf8",
    "shorten",
    "split_codepoints",
    "to_valid_utf8",
    "truncate_bytes",
]
