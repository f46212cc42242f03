import re

# Alternatives begin on disjoint lead bytes, so a failed match never backtracks.
VALID_UTF8 = re.compile(
    rb"(?:[\x01-\x7F]"
    rb"|[\xC2-\xDF][\x80-\xBF]"
    rb"|[\xE0-\xEF][\x80-\xBF]{2}"
    rb"|[\xF0-\xF4][\x80-\xBF]{3})*"
)


def is_valid_utf8(string: bytes) -> bool:
    """Check if the whole byte string is well-formed UTF-8 (NUL is rejected)."""
    if string.isascii():
        return b"\x00" not in string
    return VALID_UTF8.fullmatch(string) is not None
