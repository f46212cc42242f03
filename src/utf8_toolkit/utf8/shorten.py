from .char_length import char_length
from .config import BREAK_CHARACTERS, DEFAULT_MARKER, STOP_CHARACTERS
from .errors import MarkerTooLongError
from .split_codepoints import split_codepoints


def shorten(string: bytes, max_length: int, marker: bytes = DEFAULT_MARKER) -> bytes:
    """Shorten a UTF-8 string to at most max_length characters.

    Prefers to cut after a sentence stop (".", "!", "?"), in which case no
    marker is added. Otherwise cuts at the nearest word break that leaves room
    for the marker, or hard-cuts at max_length minus the marker length, and
    appends the marker. Strings that already fit are returned unchanged.

    Raises MarkerTooLongError if the marker is not shorter than max_length.
    """
    marker_len = char_length(marker)
    if marker_len >= max_length:
        raise MarkerTooLongError(
            f"Marker length ({marker_len}) must be less than max_length ({max_length})"
        )

    chars = split_codepoints(string)
    if len(chars) <= max_length:
        return string

    word_boundary = None
    stop_boundary = None

    # A word break must leave room for the marker after it.
    marker_area = max_length - marker_len
    for ii in range(max_length, -1, -1):
        c = chars[ii]
        if c in BREAK_CHARACTERS and ii <= marker_area:
            word_boundary = ii
        elif c in STOP_CHARACTERS and ii < max_length:
            stop_boundary = ii + 1
            break
        elif word_boundary is not None:
            break

    if stop_boundary is not None:
        return b"".join(chars[:stop_boundary])

    # Nothing to break on, or only break characters down to the start.
    if not word_boundary:
        word_boundary = max_length - marker_len

    return b"".join(chars[:word_boundary]) + marker
