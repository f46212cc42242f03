from .errors import MarkerTooLongError
from .split_codepoints import split_codepoints


def truncate_bytes(string: bytes, max_bytes: int, marker: bytes = b"") -> bytes:
    """Truncate a UTF-8 string to max_bytes, never splitting a character."""
    if len(marker) >= max_bytes:
        raise MarkerTooLongError(
            f"Marker size ({len(marker)} bytes) must be less than max_bytes ({max_bytes})"
        )
    if len(string) <= max_bytes:
        return string

    budget = max_bytes - len(marker)
    size = 0
    kept = []
    for char in split_codepoints(string):
        if size + len(char) > budget:
            break
        kept.append(char)
        size += len(char)
    return b"".join(kept) + marker
