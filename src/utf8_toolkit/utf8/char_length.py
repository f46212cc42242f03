from .split_codepoints import split_codepoints


def char_length(string: bytes) -> int:
    """Count the characters in a valid UTF-8 byte string."""
    try:
        return len(string.decode("utf-8", "surrogatepass"))
    except UnicodeDecodeError:
        # Forms the native decoder refuses (overlong, out of range) still count
        # as one character each for split_codepoints, which raises on garbage.
        return len(split_codepoints(string))
