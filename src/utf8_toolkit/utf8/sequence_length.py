def sequence_length(lead: int) -> int | None:
    """Return the sequence length announced by a lead byte, or None if it can't lead."""
    if lead <= 0x7F:
        return 1
    if lead < 0xC0:
        return None     # continuation byte
    if lead <= 0xDF:
        return 2
    if lead <= 0xEF:
        return 3
    if lead <= 0xF7:
        return 4
    if lead <= 0xFB:
        return 5
    if lead <= 0xFD:
        return 6
    return None


def is_continuation(byte: int) -> bool:
    """Check if a byte can only appear after a lead byte."""
    return 0x80 <= byte <= 0xBF
