from .config import REPLACEMENT_CHARACTER
from .is_valid_utf8 import is_valid_utf8
from .sequence_length import is_continuation, sequence_length


def _match_length(string: bytes, ii: int) -> int:
    """Length of the strictly valid character starting at ii, or 0 if there is none."""
    lead = string[ii]
    if lead == 0x00:
        return 0
    if lead <= 0x7F:
        return 1
    # Overlong 2-byte leads and anything past U+10FFFF are never matched.
    if lead in (0xC0, 0xC1) or lead > 0xF4:
        return 0
    seq_len = sequence_length(lead)
    if seq_len is None or ii + seq_len > len(string):
        return 0
    for jj in range(ii + 1, ii + seq_len):
        if not is_continuation(string[jj]):
            return 0
    return seq_len


def to_valid_utf8(string: bytes) -> bytes:
    """Convert a byte string into valid UTF-8.

    Invalid bytes are replaced one at a time with U+FFFD, then scanning resumes
    at the next byte. Input that is already valid is returned as-is. Never raises.
    """
    if is_valid_utf8(string):
        return string

    result = []
    length = len(string)
    start = 0       # beginning of the current run of valid bytes
    ii = 0
    while ii < length:
        matched = _match_length(string, ii)
        if matched:
            ii += matched
            continue
        result.append(string[start:ii])
        result.append(REPLACEMENT_CHARACTER)
        ii += 1
        start = ii
    result.append(string[start:])
    return b"".join(result)
