from .config import MAX_SEQUENCE_LENGTH
from .errors import InvalidEncodingError
from .sequence_length import sequence_length


def split_codepoints(string: bytes) -> list[bytes]:
    """Split a valid UTF-8 byte string into one bytes object per character.

    Raises InvalidEncodingError on a stray continuation byte, an unknown or
    legacy (5/6-byte) lead byte, a truncated sequence, or a lead byte where a
    continuation byte belongs. Combining characters are not grouped.
    """
    chars = []
    length = len(string)
    ii = 0
    while ii < length:
        lead = string[ii]
        if lead <= 0x7F:
            chars.append(string[ii:ii + 1])
            ii += 1
            continue

        seq_len = sequence_length(lead)
        if seq_len is None or seq_len > MAX_SEQUENCE_LENGTH:
            raise InvalidEncodingError(ii, lead)
        if ii + seq_len > length:
            raise InvalidEncodingError(ii)
        for jj in range(ii + 1, ii + seq_len):
            if string[jj] >= 0xC0:
                raise InvalidEncodingError(jj, string[jj])

        chars.append(string[ii:ii + seq_len])
        ii += seq_len
    return chars
