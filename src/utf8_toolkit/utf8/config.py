DEFAULT_MARKER = b"\xe2\x80\xa6"          # U+2026 HORIZONTAL ELLIPSIS
REPLACEMENT_CHARACTER = b"\xef\xbf\xbd"   # U+FFFD
MAX_SEQUENCE_LENGTH = 4                   # 5/6-byte legacy forms are rejected

# Latin-oriented heuristic; prefer cutting on these instead of mid-word.
BREAK_CHARACTERS = frozenset([b" ", b"\n", b";", b":", b"[", b"(", b",", b"-"])

# Cutting right after one of these needs no marker.
STOP_CHARACTERS = frozenset([b".", b"!", b"?"])
