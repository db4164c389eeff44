from __future__ import annotations

from typing import List


_OTHER_SPACES = frozenset(b"\r\v\f")


def _fix_line(line: bytes, tab_width: int, out: bytearray) -> None:
    start = len(out)
    column = 0
    for c in line:
        if c == 0x09:
            # Expand to the next tab stop
            n = tab_width - column % tab_width
            out += b" " * n
            column += n
        elif c in _OTHER_SPACES:
            out.append(0x20)
            column += 1
        else:
            out.append(c)
            column += 1
    # Trim trailing spaces of this line only
    end = len(out)
    while end > start and out[end - 1] == 0x20:
        end -= 1
    del out[end:]


def fix(data: bytes, tab_width: int) -> bytes:
    """Return ``data`` with tabs expanded, trailing spaces trimmed,
    line endings normalized to LF and a final newline guaranteed."""
    if tab_width < 1:
        raise ValueError(f"tab width must be positive, got {tab_width}")

    lines: List[bytes] = data.split(b"\n")
    # The piece after the last LF; empty when the data ends with a newline
    tail = lines.pop()

    out = bytearray()
    for line in lines:
        if line.endswith(b"\r"):
            line = line[:-1]
        _fix_line(line, tab_width, out)
        out.append(0x0A)

    if tail:
        mark = len(out)
        _fix_line(tail, tab_width, out)
        # A final line of nothing but whitespace adds nothing
        if len(out) > mark:
            out.append(0x0A)

    return bytes(out)
