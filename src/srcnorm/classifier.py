from __future__ import annotations

from .defects import Defect


NEWLINE = 0x0A
CR = 0x0D
TAB = 0x09
VT = 0x0B
FF = 0x0C

# Any byte value that isn't whitespace; also used to mask consumed bytes.
NOT_A_SPACE = 0

# C isspace() in the "C" locale
_SPACES = frozenset(b" \t\n\v\f\r")


def is_printable(c: int) -> bool:
    return 0x20 <= c <= 0x7E


def classify(data: bytes) -> Defect:
    """Scan raw bytes once and return the detected defect bits.

    Only three bytes of lookback are ever needed: the byte being examined,
    and the two before it. That is enough to find the character ending each
    line, even when the line ends with CR-LF.
    """
    errors = Defect.NONE
    if not data:
        return errors

    if data[-1] != NEWLINE:
        errors |= Defect.MISSING_NEWLINE

    unusual_whitespace = 0

    penultimate = NOT_A_SPACE
    antepenultimate = NOT_A_SPACE

    for current in data:
        if not is_printable(current):
            if current == NEWLINE:
                last_character = penultimate
                if penultimate == CR:
                    errors |= Defect.CRLF_LINE_ENDINGS
                    last_character = antepenultimate
                    # The CR was counted as unusual whitespace when it was read;
                    # only free standing carriage returns count.
                    unusual_whitespace -= 1
                    penultimate = NOT_A_SPACE
                if last_character in _SPACES:
                    errors |= Defect.TRAILING_WHITESPACE
                # Don't let the line feed look like trailing content later
                current = NOT_A_SPACE
            elif current == TAB:
                errors |= Defect.TABS
            elif current in (CR, VT, FF):
                unusual_whitespace += 1
            else:
                errors |= Defect.INVALID_CHARACTERS

        antepenultimate = penultimate
        penultimate = current

    if unusual_whitespace:
        errors |= Defect.UNUSUAL_WHITESPACE

    return errors
