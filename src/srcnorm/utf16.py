# 简介：UTF-16 结构校验。推断字节序（BOM 或采样），校验代理对配对，
# 并统计字符类别供启发式判定使用。
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal


Utf16Status = Literal["ok", "size", "invalid"]

ASCII_DEL = 0x7F
MIN_HIGH_SURROGATE = 0xD800
MIN_LOW_SURROGATE = 0xDC00
MAX_LOW_SURROGATE = 0xDFFF

BOM_LE = b"\xff\xfe"
BOM_BE = b"\xfe\xff"

MAX_UNITS_TO_EXAMINE = 1000

# Code unit types
CHARACTER = 0
HIGH_SURROGATE = 1
LOW_SURROGATE = 2


@dataclass
class ClassificationCounts:
    total_characters: int = 0
    normal_ascii: int = 0
    weird_ascii: int = 0

    @property
    def non_ascii(self) -> int:
        return self.total_characters - self.normal_ascii - self.weird_ascii


@dataclass
class Utf16Check:
    status: Utf16Status
    counts: ClassificationCounts = field(default_factory=ClassificationCounts)
    little_endian: bool = True
    has_bom: bool = False

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def is_normal_ascii(code: int) -> bool:
    """Printable ASCII or whitespace (TAB, LF, VT, FF, CR). DEL is not."""
    if code > 0x7E or code < 0x09:
        return False
    return code >= 0x20 or code <= 0x0D


def unit_type(code: int) -> int:
    if code < MIN_HIGH_SURROGATE:
        return CHARACTER
    if code < MIN_LOW_SURROGATE:
        return HIGH_SURROGATE
    if code <= MAX_LOW_SURROGATE:
        return LOW_SURROGATE
    return CHARACTER


def _units(data: bytes, start: int, little_endian: bool) -> Iterator[int]:
    byteorder = "little" if little_endian else "big"
    for ix in range(start, len(data) - 1, 2):
        yield int.from_bytes(data[ix : ix + 2], byteorder)


def guess_byte_order(data: bytes, max_units: int = MAX_UNITS_TO_EXAMINE) -> bool:
    """Return True for little endian.

    Pick the byte order that produces more ASCII text. Files in UTF-16
    mostly come from Windows, so a tie goes to little endian.
    """
    sample = data[: 2 * max_units]
    le = sum(is_normal_ascii(u) for u in _units(sample, 0, True))
    be = sum(is_normal_ascii(u) for u in _units(sample, 0, False))
    return not be > le


def validate(data: bytes, max_units: int = MAX_UNITS_TO_EXAMINE) -> Utf16Check:
    # Error if size is too small or not even
    if len(data) < 2 or len(data) % 2:
        return Utf16Check("size")

    start = 0
    has_bom = True
    if data[:2] == BOM_LE:
        little_endian = True
        start = 2
    elif data[:2] == BOM_BE:
        little_endian = False
        start = 2
    else:
        has_bom = False
        little_endian = guess_byte_order(data, max_units)

    counts = ClassificationCounts()
    previous = CHARACTER
    for unit in _units(data, start, little_endian):
        kind = unit_type(unit)
        if kind == CHARACTER:
            # A lonely surrogate isn't allowed
            if previous != CHARACTER:
                return Utf16Check("invalid", counts, little_endian, has_bom)
            if unit <= ASCII_DEL:
                if is_normal_ascii(unit):
                    counts.normal_ascii += 1
                else:
                    counts.weird_ascii += 1
            counts.total_characters += 1
        elif kind == HIGH_SURROGATE:
            if previous == HIGH_SURROGATE:
                return Utf16Check("invalid", counts, little_endian, has_bom)
        else:
            if previous != HIGH_SURROGATE:
                return Utf16Check("invalid", counts, little_endian, has_bom)
            # Any pair is a valid code point; count it once, no need to decode.
            counts.total_characters += 1
            kind = CHARACTER
        previous = kind

    if previous != CHARACTER:
        return Utf16Check("invalid", counts, little_endian, has_bom)

    return Utf16Check("ok", counts, little_endian, has_bom)
