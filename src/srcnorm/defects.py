# 简介：缺陷位集合与判定。可修复（空白/换行）与无望（二进制/编码/非法字符）两类，
# 任何无望位都会使整个集合不可修复。
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import FrozenSet, List, Union


class Defect(enum.IntFlag):
    NONE = 0

    # Fixable
    TABS = 0x0001
    UNUSUAL_WHITESPACE = 0x0002  # VT, FF, lone CR
    TRAILING_WHITESPACE = 0x0004
    CRLF_LINE_ENDINGS = 0x0008
    MISSING_NEWLINE = 0x0010
    FIXABLE = 0x00FF

    # Hopeless
    INVALID_CHARACTERS = 0x0100
    INVALID_ENCODING = 0x0200  # probably UTF-16
    NOT_TEXT = 0x0400  # binary
    HOPELESS = 0xFF00


# Report order; hopeless kinds come first, most severe first.
MESSAGES = (
    (Defect.NOT_TEXT, "Not a text file"),
    (Defect.INVALID_ENCODING, "Invalid encoding. Possibly UTF-16?"),
    (Defect.INVALID_CHARACTERS, "Invalid characters"),
    (Defect.TABS, "Tabs"),
    (Defect.UNUSUAL_WHITESPACE, "Unusual whitespace"),
    (Defect.TRAILING_WHITESPACE, "Trailing whitespace"),
    (Defect.CRLF_LINE_ENDINGS, "CR-LF line endings"),
    (Defect.MISSING_NEWLINE, "No newline at end of file"),
)

FIXABLE_KINDS = tuple(d for d, _ in MESSAGES if d & Defect.FIXABLE)
HOPELESS_KINDS = tuple(d for d, _ in MESSAGES if d & Defect.HOPELESS)


def is_fixable(defects: Defect) -> bool:
    # Can't fix if any hopeless errors
    if defects & Defect.HOPELESS:
        return False
    return bool(defects & Defect.FIXABLE)


@dataclass(frozen=True)
class Clean:
    pass


@dataclass(frozen=True)
class Fixable:
    kinds: FrozenSet[Defect]


@dataclass(frozen=True)
class Hopeless:
    kind: Defect


Verdict = Union[Clean, Fixable, Hopeless]


def verdict(defects: Defect) -> Verdict:
    """Collapse a defect set into Clean | Fixable(kinds) | Hopeless(kind)."""
    for kind in HOPELESS_KINDS:
        if defects & kind:
            return Hopeless(kind)
    kinds = frozenset(k for k in FIXABLE_KINDS if defects & k)
    if kinds:
        return Fixable(kinds)
    return Clean()


def describe(defects: Defect) -> str:
    """Human readable list, e.g. "Tabs, Trailing whitespace, and CR-LF line endings"."""
    parts: List[str] = [text for kind, text in MESSAGES if defects & kind]
    message = ", ".join(parts)
    # Add an "and" to make the message nicer
    pos = message.rfind(",")
    if pos != -1:
        message = message[: pos + 1] + " and" + message[pos + 1 :]
    return message
