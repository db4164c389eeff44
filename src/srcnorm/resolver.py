from __future__ import annotations

from typing import Literal, Optional

from loguru import logger

from .config import Heuristics
from .defects import Defect
from .utf16 import BOM_BE, BOM_LE, is_normal_ascii, validate


Resolution = Literal["unknown", "binary", "utf16"]

ELF_MAGIC = b"\x7fELF"


def looks_like_executable(data: bytes, h: Heuristics) -> bool:
    return len(data) > h.elf_min_size and data[:4] == ELF_MAGIC


def looks_like_utf16(data: bytes, h: Heuristics) -> bool:
    """Files coming from Windows may have UTF-16 encoding."""
    has_bom = data[:2] in (BOM_LE, BOM_BE)
    # The byte order guess is unreliable on short files
    if not has_bom and len(data) < h.min_sample_size:
        return False

    check = validate(data, h.max_units_to_examine)
    if not check.ok:
        return False
    counts = check.counts
    if counts.total_characters == 0 or counts.weird_ascii:
        return False
    # Most source code is 7-bit ASCII, even in UTF-16
    return counts.non_ascii < h.max_non_ascii_ratio * counts.total_characters


def looks_like_binary(data: bytes, h: Heuristics) -> bool:
    if len(data) < h.min_sample_size:
        return False
    normal = sum(1 for c in data if is_normal_ascii(c))
    weird = len(data) - normal
    return weird > normal * h.max_weird_ratio


def resolve(data: bytes, heuristics: Optional[Heuristics] = None) -> Resolution:
    """Find out why a file has invalid characters."""
    h = heuristics or Heuristics()
    if looks_like_executable(data, h):
        return "binary"
    if looks_like_utf16(data, h):
        return "utf16"
    if looks_like_binary(data, h):
        return "binary"
    return "unknown"


def refine(defects: Defect, data: bytes, heuristics: Optional[Heuristics] = None) -> Defect:
    """Escalate INVALID_CHARACTERS to NOT_TEXT / INVALID_ENCODING when it fits.

    An encoding problem makes the whitespace findings meaningless, so they
    are dropped.
    """
    if not defects & Defect.INVALID_CHARACTERS:
        return defects
    resolution = resolve(data, heuristics)
    logger.debug("invalid characters resolved as {}", resolution)
    if resolution == "binary":
        return Defect.NOT_TEXT
    if resolution == "utf16":
        return Defect.INVALID_ENCODING
    return defects
