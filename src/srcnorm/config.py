from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Set

import yaml

from .errors import ConfigError
from .utf16 import MAX_UNITS_TO_EXAMINE


DEFAULT_CONFIG = "configs/srcnorm.yaml"
DEFAULT_EXTENSIONS = "c,cc,cpp,h,hpp"
MIN_TAB_SIZE = 1
MAX_TAB_SIZE = 100


@dataclass(frozen=True)
class Heuristics:
    """Thresholds of the binary / UTF-16 guesswork.

    The values are empirical; keep them overridable rather than clever.
    """

    # ELF magic is trusted only for files longer than this
    elf_min_size: int = 50
    # UTF-16: share of non-ASCII characters must stay below this
    max_non_ascii_ratio: float = 0.05
    # Binary: weird bytes above this fraction of normal bytes
    max_weird_ratio: float = 0.2
    # Statistical checks need at least this many bytes
    min_sample_size: int = 80
    # Code units sampled when guessing UTF-16 byte order
    max_units_to_examine: int = MAX_UNITS_TO_EXAMINE

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Heuristics":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - set(known))
        if unknown:
            raise ConfigError(f"unknown heuristics keys: {', '.join(unknown)}", key="heuristics")
        out: Dict[str, Any] = {}
        for k, v in d.items():
            # YAML like 5e-2 may parse as str
            try:
                out[k] = float(v) if "ratio" in k else int(float(v))
            except (TypeError, ValueError):
                raise ConfigError(f"heuristics.{k}: not a number: {v!r}", key=k) from None
        return cls(**out)


def split_names(arg: str | Iterable[str] | None) -> Set[str]:
    """Split "a,b c" style lists; empty items are dropped."""
    if arg is None:
        return set()
    items = [arg] if isinstance(arg, str) else list(arg)
    out: Set[str] = set()
    for item in items:
        for tok in str(item).replace(",", " ").split():
            out.add(tok)
    return out


def normalize_extensions(arg: str | Iterable[str] | None) -> Set[str]:
    return {e if e.startswith(".") else f".{e}" for e in split_names(arg)}


def check_bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    # "false" in quotes is a string, and a non-empty one
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"{key}: expected true or false, got {value!r}", key=key)
    return value


def check_tab_size(value: Any) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f'Strange tab size argument "{value}"', key="tab_size") from None
    if size < MIN_TAB_SIZE or size > MAX_TAB_SIZE:
        raise ConfigError(f'Strange tab size argument "{value}"', key="tab_size")
    return size


@dataclass(frozen=True)
class Config:
    """Process-wide settings, built once and passed down by reference."""

    fix: bool = False
    verbose: bool = False
    recursive: bool = False
    tab_size: int = 4
    skip: frozenset = frozenset()
    extensions: frozenset = field(default_factory=lambda: frozenset(normalize_extensions(DEFAULT_EXTENSIONS)))
    heuristics: Heuristics = field(default_factory=Heuristics)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        exts = data.get("extensions")
        return cls(
            fix=check_bool(data, "fix"),
            verbose=check_bool(data, "verbose"),
            recursive=check_bool(data, "recursive"),
            tab_size=check_tab_size(data.get("tab_size", 4)),
            skip=frozenset(split_names(data.get("skip"))),
            extensions=frozenset(normalize_extensions(exts if exts else DEFAULT_EXTENSIONS)),
            heuristics=Heuristics.from_dict(data.get("heuristics", {}) or {}),
        )

    @classmethod
    def load(cls, path: str | os.PathLike | None = None) -> "Config":
        """Read a YAML config. A missing default file means all defaults."""
        p = Path(path or DEFAULT_CONFIG)
        if not p.exists():
            if path is not None and str(path) != DEFAULT_CONFIG:
                raise ConfigError(f"config file not found: {p}")
            return cls()
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read config {p}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config {p} must be a mapping")
        return cls.from_dict(data)

    def override(
        self,
        *,
        fix: Optional[bool] = None,
        verbose: Optional[bool] = None,
        recursive: Optional[bool] = None,
        tab_size: Optional[Any] = None,
        skip: Iterable[str] | None = None,
        extensions: Iterable[str] | None = None,
    ) -> "Config":
        """Apply command line values on top; ``None`` and empty lists keep the file value."""
        changes: Dict[str, Any] = {}
        if fix:
            changes["fix"] = True
        if verbose:
            changes["verbose"] = True
        if recursive:
            changes["recursive"] = True
        if tab_size is not None:
            changes["tab_size"] = check_tab_size(tab_size)
        if skip:
            changes["skip"] = self.skip | frozenset(split_names(skip))
        if extensions:
            # explicit extensions replace the defaults
            changes["extensions"] = frozenset(normalize_extensions(extensions))
        return replace(self, **changes)

    def should_skip_dir(self, name: str) -> bool:
        return name.startswith(".") or name in self.skip

    def is_source_extension(self, suffix: str) -> bool:
        return suffix in self.extensions
