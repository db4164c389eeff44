from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from .classifier import classify
from .config import Config
from .defects import Defect, Verdict, describe, is_fixable, verdict
from .errors import ReplaceError
from .fixer import fix
from .replace import AtomicReplacer
from .resolver import refine


@dataclass
class DefectReport:
    path: Path
    defects: Defect = Defect.NONE
    message: str = ""
    fixed: bool = False
    error: Optional[str] = None

    @property
    def verdict(self) -> Verdict:
        return verdict(self.defects)

    @property
    def fixable(self) -> bool:
        return is_fixable(self.defects)

    def line(self) -> str:
        return f"File: {self.path} has {self.message}"


def _stderr(line: str) -> None:
    print(line, file=sys.stderr)


class NormalizationSession:
    """Load one file, find its defects, report them and optionally fix them.

    Nothing raised while processing a file escapes ``normalize``; failures
    end up in the returned report.
    """

    def __init__(
        self,
        config: Config,
        *,
        emit: Callable[[str], None] = _stderr,
        replacer: Optional[AtomicReplacer] = None,
    ):
        self.config = config
        self.emit = emit
        self.replacer = replacer or AtomicReplacer()

    def load(self, path: Path) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def normalize(self, path: str | Path) -> DefectReport:
        report = DefectReport(Path(path))
        try:
            data = self.load(report.path)
        except OSError as e:
            logger.error("cannot read {}: {}", report.path, e)
            report.error = str(e)
            return report

        defects = classify(data)
        if not defects:
            return report

        defects = refine(defects, data, self.config.heuristics)
        report.defects = defects
        report.message = describe(defects)
        self.emit(report.line())

        if self.config.fix and is_fixable(defects):
            self._fix(report, data)
        return report

    def _fix(self, report: DefectReport, data: bytes) -> None:
        content = fix(data, self.config.tab_size)
        try:
            bak = self.replacer.replace(report.path, content)
        except ReplaceError as e:
            logger.error("fix failed for {} ({}): {}", e.path, e.stage, e)
            report.error = str(e)
            return
        report.fixed = True
        logger.info("fixed {} (backup {})", report.path, bak.name)
