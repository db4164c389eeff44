from __future__ import annotations

import os
from pathlib import Path
from typing import List

from loguru import logger

from .config import Config
from .session import DefectReport, NormalizationSession


class FileScanner:
    """Turn command line paths into files for the session.

    A plain file is always examined. In a directory only files with a
    source extension are examined, and subdirectories are entered only in
    recursive mode.
    """

    def __init__(self, config: Config, session: NormalizationSession):
        self.config = config
        self.session = session
        self.reports: List[DefectReport] = []

    def process(self, arg: str | os.PathLike) -> bool:
        """Returns False if the path could not be resolved."""
        try:
            path = Path(arg).resolve(strict=True)
        except OSError as e:
            logger.error("{}: {}", arg, e)
            return False

        if path.is_dir():
            self._scan(path)
        elif path.is_file():
            logger.debug("examine {}", path)
            self._examine(path)
        else:
            logger.debug("skip {}", path)
        return True

    def _examine(self, path: Path) -> None:
        self.reports.append(self.session.normalize(path))

    def _scan(self, root: Path) -> None:
        def onerror(e: OSError) -> None:
            logger.warning("cannot list {}: {}", e.filename, e)

        for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
            keep = []
            for name in sorted(dirnames):
                sub = Path(dirpath) / name
                if self.config.recursive and not self.config.should_skip_dir(name):
                    logger.debug("enter {}", sub)
                    keep.append(name)
                else:
                    logger.debug("skip {}", sub)
            # prune in place so os.walk doesn't descend
            dirnames[:] = keep

            for name in sorted(filenames):
                p = Path(dirpath) / name
                if not p.is_file():
                    continue
                select = self.config.is_source_extension(p.suffix)
                logger.debug("{} {}", "examine" if select else "skip", p)
                if select:
                    # a symlink is reported and fixed as its target
                    self._examine(p.resolve())
