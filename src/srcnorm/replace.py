# 简介：文件原子替换。先写临时文件，再把原文件改名为备份，最后把临时文件改名为原文件；
# 第二次改名失败时保留备份与临时文件，由调用方报告。
from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable

from loguru import logger

from .errors import ReplaceError


BACKUP_SUFFIX = ".bak~"
TEMP_SUFFIX = ".tmp~"


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def temp_path(path: Path) -> Path:
    return path.with_name(path.name + TEMP_SUFFIX)


class AtomicReplacer:
    """Substitute new content for a file, keeping the old one as ``<name>.bak~``.

    The filesystem calls are attributes so a test can make any step fail.
    """

    def __init__(
        self,
        rename: Callable[[Path, Path], None] = os.rename,
        remove: Callable[[Path], None] = os.remove,
    ):
        self.rename = rename
        self.remove = remove

    def _write_temp(self, path: Path, tmp: Path, content: bytes) -> None:
        with open(tmp, "wb") as f:
            f.write(content)
        # keep executable bits and the like
        shutil.copymode(path, tmp)

    def _discard(self, tmp: Path) -> None:
        try:
            self.remove(tmp)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("cannot remove {}: {}", tmp, e)

    def replace(self, path: Path, content: bytes) -> Path:
        """Install ``content`` at ``path``; returns the backup path.

        Raises ReplaceError; see its ``stage`` for what is left on disk.
        """
        path = Path(path)
        tmp = temp_path(path)
        bak = backup_path(path)

        try:
            self._write_temp(path, tmp, content)
        except OSError as e:
            self._discard(tmp)
            raise ReplaceError("write", path, temp_path=tmp, backup_path=bak, cause=e) from e

        try:
            if bak.exists():
                self.remove(bak)
            self.rename(path, bak)
        except OSError as e:
            self._discard(tmp)
            raise ReplaceError("backup", path, temp_path=tmp, backup_path=bak, cause=e) from e

        # Only reached with the original safely stored as the backup
        try:
            self.rename(tmp, path)
        except OSError as e:
            raise ReplaceError("install", path, temp_path=tmp, backup_path=bak, cause=e) from e

        return bak
