# 简介：统一异常类型定义。配置错误与修复阶段的文件替换错误，
# 由会话层捕获并写入报告，不会逃逸出公开操作。
from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional


ReplaceStage = Literal["write", "backup", "install"]


class NormalizerError(Exception):
    pass


class ConfigError(NormalizerError):
    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ReplaceError(NormalizerError):
    """A step of the backup-then-rename sequence failed.

    ``stage`` tells how far the sequence got:

    - ``write``: the temporary file could not be written; the original is untouched.
    - ``backup``: the original could not be renamed to the backup name; the
      original is untouched and the temporary file has been removed.
    - ``install``: the original is already renamed to the backup name but the
      temporary file could not take its place. Both siblings are left on disk.
    """

    def __init__(self, stage: ReplaceStage, path: Path, *, temp_path: Path, backup_path: Path, cause: OSError | None = None):
        if stage == "write":
            msg = f"cannot write {temp_path}"
        elif stage == "backup":
            msg = f"cannot rename {path} to {backup_path}"
        else:
            msg = f"cannot rename {temp_path} to {path} (original kept as {backup_path})"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
        self.stage = stage
        self.path = path
        self.temp_path = temp_path
        self.backup_path = backup_path
        self.cause = cause
