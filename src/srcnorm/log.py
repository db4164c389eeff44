# 简介：日志封装。基于 loguru，统一输出到 stderr，级别由环境变量或 --verbose 决定。
from __future__ import annotations

import os
import sys

from loguru import logger


def setup_logging(verbose: bool = False) -> None:
    level = os.getenv("SRCNORM_LOG_LEVEL", "INFO").upper()
    if verbose:
        level = "DEBUG"

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | {message}",
    )


__all__ = ["logger", "setup_logging"]
