# 简介：srcnorm 包初始化，声明版本并提供模块级说明。
"""srcnorm: detect and fix whitespace and encoding defects in source files.

This package exposes a CLI via `python -m srcnorm`.
"""

__all__ = [
    "__version__",
]

__version__ = "1.1.0"
