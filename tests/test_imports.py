from __future__ import annotations

import inspect

import srcnorm


def test_imports_from_src():
    path = inspect.getfile(srcnorm)
    assert "/src/srcnorm/" in path.replace("\\", "/"), f"imported from wrong path: {path}"


def test_version_declared():
    assert srcnorm.__version__.count(".") == 2
