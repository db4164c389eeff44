from __future__ import annotations

from pathlib import Path

from srcnorm.classifier import classify
from srcnorm.defects import Defect


def test_own_sources_have_no_whitespace_defects():
    root = Path(__file__).resolve().parents[1] / 'src'
    offenders = []
    for p in root.rglob('*.py'):
        found = classify(p.read_bytes()) & Defect.FIXABLE
        if found:
            offenders.append((p.name, found))
    assert not offenders, f"Whitespace defects found: {offenders}"
