from __future__ import annotations

from pathlib import Path

from srcnorm.config import Config
from srcnorm.scanner import FileScanner
from srcnorm.session import NormalizationSession


def make_tree(root: Path) -> None:
    for rel in ["a.c", "notes.txt", "sub/b.h", "sub/deep/c.cpp", ".hidden/d.c", "build/e.c"]:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(b"x \n")


def scan(cfg: Config, *args):
    lines = []
    scanner = FileScanner(cfg, NormalizationSession(cfg, emit=lines.append))
    results = [scanner.process(a) for a in args]
    seen = sorted(r.path.name for r in scanner.reports)
    return results, seen, lines


def test_directory_without_recursion(tmp_path):
    make_tree(tmp_path)
    ok, seen, lines = scan(Config(), tmp_path)
    assert ok == [True]
    assert seen == ["a.c"]
    assert len(lines) == 1


def test_recursive_skips_dot_and_named_dirs(tmp_path):
    make_tree(tmp_path)
    _, seen, _ = scan(Config(recursive=True, skip=frozenset({"build"})), tmp_path)
    assert seen == ["a.c", "b.h", "c.cpp"]


def test_extensions_select_files(tmp_path):
    make_tree(tmp_path)
    cfg = Config(recursive=True, extensions=frozenset({".txt"}))
    _, seen, _ = scan(cfg, tmp_path)
    assert seen == ["notes.txt"]


def test_plain_file_ignores_extension(tmp_path):
    make_tree(tmp_path)
    _, seen, _ = scan(Config(), tmp_path / "notes.txt")
    assert seen == ["notes.txt"]


def test_missing_path_fails(tmp_path):
    ok, seen, _ = scan(Config(), tmp_path / "nowhere")
    assert ok == [False]
    assert seen == []


def test_reports_use_canonical_paths(tmp_path):
    make_tree(tmp_path)
    _, _, lines = scan(Config(), tmp_path / "sub" / ".." / "a.c")
    assert lines == [f"File: {(tmp_path / 'a.c').resolve()} has Trailing whitespace"]


def test_symlinked_file_is_fixed_through_its_target(tmp_path):
    real = tmp_path / "real"
    src = tmp_path / "src"
    real.mkdir()
    src.mkdir()
    target = real / "a.c"
    target.write_bytes(b"x \n")
    link = src / "link.c"
    link.symlink_to(target)

    cfg = Config(fix=True)
    lines = []
    scanner = FileScanner(cfg, NormalizationSession(cfg, emit=lines.append))
    assert scanner.process(src)
    assert [r.path for r in scanner.reports] == [target.resolve()]
    assert link.is_symlink()
    assert target.read_bytes() == b"x\n"
    assert lines == [f"File: {target.resolve()} has Trailing whitespace"]
