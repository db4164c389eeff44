from __future__ import annotations

import pytest

from srcnorm.config import Config, Heuristics
from srcnorm.errors import ConfigError


def test_defaults():
    cfg = Config()
    assert cfg.tab_size == 4
    assert not cfg.fix and not cfg.recursive
    assert cfg.extensions == {".c", ".cc", ".cpp", ".h", ".hpp"}
    assert cfg.heuristics == Heuristics()
    assert cfg.heuristics.elf_min_size == 50


def test_missing_default_file_means_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Config.load() == Config()


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        Config.load(tmp_path / "nope.yaml")


def test_load_yaml(tmp_path):
    p = tmp_path / "srcnorm.yaml"
    p.write_text(
        "tab_size: 8\n"
        "recursive: true\n"
        "skip: build, bin\n"
        "extensions: [py, .pyi]\n"
        "heuristics:\n"
        "  max_weird_ratio: 0.5\n"
        "  min_sample_size: '100'\n",
        encoding="utf-8",
    )
    cfg = Config.load(p)
    assert cfg.tab_size == 8
    assert cfg.recursive
    assert cfg.skip == {"build", "bin"}
    assert cfg.extensions == {".py", ".pyi"}
    assert cfg.heuristics.max_weird_ratio == 0.5
    assert cfg.heuristics.min_sample_size == 100
    assert cfg.heuristics.elf_min_size == 50


def test_unknown_keys_rejected(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("tabs: 4\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config.load(p)
    with pytest.raises(ConfigError):
        Config.from_dict({"heuristics": {"magic": 1}})


@pytest.mark.parametrize("size", [0, -1, 101, "four"])
def test_strange_tab_size(size):
    with pytest.raises(ConfigError):
        Config.from_dict({"tab_size": size})
    with pytest.raises(ConfigError):
        Config().override(tab_size=size)


def test_override():
    base = Config(skip=frozenset({"build"}))
    cfg = base.override(fix=True, tab_size="2", skip=["bin,obj"], extensions=["c", "txt"])
    assert cfg.fix
    assert cfg.tab_size == 2
    assert cfg.skip == {"build", "bin", "obj"}
    assert cfg.extensions == {".c", ".txt"}
    # untouched values stay
    assert base.override() == base


def test_dir_skipping():
    cfg = Config(skip=frozenset({"build"}))
    assert cfg.should_skip_dir(".git")
    assert cfg.should_skip_dir("build")
    assert not cfg.should_skip_dir("src")


@pytest.mark.parametrize("key", ["fix", "verbose", "recursive"])
@pytest.mark.parametrize("value", ['"false"', "'yes'", "1", "[true]"])
def test_switches_must_be_real_booleans(tmp_path, key, value):
    p = tmp_path / "c.yaml"
    p.write_text(f"{key}: {value}\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config.load(p)


def test_switches_accept_yaml_booleans(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("fix: false\nverbose: true\nrecursive:\n", encoding="utf-8")
    cfg = Config.load(p)
    assert cfg.fix is False
    assert cfg.verbose is True
    assert cfg.recursive is False


def test_byte_order_sample_size_default():
    from srcnorm.utf16 import MAX_UNITS_TO_EXAMINE

    assert Heuristics().max_units_to_examine == MAX_UNITS_TO_EXAMINE
