from pathlib import Path

from luna import paths


def test_luna_dir_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert paths.luna_dir() == tmp_path / ".luna"


def test_luna_dir_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert paths.luna_dir() == Path("/") / ".luna"


def test_files_live_inside_luna_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    root = paths.luna_dir()
    assert paths.history_file() == root / ".luna_history"
    assert paths.config_file() == root / "config.toml"
    assert paths.themes_dir() == root / "themes"
    assert paths.plugins_dir() == root / "plugins"


def test_paths_follow_home_changes(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path / "a"))
    first = paths.config_file()
    monkeypatch.setenv("HOME", str(tmp_path / "b"))
    second = paths.config_file()
    assert first.parent.parent == tmp_path / "a"
    assert second.parent.parent == tmp_path / "b"