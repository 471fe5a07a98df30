import pathlib

import pytest


def inside_git_repository(path):
    path = pathlib.Path(path).resolve()
    return any((p / ".git").is_dir() for p in [path, *path.parents])


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home


@pytest.fixture
def outside(tmp_path):
    if inside_git_repository(tmp_path):
        pytest.skip("temporary directory is inside a git repository")
    path = tmp_path / "outside"
    path.mkdir()
    return path


@pytest.fixture
def repo(tmp_path, home):
    if inside_git_repository(tmp_path):
        pytest.skip("temporary directory is inside a git repository")
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


def _write_config(path, text):
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def write_config():
    return _write_config
