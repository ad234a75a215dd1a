import shutil
import tempfile
from pathlib import Path

import pytest

from compleat.command import Command
from compleat.main.example import build_command, build_registry
from compleat.parser import FlagType


@pytest.fixture
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    monkeypatch.setenv("HOME", str(temp_home))
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture
def example_root():
    return build_command()


@pytest.fixture
def example_registry(example_root):
    return build_registry(example_root)


@pytest.fixture
def flag_command():
    command = Command(name="flag", short="flag example")
    command.flags.add_flag("bool", "b", FlagType.BOOL, "bool flag")
    command.flags.add_flag("count", "c", FlagType.COUNT, "count flag")
    command.flags.add_flag("string", "s", FlagType.STRING, "string flag")
    command.flags.add_flag("slice", "l", FlagType.STRING_SLICE, "slice flag")
    command.flags.add_flag("legacy", "x", FlagType.BOOL, "legacy flag", deprecated="gone")
    command.flags.add_flag("secret", "z", FlagType.BOOL, "secret flag", hidden=True)
    return command


@pytest.fixture
def path_fixture(tmp_path, monkeypatch):
    """A small project tree; the working directory is moved into it."""
    (tmp_path / "README.md").write_text("readme\n")
    (tmp_path / "main.go").write_text("package main\n")
    (tmp_path / ".hidden").write_text("")
    for name in ("docs", "example", "internal", "pkg"):
        (tmp_path / name).mkdir()
    (tmp_path / "example" / "cmd").mkdir()
    (tmp_path / "example" / "guide.md").write_text("")
    monkeypatch.chdir(tmp_path)
    return tmp_path
