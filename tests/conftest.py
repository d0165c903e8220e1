import json
from pathlib import Path

import pytest

from patchgen import console
from patchgen.config import resolve_settings


def write_sample(path: Path, size: int) -> Path:
    path.write_bytes(b"\0" * size)
    return path


@pytest.fixture(autouse=True)
def quiet_console():
    console.set_verbose(False)
    yield
    console.set_verbose(False)


@pytest.fixture
def kick_dir(tmp_path):
    directory = tmp_path / "kick"
    directory.mkdir()
    write_sample(directory / "kick1.wav", 1000)
    write_sample(directory / "kick2.aiff", 2000)
    (directory / "readme.txt").write_text("not a sample", encoding="utf-8")
    return directory


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.json"
    path.write_text(json.dumps({"type": "drum", "regions": []}), encoding="utf-8")
    return path


@pytest.fixture
def make_settings(template_file):
    def _make(**overrides):
        overrides.setdefault("template", str(template_file))
        return resolve_settings(None, **overrides)
    return _make
