"""Shared fixtures: a throwaway Flutter project and a fake `flutter build` on PATH."""

import subprocess
from pathlib import Path

import pytest

from tests.helpers import PUBSPEC, RELEASE_FILES, write_release
from winpack import builder


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Flutter project with a pubspec and no build output yet."""
    proj = tmp_path / "woodbine"
    proj.mkdir()
    (proj / "pubspec.yaml").write_text(PUBSPEC, encoding="utf-8")
    return proj


@pytest.fixture
def fake_flutter(monkeypatch: pytest.MonkeyPatch):
    """
    Put a fake `flutter` on PATH. Its build writes RELEASE_FILES (or state["files"]);
    set state["returncode"] to simulate a failing build. Calls are recorded in state["calls"].
    """
    state = {"calls": [], "returncode": 0, "files": RELEASE_FILES}

    monkeypatch.delenv(builder.FLUTTER_ENV, raising=False)
    monkeypatch.setattr(builder.shutil, "which", lambda cmd: f"/opt/flutter/bin/{cmd}")

    def fake_run(cmd, cwd=None, check=False, **kwargs):
        state["calls"].append({"cmd": list(cmd), "cwd": Path(cwd)})
        if state["returncode"] != 0:
            if check:
                raise subprocess.CalledProcessError(state["returncode"], cmd)
        elif state["files"] is not None:
            write_release(Path(cwd), state["files"])
        return subprocess.CompletedProcess(cmd, state["returncode"])

    monkeypatch.setattr(builder.subprocess, "run", fake_run)
    return state
