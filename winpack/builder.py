"""Invoke the Flutter toolchain for a Windows release build."""

import os
import shutil
import subprocess
import sys
from pathlib import Path

from winpack.errors import BuildToolError

# Override the Flutter executable (e.g. C:\flutter\bin\flutter.bat)
FLUTTER_ENV = "WINPACK_FLUTTER"
DEFAULT_FLUTTER = "flutter"
DEFAULT_ARCH = "x64"


def get_flutter_command() -> str | None:
    """Return the Flutter command from env WINPACK_FLUTTER, or None if not set."""
    cmd = os.environ.get(FLUTTER_ENV, "").strip()
    return cmd or None


def resolve_flutter(command: str | None = None) -> str:
    """
    Resolve the Flutter executable: explicit command, then WINPACK_FLUTTER, then "flutter".
    Looked up on PATH so flutter.bat is found on Windows.
    """
    cmd = (command or "").strip() or get_flutter_command() or DEFAULT_FLUTTER
    found = shutil.which(cmd)
    if not found:
        raise BuildToolError(f"Flutter not found: {cmd!r} (install Flutter or set {FLUTTER_ENV})")
    return found


def build_command(flutter: str) -> list[str]:
    return [flutter, "build", "windows", "--release"]


def run_build(project_dir: Path, flutter: str | None = None) -> None:
    """Run `flutter build windows --release` in project_dir; output goes straight to the console."""
    cmd = build_command(resolve_flutter(flutter))
    print(f"  $ {' '.join(cmd)}", file=sys.stderr)
    try:
        subprocess.run(cmd, cwd=project_dir, check=True)
    except subprocess.CalledProcessError as e:
        raise BuildToolError(
            f"Flutter build failed with exit code {e.returncode}", returncode=e.returncode
        ) from e
    except OSError as e:
        raise BuildToolError(f"Could not run Flutter: {e}") from e


def release_dir(project_dir: Path, arch: str = DEFAULT_ARCH) -> Path:
    """Where Flutter writes the Windows release bundle."""
    return project_dir / "build" / "windows" / arch / "runner" / "Release"
