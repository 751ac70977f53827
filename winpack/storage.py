"""Deploy folder paths, artifact check, and recursive copy of the release bundle."""

import shutil
import sys
from pathlib import Path

from tqdm import tqdm

from winpack.errors import ArtifactMissingError, FilesystemError

DEPLOY_DIR_NAME = "deploy"
OUTPUT_STRUCTURE = "deploy/<AppName> v<version>/ and deploy/<AppName> v<version>.zip"


def app_folder_name(app_name: str, version: str) -> str:
    """Versioned folder name, e.g. "Woodbine v1.4.0"."""
    return f"{app_name} v{version}"


def deploy_paths(deploy_root: Path, app_name: str, version: str) -> tuple[Path, Path]:
    """Return (target_dir, zip_path) for this release."""
    folder = app_folder_name(app_name, version)
    return deploy_root / folder, deploy_root / f"{folder}.zip"


def find_executable(build_dir: Path, exe_name: str) -> Path:
    """Return the built executable; raise ArtifactMissingError if it is not there."""
    exe = build_dir / exe_name
    if not exe.is_file():
        raise ArtifactMissingError(exe)
    return exe


def ensure_dir(path: Path) -> None:
    """Create path (and parents) if absent."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Could not create {path}: {e}") from e


def remove_tree(path: Path) -> bool:
    """Delete an existing directory with everything in it. True if something was removed."""
    if not path.exists():
        return False
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Could not remove {path}: {e}") from e
    return True


def copy_tree(src: Path, dest: Path, progress: bool = False) -> int:
    """
    Recursively copy src into dest, creating directories as encountered and copying
    files byte-for-byte. Returns the number of files copied. Nothing is rolled back
    on failure.
    """
    try:
        entries = sorted(src.rglob("*"))
    except OSError as e:
        raise FilesystemError(f"Could not read {src}: {e}") from e
    ensure_dir(dest)
    files = 0
    bar = tqdm(
        total=sum(1 for p in entries if p.is_file()),
        unit="file",
        desc="Copy",
        disable=not progress,
        file=sys.stderr,
    )
    try:
        for path in entries:
            target = dest / path.relative_to(src)
            try:
                if path.is_dir():
                    target.mkdir(parents=True, exist_ok=True)
                else:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(path, target)
                    files += 1
                    bar.update(1)
            except OSError as e:
                raise FilesystemError(f"Could not copy {path} -> {target}: {e}") from e
    finally:
        bar.close()
    return files
