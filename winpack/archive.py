"""Zip the deploy folder (folder name as the top-level entry, max deflate level)."""

import sys
import zipfile
from pathlib import Path

from tqdm import tqdm

from winpack.errors import ArchiveError, FilesystemError

COMPRESS_LEVEL = 9


def remove_archive(zip_path: Path) -> bool:
    """Delete a previous zip at zip_path. True if one was removed."""
    if not zip_path.exists():
        return False
    try:
        zip_path.unlink()
    except OSError as e:
        raise FilesystemError(f"Could not remove {zip_path}: {e}") from e
    return True


def create_zip(source_dir: Path, zip_path: Path, progress: bool = False) -> int:
    """
    Write source_dir into a new zip at zip_path and return the finished file's size in bytes.

    Entries are stored as "<source_dir.name>/...". Directory entries are included so empty
    folders survive extraction. The archive is closed before the size is read; a partially
    written file is left in place if anything fails.
    """
    if not source_dir.is_dir():
        raise ArchiveError(f"Missing {source_dir}")
    try:
        entries = sorted(source_dir.rglob("*"))
        bar = tqdm(
            total=sum(1 for p in entries if p.is_file()),
            unit="file",
            desc="Zip",
            disable=not progress,
            file=sys.stderr,
        )
        try:
            with zipfile.ZipFile(
                zip_path, "w", zipfile.ZIP_DEFLATED, compresslevel=COMPRESS_LEVEL
            ) as zf:
                zf.write(source_dir, source_dir.name)
                for f in entries:
                    zf.write(f, f.relative_to(source_dir.parent))
                    if f.is_file():
                        bar.update(1)
        finally:
            bar.close()
        return zip_path.stat().st_size
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveError(f"Could not create {zip_path}: {e}") from e
