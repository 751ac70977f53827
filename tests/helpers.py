"""Builders for fake Flutter projects and tree comparisons."""

from pathlib import Path

from winpack import builder

PUBSPEC = """\
name: woodbine
description: A desktop app.
publish_to: 'none'

version: 1.4.0+12

environment:
  sdk: '>=3.0.0 <4.0.0'
"""

RELEASE_FILES = {
    "woodbine.exe": b"MZ\x90\x00fake-exe",
    "flutter_windows.dll": b"\x00dll" * 64,
    "data/app.so": b"\x7fELF" + bytes(range(256)),
    "data/icudtl.dat": b"icu" * 1000,
    "data/flutter_assets/AssetManifest.json": b'{"assets/logo.png": ["assets/logo.png"]}',
    "data/flutter_assets/assets/logo.png": b"\x89PNG\r\n\x1a\n",
}


def write_release(project: Path, files: dict[str, bytes] = RELEASE_FILES, arch: str = "x64") -> Path:
    """Lay out a Flutter Windows release bundle under project/build."""
    out = builder.release_dir(project, arch)
    for rel, data in files.items():
        p = out / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
    return out


def tree_contents(root: Path) -> dict[str, bytes]:
    """Relative posix path -> bytes for every file under root."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()}
