"""Release pipeline: version -> build -> verify -> copy -> zip. Used by CLI and programmatic callers."""

import sys
from dataclasses import dataclass
from pathlib import Path

from winpack.archive import create_zip, remove_archive
from winpack.builder import DEFAULT_ARCH, release_dir, run_build
from winpack.errors import ConfigError
from winpack.manifest import display_name, manifest_path, read_app_name, read_version
from winpack.storage import (
    DEPLOY_DIR_NAME,
    copy_tree,
    deploy_paths,
    ensure_dir,
    find_executable,
    remove_tree,
)


@dataclass
class ReleaseConfig:
    project_dir: Path
    app_name: str | None = None  # default: pubspec name, title-cased
    exe_name: str | None = None  # default: pubspec name + ".exe"
    arch: str = DEFAULT_ARCH
    deploy_dir: Path | None = None  # default: <project_dir>/deploy
    flutter: str | None = None
    skip_build: bool = False
    progress: bool = True


@dataclass
class ReleaseResult:
    version: str
    deploy_dir: Path
    zip_path: Path
    zip_bytes: int
    file_count: int


def _log(msg: str) -> None:
    print(msg, file=sys.stderr)


def _resolve_names(config: ReleaseConfig, pubspec: Path) -> tuple[str, str]:
    """(app display name, executable file name); pubspec is only read if one is missing."""
    app_name, exe_name = config.app_name, config.exe_name
    if not app_name or not exe_name:
        package = read_app_name(pubspec)
        if not package:
            raise ConfigError(f"Could not find name in {pubspec.name}; pass --app-name and --exe-name")
        app_name = app_name or display_name(package)
        exe_name = exe_name or f"{package}.exe"
    return app_name, exe_name


def package_release(config: ReleaseConfig) -> ReleaseResult:
    """
    Run the whole release sequence. Every step either completes or raises a WinpackError;
    work already written by earlier steps is left on disk.
    """
    project_dir = config.project_dir.resolve()
    pubspec = manifest_path(project_dir)

    version = read_version(pubspec)
    _log(f"Version: {version}")
    app_name, exe_name = _resolve_names(config, pubspec)

    if config.skip_build:
        _log("\nSkipping Flutter build (--skip-build)")
    else:
        _log("\nBuilding Flutter Windows app...")
        run_build(project_dir, config.flutter)

    build_dir = release_dir(project_dir, config.arch)
    deploy_root = config.deploy_dir.resolve() if config.deploy_dir else project_dir / DEPLOY_DIR_NAME
    target_dir, zip_path = deploy_paths(deploy_root, app_name, version)

    exe = find_executable(build_dir, exe_name)
    _log(f"\nExecutable found: {exe}")

    ensure_dir(deploy_root)
    if target_dir.exists():
        _log(f"\nRemoving existing directory: {target_dir}")
        remove_tree(target_dir)

    _log(f"\nCopying build output to: {target_dir}")
    file_count = copy_tree(build_dir, target_dir, progress=config.progress)
    _log(f"  Copied {file_count} files")

    if zip_path.exists():
        _log(f"\nRemoving existing zip: {zip_path}")
        remove_archive(zip_path)

    _log("\nCreating zip archive...")
    zip_bytes = create_zip(target_dir, zip_path, progress=config.progress)
    _log(f"Created zip: {zip_path} ({zip_bytes} bytes)")

    return ReleaseResult(
        version=version,
        deploy_dir=target_dir,
        zip_path=zip_path,
        zip_bytes=zip_bytes,
        file_count=file_count,
    )
