"""Winpack CLI. Invoked as `winpack` when installed with pip install -e ."""

import argparse
import os
import sys
from pathlib import Path

from winpack import __version__
from winpack.builder import DEFAULT_ARCH, FLUTTER_ENV
from winpack.errors import WinpackError
from winpack.pipeline import ReleaseConfig, package_release
from winpack.storage import OUTPUT_STRUCTURE

# Display name for the deploy folder when the pubspec name is not what users should see
APP_NAME_ENV = "WINPACK_APP_NAME"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="winpack",
        description="Build a Flutter Windows release, copy it to a versioned deploy folder, and zip it.",
        epilog=f"Output: {OUTPUT_STRUCTURE}",
    )
    parser.add_argument("--project-dir", default=".", metavar="DIR", help="Flutter project directory (default: .)")
    parser.add_argument(
        "--app-name",
        default=None,
        metavar="NAME",
        help=f"Name used for the deploy folder and zip (default: {APP_NAME_ENV} or pubspec name, title-cased)",
    )
    parser.add_argument(
        "--exe-name",
        default=None,
        metavar="FILE",
        help="Executable expected in the release build (default: <pubspec name>.exe)",
    )
    parser.add_argument("--arch", default=DEFAULT_ARCH, help=f"Build architecture folder (default: {DEFAULT_ARCH})")
    parser.add_argument(
        "--deploy-dir",
        default=None,
        metavar="DIR",
        help="Where versioned folders and zips go (default: <project-dir>/deploy)",
    )
    parser.add_argument(
        "--flutter",
        default=None,
        metavar="CMD",
        help=f"Flutter executable (default: {FLUTTER_ENV} or flutter on PATH)",
    )
    parser.add_argument(
        "--skip-build",
        action="store_true",
        help="Package the existing release build without running Flutter.",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars (e.g. for CI logs)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ReleaseConfig:
    app_name = (args.app_name or os.environ.get(APP_NAME_ENV, "")).strip() or None
    return ReleaseConfig(
        project_dir=Path(args.project_dir),
        app_name=app_name,
        exe_name=args.exe_name,
        arch=args.arch,
        deploy_dir=Path(args.deploy_dir) if args.deploy_dir else None,
        flutter=args.flutter,
        skip_build=args.skip_build,
        progress=not args.no_progress,
    )


def main(argv: list[str] | None = None) -> int:
    # cp1252 consoles cannot print the status marks
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    print("Starting Windows build...", file=sys.stderr)
    try:
        result = package_release(config)
    except WinpackError as e:
        print(f"\n✗ Build failed: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    print("\n✓ Build complete!")
    print(f"  Deploy folder: {result.deploy_dir}")
    print(f"  Zip file: {result.zip_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
