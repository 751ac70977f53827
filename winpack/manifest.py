"""Read the release version (and app name) from a Flutter pubspec.yaml."""

import re
from pathlib import Path

from winpack.errors import ConfigError

MANIFEST_NAME = "pubspec.yaml"

# Whole first top-level "version:" line; "." never crosses the line break.
_VERSION_RE = re.compile(r"^version:(.*)$", re.MULTILINE)
_COMMENT_RE = re.compile(r"(?:^|\s)#.*$")
_NAME_RE = re.compile(r"^name:[ \t]*(\S+)", re.MULTILINE)


def manifest_path(project_dir: Path) -> Path:
    """Path of the pubspec inside a project directory."""
    return project_dir / MANIFEST_NAME


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read {path.name}: {e}") from e


def _unquote(value: str) -> str:
    return value.strip().strip("\"'").strip()


def parse_version(text: str, source: str = MANIFEST_NAME) -> str:
    """
    Return the version token from pubspec text: "2.3.1+45" -> "2.3.1".
    Raises ConfigError if no version line is found or its value is empty.
    """
    m = _VERSION_RE.search(text)
    value = _COMMENT_RE.sub("", m.group(1)) if m else ""
    # a quoted "2.3.1+45" is cut before its closing quote
    token = _unquote(value.split("+", 1)[0])
    if not token:
        raise ConfigError(f"Could not find version in {source}")
    return token


def read_version(path: Path) -> str:
    """Read the manifest at path and return its version token."""
    return parse_version(_read(path), path.name)


def read_app_name(path: Path) -> str | None:
    """Top-level pubspec `name:` (Flutter's default binary name), or None if absent."""
    m = _NAME_RE.search(_read(path))
    if not m:
        return None
    return _unquote(m.group(1)) or None


def display_name(package_name: str) -> str:
    """Title-case a Dart package name for folder names: my_app -> My App."""
    words = [w for w in re.split(r"[_\-\s]+", package_name) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words) or package_name
