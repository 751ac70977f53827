"""Windows release packager for Flutter desktop apps: build, copy, zip."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("winpack")
except PackageNotFoundError:
    __version__ = "0.0.0+dev"
