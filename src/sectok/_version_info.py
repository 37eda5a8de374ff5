"""Version information for the sectok package."""

from importlib import metadata as _md

try:
    __version__ = _md.version("sectok")
except _md.PackageNotFoundError:
    __version__ = "unknown"
