"""genproc - Go net message handler generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("genproc")
except PackageNotFoundError:
    __version__ = "(local)"
