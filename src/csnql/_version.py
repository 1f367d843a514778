"""Installed csnql version."""

from importlib.metadata import PackageNotFoundError, version

_UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """Version of the installed csnql distribution."""
    try:
        return version("csnql")
    except PackageNotFoundError:
        return _UNKNOWN_VERSION


__version__ = get_version()
