"""Single source of truth for the SEQDIAG version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Installed package version, or 0.0.0 for an uninstalled source tree."""
    try:
        return version("seqdiag")
    except PackageNotFoundError:
        return "0.0.0"
