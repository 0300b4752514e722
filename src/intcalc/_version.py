"""Single source of truth for the intcalc version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Installed distribution version, or 0.0.0 when running from a bare checkout."""
    try:
        return version("intcalc")
    except PackageNotFoundError:
        return "0.0.0"
