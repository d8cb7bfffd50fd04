"""Application version module."""

__version__ = '0.1.0'


def get_version() -> str:
    """Get the application version string (e.g. '0.1.0')."""
    return __version__
