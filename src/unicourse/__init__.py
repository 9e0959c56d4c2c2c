"""UniCourse - In-memory university course registry with a command interpreter."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version string."""
    return __version__
