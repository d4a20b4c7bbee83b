"""Release Signing - Fail-fast release signing configuration for app modules."""

try:
    from release_signing._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]
