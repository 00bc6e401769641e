"""String helpers for trimming, searching, extracting and splitting, in stringkit.strings."""

__version__ = "0.1.1"
__all__ = ["strings"]