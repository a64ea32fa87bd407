"""semcheck - semantic version parsing and version-condition matching."""

__version__ = "0.1.0"
