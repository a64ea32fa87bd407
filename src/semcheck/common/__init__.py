"""Shared helpers used by the CLI and the versioning package."""
