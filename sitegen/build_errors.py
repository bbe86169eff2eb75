"""Exceptions that abort a whole site build."""


class FatalBuildError(Exception):
    """Raised when the build cannot continue (unlistable directory, missing template)."""
