from __future__ import annotations


class TreeConcatError(RuntimeError):
    """Base class for errors that abort a whole run."""


class RootPathError(TreeConcatError):
    """The scan root is missing, not a directory, or cannot be listed."""


class OutputError(TreeConcatError):
    """The output destination cannot be created or written."""
