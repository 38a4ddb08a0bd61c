"""Exceptions raised by the movie pipeline."""
from __future__ import annotations

__all__ = ["MovieError", "PreconditionError"]


class MovieError(RuntimeError):
    """Base class for movie pipeline failures."""


class PreconditionError(MovieError):
    """A file or folder required before launching an external tool is missing."""
