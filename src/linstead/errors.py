"""Exception hierarchy for linstead."""

from __future__ import annotations


class LinsteadError(Exception):
    """Base class for all linstead errors."""


class SurfaceInitError(LinsteadError):
    """The rendering backend could not be created in this environment."""


class StructureLoadError(LinsteadError):
    """A remote structure could not be fetched or parsed.

    Attributes:
        locator: The locator that was being fetched.
        cause: The underlying exception, if any.
    """

    def __init__(self, locator: str, cause: BaseException | None = None) -> None:
        self.locator = locator
        self.cause = cause
        message = f"failed to load structure from {locator!r}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class InvalidRecipeError(LinsteadError, ValueError):
    """A procedural recipe (LevelProfile) holds invalid counts."""


class ViewerStateError(LinsteadError, RuntimeError):
    """A viewer session operation was called in an invalid state."""
