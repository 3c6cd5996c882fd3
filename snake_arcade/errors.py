from __future__ import annotations


class SnakeArcadeError(Exception):
    """Base class for errors raised by snake_arcade."""


class BoardFullError(SnakeArcadeError):
    """No free cell is left to place food on."""


class StorageUnavailableError(SnakeArcadeError):
    """The high-score store could not be read or written."""


class ReplayError(SnakeArcadeError, ValueError):
    """A replay file is malformed."""
