from __future__ import annotations


class BgrunError(Exception):
    """Base class for errors raised by bgrun itself (never by the user command)."""


class DetachError(BgrunError):
    """The process could not be split off from the invoking terminal."""


class JobAlreadyCompleted(BgrunError):
    """A job result was published more than once."""
