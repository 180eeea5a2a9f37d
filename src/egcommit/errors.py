"""Exception classes raised by egcommit."""

from __future__ import annotations


class EGCommitError(Exception):
    """Base exception for all egcommit errors."""


class RandomnessError(EGCommitError):
    """The randomness source returned output that cannot be used."""

    def __init__(self, requested: int, received: object):
        self.requested = requested
        self.received = received
        super().__init__(
            f"randomness source returned {received!r} instead of {requested} bytes"
        )


class GroupMismatchError(EGCommitError, ValueError):
    """Operands belong to different groups."""


class KeyMismatchError(EGCommitError, ValueError):
    """Commitments under different bases were combined."""


class UnknownGroupError(EGCommitError, ValueError):
    """No instantiation is registered under the requested name."""
