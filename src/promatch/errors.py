"""Exception types raised by the analysis pipeline and its collaborators."""

from __future__ import annotations


class PromatchError(Exception):
    """Base class for promatch errors."""


class InvalidAttributesError(PromatchError, ValueError):
    """The attributes payload is missing, not JSON, or fails validation."""


class SessionNotFoundError(PromatchError, KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"No session stored for id={self.session_id!r}"


class RosterConfigError(PromatchError):
    """The roster dataset is unreadable or its vectors have the wrong shape."""


class SessionPersistError(PromatchError):
    """A session record could not be written."""
