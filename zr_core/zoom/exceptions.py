# zr_core/zoom/exceptions.py
from __future__ import annotations


class ZoomError(Exception):
    """Base class for failures talking to Zoom. Message is safe to store and show."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ZoomAuthError(ZoomError):
    """Token endpoint refused the credentials or could not be reached."""


class ZoomAPIError(ZoomError):
    """A meeting/webinar/registrant call failed after a token was obtained."""
