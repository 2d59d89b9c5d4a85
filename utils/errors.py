"""Error kinds raised by the tracker core.

ValidationError is raised before any remote call is made. TransportError and
its subclasses come from the HTTP layer; when one propagates out of a service
call the in-memory state has not been touched.
"""


class TrackerError(Exception):
    """Base class for every error the UI reports to the user."""


class ValidationError(TrackerError, ValueError):
    pass


class TransportError(TrackerError):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class NotFoundOrUnauthorized(TransportError):
    """Update/delete target is missing or belongs to someone else."""


class NotAuthenticated(TransportError):
    """The session cookie is missing or expired (HTTP 401)."""
