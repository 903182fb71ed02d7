"""Error taxonomy for the hybrid data layer."""

from __future__ import annotations


class WayfindError(Exception):
    """Base class for data layer errors."""


class RemoteUnavailableError(WayfindError):
    """The remote API could not satisfy a request.

    Covers network failures, timeouts, non-2xx responses and bodies that are
    not valid JSON. The underlying exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body


class LocalStoreError(WayfindError):
    """A local store query or write failed."""


class TotalWriteFailureError(WayfindError):
    """Both the remote API and the local store rejected a write."""

    def __init__(self, message: str, *, remote_error: Exception, local_error: Exception) -> None:
        super().__init__(message)
        self.remote_error = remote_error
        self.local_error = local_error


class AuthenticationError(WayfindError):
    """Unknown username or wrong password."""
