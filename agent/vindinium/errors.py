"""Exceptions raised inside the client, each tied to a Status."""

from __future__ import annotations

from vindinium.models import Status


class VindiniumError(Exception):
    """Base error carrying the Status reported at the session boundary."""

    status = Status.FAILURE

    def __init__(self, message: str, status: Status | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class TransportFailureError(VindiniumError):
    """Connection, protocol or aborted-transfer failure."""

    status = Status.TRANSPORT_FAILURE


class BufferTooSmallError(VindiniumError):
    """A bounded buffer would overflow."""

    status = Status.BUFFER_TOO_SMALL


class AllocationError(VindiniumError):
    """The receive buffer could not grow to the requested size."""

    status = Status.ALLOCATION_FAILURE


class MalformedRequestError(VindiniumError):
    """Server answered with a status other than 200."""

    status = Status.MALFORMED_REQUEST

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status {status_code}")
        self.status_code = status_code


class ParseError(VindiniumError):
    """Response body was not a usable training document."""

    status = Status.FAILURE
