"""Domain exceptions for the Mundipagg API client."""
from typing import Any, Optional


class DomainException(Exception):
    """Base domain exception."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ApiErrorException(DomainException):
    """API answered with an unsuccessful status and an error body."""

    def __init__(self, status_code: Optional[int], errors: Any) -> None:
        self.status_code = status_code
        self.errors = errors
        detail = getattr(errors, "message", None) or "request failed"
        super().__init__(
            message=f"Mundipagg API returned {status_code}: {detail}",
            code="API_ERROR",
        )


class TransportFaultException(DomainException):
    """Request could not be completed (connection error, timeout, bad body)."""

    def __init__(self, fault: BaseException) -> None:
        self.fault = fault
        super().__init__(
            message=f"Request to Mundipagg API failed: {fault!r}",
            code="TRANSPORT_FAULT",
        )


class EmptyResponseException(DomainException):
    """Unsuccessful status without a body to explain it."""

    def __init__(self, status_code: Optional[int]) -> None:
        self.status_code = status_code
        super().__init__(
            message=f"Mundipagg API returned {status_code} with an empty body",
            code="EMPTY_RESPONSE",
        )


class ResponseInvariantException(DomainException):
    """Envelope populated with more than one of data, errors and exception."""

    def __init__(self, populated: list) -> None:
        super().__init__(
            message=f"Response envelope has conflicting fields: {', '.join(populated)}",
            code="RESPONSE_INVARIANT",
        )
