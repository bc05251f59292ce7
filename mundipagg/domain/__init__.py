"""Domain layer."""
from mundipagg.domain.exceptions import (
    ApiErrorException,
    DomainException,
    EmptyResponseException,
    ResponseInvariantException,
    TransportFaultException,
)
from mundipagg.domain.models import (
    AuthMode,
    BaseResponse,
    ErrorsResponse,
    HttpMethod,
    ResponseOutcome,
)

__all__ = [
    # Models
    "AuthMode",
    "BaseResponse",
    "ErrorsResponse",
    "HttpMethod",
    "ResponseOutcome",
    # Exceptions
    "DomainException",
    "ApiErrorException",
    "TransportFaultException",
    "EmptyResponseException",
    "ResponseInvariantException",
]
