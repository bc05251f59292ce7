"""Mundipagg API client."""
from mundipagg.config import Settings, settings
from mundipagg.domain import (
    ApiErrorException,
    AuthMode,
    BaseResponse,
    DomainException,
    EmptyResponseException,
    ErrorsResponse,
    HttpMethod,
    ResponseInvariantException,
    ResponseOutcome,
    TransportFaultException,
)
from mundipagg.infrastructure import HttpClientUtil, HttpxClientUtil, JsonRedactor, configure_logging

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "settings",
    "AuthMode",
    "BaseResponse",
    "ErrorsResponse",
    "HttpMethod",
    "ResponseOutcome",
    "DomainException",
    "ApiErrorException",
    "TransportFaultException",
    "EmptyResponseException",
    "ResponseInvariantException",
    "HttpClientUtil",
    "HttpxClientUtil",
    "JsonRedactor",
    "configure_logging",
]
