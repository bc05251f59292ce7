"""Domain models for the Mundipagg API client."""
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mundipagg.domain.exceptions import (
    ApiErrorException,
    EmptyResponseException,
    ResponseInvariantException,
    TransportFaultException,
)

T = TypeVar("T")


class HttpMethod(str, Enum):
    """HTTP method enum."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """Accept the enum itself or a method name in any case."""
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


class AuthMode(str, Enum):
    """Which configured credential is sent as the basic-auth user."""

    SECRET_KEY = "sk"
    ACCOUNT_MANAGEMENT_KEY = "amk"
    TOKEN = "token"


class ResponseOutcome(str, Enum):
    """Tagged view of a response envelope."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    FAULT = "FAULT"
    EMPTY = "EMPTY"


class ErrorsResponse(BaseModel):
    """Error payload reported by the API."""

    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    request: Optional[Any] = None


class BaseResponse(BaseModel, Generic[T]):
    """Envelope returned for every request.

    At most one of ``data``, ``errors`` and ``exception`` is set. A failed
    call with an empty body sets none of them; ``outcome`` is then EMPTY and
    the caller has only ``status_code`` to go on.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: Optional[int] = None
    raw_request: Optional[str] = None
    raw_response: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[ErrorsResponse] = None
    exception: Optional[BaseException] = None
    elapsed_time: int = Field(default=0, ge=0)  # milliseconds

    @model_validator(mode="after")
    def check_single_outcome(self) -> "BaseResponse[T]":
        populated = [
            name
            for name in ("data", "errors", "exception")
            if getattr(self, name) is not None
        ]
        if len(populated) > 1:
            raise ResponseInvariantException(populated)
        return self

    @property
    def outcome(self) -> ResponseOutcome:
        if self.exception is not None:
            return ResponseOutcome.FAULT
        if self.data is not None:
            return ResponseOutcome.SUCCESS
        if self.errors is not None:
            return ResponseOutcome.ERROR
        return ResponseOutcome.EMPTY

    @property
    def is_success(self) -> bool:
        return self.outcome is ResponseOutcome.SUCCESS

    def raise_for_outcome(self) -> T:
        """Return ``data`` or raise the domain exception matching the outcome.

        A 2xx response with an empty body counts as success and returns None.
        """
        outcome = self.outcome
        if outcome is ResponseOutcome.SUCCESS:
            return self.data
        if outcome is ResponseOutcome.FAULT:
            raise TransportFaultException(self.exception)
        if outcome is ResponseOutcome.ERROR:
            raise ApiErrorException(self.status_code, self.errors)
        if self.status_code is not None and 200 <= self.status_code < 300:
            return None
        raise EmptyResponseException(self.status_code)
