"""HTTP client utility for the Mundipagg API."""
import time
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Dict, Mapping, Optional, Type, Union

import httpx
import structlog

from mundipagg.config import Settings, settings
from mundipagg.domain.models import AuthMode, BaseResponse, ErrorsResponse, HttpMethod
from mundipagg.infrastructure import json_codec
from mundipagg.infrastructure.redaction import JsonRedactor

logger = structlog.get_logger(__name__)


class HttpClientUtil(ABC):
    """Abstract HTTP client utility interface."""

    @abstractmethod
    def send_request(
        self,
        http_method: Union[HttpMethod, str],
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        """Send a request and map the outcome into a response envelope."""
        pass


class HttpxClientUtil(HttpClientUtil):
    """Synchronous dispatcher built on ``httpx.Client``.

    Nothing is raised for network faults or API errors; both end up in the
    returned ``BaseResponse``. Each call builds its own client, so one
    instance can be used from several threads at once.
    """

    def __init__(
        self,
        configuration: Settings = settings,
        transport: Optional[httpx.BaseTransport] = None,
        redactor: Optional[JsonRedactor] = None,
    ):
        self.configuration = configuration
        self.transport = transport
        self.redactor = redactor or JsonRedactor()

    def get_basic_user(self, auth_mode: Optional[str]) -> str:
        """Credential used as the basic-auth user for ``auth_mode``."""
        if auth_mode is None:
            return self.configuration.secret_key

        try:
            mode = AuthMode(auth_mode)
        except ValueError:
            self.get_logger().warning("unknown_auth_mode", auth_mode=auth_mode, fallback="sk")
            return self.configuration.secret_key

        if mode is AuthMode.ACCOUNT_MANAGEMENT_KEY:
            return self.configuration.account_management_key
        if mode is AuthMode.TOKEN:
            return self.configuration.mp_token
        return self.configuration.secret_key

    def get_full_uri(
        self, endpoint: str, query: Optional[Mapping[str, Optional[str]]] = None
    ) -> str:
        """Base URL plus endpoint, with non-blank ``query`` values merged in."""
        full_uri = self.configuration.api_url.rstrip("/\\") + endpoint

        if query:
            url = httpx.URL(full_uri)
            for key, value in query.items():
                if value is None or not str(value).strip():
                    continue
                url = url.copy_set_param(key, value)
            full_uri = str(url)

        return full_uri

    def get_logger(self) -> Any:
        """Logger carrying the correlation identifiers."""
        return logger.bind(
            request_key=self.configuration.request_key,
            account_id=self.configuration.merchant_id,
            merchant_id=self.configuration.merchant_id,
        )

    def get_client(self, log: Any = None) -> httpx.Client:
        """Fresh client for a single call."""
        log = log or self.get_logger()
        return httpx.Client(
            base_url=self.configuration.api_url,
            timeout=self.configuration.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.configuration.user_agent},
            transport=self.transport,
            event_hooks={
                "request": [partial(self._log_request, log)],
                "response": [partial(self._log_response, log)],
            },
        )

    def send_request(
        self,
        http_method: Union[HttpMethod, str],
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        """Send a request and return the populated envelope.

        ``body`` is ignored for GET. ``response_type`` is what a successful
        body is validated into; error bodies always become ``ErrorsResponse``.
        """
        started = time.perf_counter()
        fields: Dict[str, Any] = {}

        full_uri = self.get_full_uri(endpoint, query)
        method = HttpMethod.parse(http_method)
        log = self.get_logger()

        request_headers = httpx.Headers(dict(headers or {}))
        content: Optional[bytes] = None
        if body is not None and method is not HttpMethod.GET:
            fields["raw_request"] = json_codec.encode(body)
            content = fields["raw_request"].encode("utf-8")
            request_headers.setdefault("Content-Type", "application/json")

        with self.get_client(log) as client:
            request = client.build_request(
                method.value, full_uri, headers=request_headers, content=content
            )
            if "Authorization" not in request_headers:
                client.auth = httpx.BasicAuth(self.get_basic_user(auth_mode), "")

            try:
                http_response = client.send(request)
            except httpx.HTTPError as e:
                log.error(
                    "mundipagg_request_failed",
                    method=method.value,
                    url=full_uri,
                    error=repr(e),
                )
                fields["exception"] = e
            else:
                fields.update(self._handle_response(http_response, response_type, log))

        fields["elapsed_time"] = int((time.perf_counter() - started) * 1000)
        return BaseResponse[response_type](**fields)

    def get(
        self,
        endpoint: str,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        return self.send_request(
            HttpMethod.GET, endpoint, None, query, headers, auth_mode, response_type
        )

    def post(
        self,
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        return self.send_request(
            HttpMethod.POST, endpoint, body, query, headers, auth_mode, response_type
        )

    def put(
        self,
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        return self.send_request(
            HttpMethod.PUT, endpoint, body, query, headers, auth_mode, response_type
        )

    def patch(
        self,
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        return self.send_request(
            HttpMethod.PATCH, endpoint, body, query, headers, auth_mode, response_type
        )

    def delete(
        self,
        endpoint: str,
        body: Any = None,
        query: Optional[Mapping[str, Optional[str]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth_mode: Optional[str] = "sk",
        response_type: Type[Any] = dict,
    ) -> BaseResponse:
        return self.send_request(
            HttpMethod.DELETE, endpoint, body, query, headers, auth_mode, response_type
        )

    def _handle_response(
        self, http_response: httpx.Response, response_type: Type[Any], log: Any
    ) -> Dict[str, Any]:
        """Map status and body onto envelope fields."""
        fields: Dict[str, Any] = {
            "status_code": http_response.status_code,
            "raw_response": http_response.text,
        }
        has_body = bool(http_response.text.strip())

        try:
            if http_response.is_success and has_body:
                data = json_codec.decode(http_response.text, response_type)
                if data is not None:
                    fields["data"] = data
            elif not http_response.is_success and has_body:
                fields["errors"] = json_codec.decode(http_response.text, ErrorsResponse)
        except ValueError as e:
            # undecodable body: reported as a fault, payloads stay empty
            log.warning(
                "mundipagg_response_undecodable",
                status_code=http_response.status_code,
                error_type=type(e).__name__,
            )
            fields["exception"] = e

        return fields

    def _log_request(self, log: Any, request: httpx.Request) -> None:
        body = request.content.decode("utf-8", errors="replace") if request.content else None
        log.info(
            "mundipagg_request",
            method=request.method,
            url=str(request.url),
            body=self.redactor.redact_json_text(body) if body else None,
        )

    def _log_response(self, log: Any, response: httpx.Response) -> None:
        response.read()
        log.info(
            "mundipagg_response",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            body=self.redactor.redact_json_text(response.text) or None,
        )
