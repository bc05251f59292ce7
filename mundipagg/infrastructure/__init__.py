"""Infrastructure layer: transport, JSON codec, logging."""
from mundipagg.infrastructure.http_client import HttpClientUtil, HttpxClientUtil
from mundipagg.infrastructure.logging_setup import configure_logging
from mundipagg.infrastructure.redaction import CARD_BLOCK_LIST, JsonRedactor

__all__ = [
    "HttpClientUtil",
    "HttpxClientUtil",
    "JsonRedactor",
    "CARD_BLOCK_LIST",
    "configure_logging",
]
