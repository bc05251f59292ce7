"""Block-list redaction of sensitive fields in logged payloads."""
import json
from typing import Any, Iterable, List, Sequence, Tuple

REDACTED = "***"

CARD_BLOCK_LIST: Tuple[str, ...] = (
    "*card.token",
    "*card.exp_year",
    "*card.exp_month",
    "*card.cvv",
    "*card.number",
    "token",
    "exp_year",
    "exp_month",
    "cvv",
    "number",
)


class JsonRedactor:
    """Replace the values of block-listed keys, however deeply nested.

    ``cvv`` matches a ``cvv`` key anywhere. ``card.cvv`` matches a ``cvv``
    key whose parent key is ``card``. A leading ``*`` is accepted on either
    form and changes nothing, since every pattern already matches at any
    depth.
    """

    def __init__(self, patterns: Iterable[str] = CARD_BLOCK_LIST):
        self.patterns: List[Tuple[str, ...]] = [
            tuple(p.lstrip("*").lstrip(".").lower().split("."))
            for p in patterns
            if p.strip("*. ")
        ]

    def matches(self, path: Sequence[str]) -> bool:
        """Whether a key path (root first) hits the block-list."""
        lowered = tuple(str(part).lower() for part in path)
        for pattern in self.patterns:
            if len(lowered) >= len(pattern) and lowered[-len(pattern):] == pattern:
                return True
        return False

    def redact(self, value: Any, path: Tuple[str, ...] = ()) -> Any:
        """Return a copy of ``value`` with block-listed values masked."""
        if isinstance(value, dict):
            redacted = {}
            for key, item in value.items():
                key_path = path + (str(key),)
                if self.matches(key_path):
                    redacted[key] = REDACTED
                else:
                    redacted[key] = self.redact(item, key_path)
            return redacted
        if isinstance(value, (list, tuple)):
            # list items share the parent's path
            return [self.redact(item, path) for item in value]
        return value

    def redact_json_text(self, text: str) -> str:
        """Redact JSON text; anything that is not a JSON document is kept."""
        if not text:
            return text
        try:
            parsed = json.loads(text)
        except ValueError:
            return text
        return json.dumps(self.redact(parsed), ensure_ascii=False)

    def __call__(self, logger: Any, method_name: str, event_dict: dict) -> dict:
        """structlog processor."""
        return self.redact(event_dict)
