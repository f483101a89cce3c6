"""Filter chains for overriding request settings without code changes.

A filter receives the current value and returns a replacement; returning
``None`` keeps the value. Filters run in ascending priority, then in
registration order. A filter that raises is logged and skipped.

Filters:
- ai_api_request_timeout: Transport timeout in seconds
- ai_api_sslverify: Whether TLS certificates are verified
- ai_openai_model: Chat model used for OpenAI requests
- ai_google_model: Gemini model used for Google AI requests
- ai_huggingface_model: Inference model used for Hugging Face requests
- ai_provider_request: Outbound ProviderRequest, before it is sent
- ai_suggestion_html: Normalized HTML, before it is returned
"""

import bisect
from dataclasses import dataclass, field
from typing import Any, Callable

from .logging import hooks_logger as logger

KNOWN_FILTERS = frozenset(
    {
        "ai_api_request_timeout",
        "ai_api_sslverify",
        "ai_openai_model",
        "ai_google_model",
        "ai_huggingface_model",
        "ai_provider_request",
        "ai_suggestion_html",
    }
)


@dataclass(order=True)
class Filter:
    """One registered callback; ordered by (priority, sequence)."""

    priority: int
    sequence: int
    callback: Callable[[Any], Any] = field(compare=False)


class HookManager:
    """Named filter chains applied by the suggestion service."""

    def __init__(self):
        self._chains: dict[str, list[Filter]] = {}
        self._count = 0

    def register(self, name: str, callback: Callable[[Any], Any], priority: int = 50) -> None:
        """Add a callback to a filter chain.

        Args:
            name: Filter name.
            callback: Receives the current value, returns a replacement or None.
            priority: Lower runs earlier. Default 50.
        """
        if name not in KNOWN_FILTERS:
            logger.warning(f"Registering callback for unknown filter '{name}'")

        self._count += 1
        bisect.insort(self._chains.setdefault(name, []), Filter(priority, self._count, callback))

    def emit(self, name: str, value: Any = None) -> Any:
        """Pass a value through a filter chain and return the result."""
        for entry in tuple(self._chains.get(name, ())):
            try:
                result = entry.callback(value)
            except Exception as e:
                callback_name = getattr(entry.callback, "__qualname__", repr(entry.callback))
                logger.error(f"Filter '{name}' failed in {callback_name}: {e}")
                continue
            if result is not None:
                value = result
        return value


# Global hook manager instance
hook_manager = HookManager()
