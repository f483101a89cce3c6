"""Suggestion failure taxonomy.

Every hard failure of a suggestion call is a ``SuggestionError`` with a
stable machine-readable ``kind``. The facade turns them into ``Failure``
values; nothing here is retried.
"""

from __future__ import annotations

from typing import Any

from .models import Failure


class SuggestionError(Exception):
    """Base class for suggestion failures.

    Args:
        details: Extra data for debugging, never shown to end users.
        **params: Values substituted into the message template.
    """

    kind = "suggestion_error"
    template = "{error}"

    def __init__(self, details: dict[str, Any] | None = None, **params: Any):
        self.params = params
        self.details = details or {}
        try:
            text = self.template.format(**params)
        except KeyError:
            text = self.kind
        super().__init__(text)

    def render(self, i18n=None) -> str:
        """Render the message, translated when an I18n instance is given."""
        if i18n is None:
            return str(self)
        return i18n.t(f"errors.{self.kind}", **self.params)

    def to_failure(self, i18n=None) -> Failure:
        return Failure(kind=self.kind, message=self.render(i18n), details=dict(self.details))


class NoActiveProvider(SuggestionError):
    """No provider has a configured credential."""

    kind = "no_active_service"
    template = "No AI service API key is configured or active. Please check SeoKar AI settings."


class UnsupportedCombination(SuggestionError):
    """The active provider has no template for the requested kind."""

    kind = "invalid_suggestion_type"
    template = 'Suggestion type "{kind}" not implemented for {provider}.'


class NetworkFailure(SuggestionError):
    """The request failed before an HTTP status was received."""

    kind = "http_request_failed"
    template = "HTTP request to {provider} failed. Error: {error}"


class DecodeFailure(SuggestionError):
    """A 2xx response whose body is not valid JSON."""

    kind = "json_decode_error"
    template = "Failed to decode JSON response from {provider}. Error: {error}"


class ApiFailure(SuggestionError):
    """The provider answered with a non-2xx status."""

    kind = "api_error"
    template = "{provider} API Error (Code: {status_code}): {message}"
    unknown_message = "Unknown API error."

    def __init__(
        self,
        details: dict[str, Any] | None = None,
        *,
        message: str | None = None,
        **params: Any,
    ):
        # None = the response carried no usable message
        self.has_message = message is not None
        super().__init__(
            details,
            message=message if self.has_message else self.unknown_message,
            **params,
        )

    def render(self, i18n=None) -> str:
        if i18n is None or self.has_message:
            return super().render(i18n)
        params = dict(self.params, message=i18n.t("errors.unknown_api_error"))
        return i18n.t(f"errors.{self.kind}", **params)

    @property
    def status_code(self) -> int:
        return self.params["status_code"]

    @property
    def message(self) -> str:
        return self.params["message"]
