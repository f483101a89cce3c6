"""Data models for the suggestion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..core.sanitize import make_excerpt


class ProviderName(str, Enum):
    """Supported AI providers."""

    OPENAI = "openai"
    GOOGLE_AI = "google_ai"
    HUGGINGFACE = "huggingface"


class SuggestionKind(str, Enum):
    """Kinds of content a caller can ask for."""

    SUGGEST_TITLE = "suggest_title"
    SUGGEST_KEYWORDS = "suggest_keywords"
    SUGGEST_TAGS = "suggest_tags"
    SUGGEST_CATEGORIES = "suggest_categories"
    GENERATE_CONTENT_OUTLINE = "generate_content_outline"
    GENERATE_FULL_CONTENT = "generate_full_content"
    PAGE_ANALYSIS = "page_analysis"

    @classmethod
    def parse(cls, value: str | SuggestionKind | None) -> SuggestionKind | None:
        """Return the matching kind, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class ActiveProvider:
    """The provider chosen for one call."""

    name: ProviderName
    credential: str = field(repr=False)


@dataclass(frozen=True)
class SuggestionRequest:
    """What the caller wants, with the content already reduced to an excerpt."""

    kind: SuggestionKind
    title: str = ""
    content_excerpt: str = ""

    @classmethod
    def create(
        cls,
        kind: SuggestionKind,
        title: str | None = "",
        content: str | None = "",
    ) -> SuggestionRequest:
        """Build a request from raw editor input.

        The title is trimmed and the content is tag-stripped and cut to the
        excerpt length.
        """
        return cls(
            kind=kind,
            title=(title or "").strip(),
            content_excerpt=make_excerpt(content),
        )


@dataclass(frozen=True)
class ProviderRequest:
    """A single outbound HTTP call."""

    url: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)
    body: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    """Structured error returned to the UI layer."""

    kind: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of one suggestion call.

    Exactly one of ``html`` and ``error`` is set. ``fallback`` marks a
    successful call whose response could not be parsed; ``html`` then holds a
    plain-text notice instead of formatted markup.
    """

    html: str | None = None
    error: Failure | None = None
    fallback: bool = False
    provider: ProviderName | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(
        cls,
        html: str,
        provider: ProviderName | None = None,
        fallback: bool = False,
    ) -> SuggestionResult:
        return cls(html=html, provider=provider, fallback=fallback)

    @classmethod
    def failed(cls, error: Failure, provider: ProviderName | None = None) -> SuggestionResult:
        return cls(error=error, provider=provider)

    def to_response(self) -> dict[str, Any]:
        """Render the AJAX envelope consumed by the editor scripts."""
        if self.error is not None:
            return {
                "success": False,
                "data": {"code": self.error.kind, "message": self.error.message},
            }
        return {
            "success": True,
            "data": {"html": self.html, "fallback": self.fallback},
        }
