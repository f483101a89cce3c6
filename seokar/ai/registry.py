"""Supported (provider, suggestion kind) pairs.

A pair missing from ``ROUTES`` is unsupported; there is no default branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .errors import UnsupportedCombination
from .models import ProviderName, SuggestionKind, SuggestionRequest
from .normalizers import (
    normalize_google_analysis_response,
    normalize_google_title_response,
    normalize_huggingface_title_response,
    normalize_keywords_response,
    normalize_openai_analysis_response,
    normalize_title_response,
)
from .prompts import prepare_analysis_prompt, prepare_keywords_prompt, prepare_title_prompt
from .providers import provider_label


@dataclass(frozen=True)
class Route:
    """Prompt and normalizer for one supported pair."""

    prompt: Callable[..., str]
    normalizer: Callable[..., str]
    max_tokens: int | None = None  # None = AppConfig.max_tokens


ROUTES: dict[tuple[ProviderName, SuggestionKind], Route] = {
    (ProviderName.OPENAI, SuggestionKind.SUGGEST_TITLE): Route(
        prepare_title_prompt, normalize_title_response
    ),
    (ProviderName.OPENAI, SuggestionKind.SUGGEST_KEYWORDS): Route(
        prepare_keywords_prompt, normalize_keywords_response, max_tokens=150
    ),
    (ProviderName.OPENAI, SuggestionKind.PAGE_ANALYSIS): Route(
        prepare_analysis_prompt, normalize_openai_analysis_response, max_tokens=800
    ),
    (ProviderName.GOOGLE_AI, SuggestionKind.SUGGEST_TITLE): Route(
        prepare_title_prompt, normalize_google_title_response
    ),
    (ProviderName.GOOGLE_AI, SuggestionKind.PAGE_ANALYSIS): Route(
        prepare_analysis_prompt, normalize_google_analysis_response, max_tokens=800
    ),
    (ProviderName.HUGGINGFACE, SuggestionKind.SUGGEST_TITLE): Route(
        prepare_title_prompt, normalize_huggingface_title_response
    ),
}


def get_route(provider: ProviderName, kind: SuggestionKind | Any) -> Route:
    """Look up the route for a pair.

    Raises:
        UnsupportedCombination: If the pair has no route.
    """
    route = ROUTES.get((provider, kind)) if isinstance(kind, SuggestionKind) else None
    if route is None:
        raise UnsupportedCombination(
            kind=getattr(kind, "value", kind),
            provider=provider_label(provider),
        )
    return route


def supported_kinds(provider: ProviderName) -> list[SuggestionKind]:
    """Kinds a provider can serve, in declaration order."""
    return [kind for (name, kind) in ROUTES if name == provider]
