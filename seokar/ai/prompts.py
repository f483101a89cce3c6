"""Prompt templates for each suggestion kind.

Prompts only ever see the excerpt held by ``SuggestionRequest``, so no
markup or oversized content reaches a provider.
"""

from __future__ import annotations

from ..core.i18n import I18n, i18n as default_i18n
from .models import SuggestionRequest


def prepare_title_prompt(
    request: SuggestionRequest,
    language: str,
    i18n: I18n | None = None,
) -> str:
    """Build the title suggestion prompt.

    Args:
        request: Suggestion request with title and excerpt.
        language: Site language tag (e.g. "fa-IR").
        i18n: Message catalogue; the shared English one if omitted.

    Returns:
        Prompt asking for a numbered list, one title per line.
    """
    i18n = i18n or default_i18n
    prompt = i18n.t("prompts.title.intro", language=language)
    if request.title:
        prompt += i18n.t("prompts.title.current_title", title=request.title)
    if request.content_excerpt:
        prompt += i18n.t("prompts.title.content", excerpt=request.content_excerpt)
    prompt += i18n.t("prompts.title.format")
    return prompt


def prepare_keywords_prompt(
    request: SuggestionRequest,
    language: str,
    i18n: I18n | None = None,
) -> str:
    """Build the keyword suggestion prompt."""
    i18n = i18n or default_i18n
    prompt = i18n.t("prompts.keywords.intro", language=language)
    if request.title:
        prompt += i18n.t("prompts.keywords.current_title", title=request.title)
    if request.content_excerpt:
        prompt += i18n.t("prompts.keywords.content", excerpt=request.content_excerpt)
    prompt += i18n.t("prompts.keywords.format")
    return prompt


def prepare_analysis_prompt(
    request: SuggestionRequest,
    language: str,
    i18n: I18n | None = None,
) -> str:
    """Build the SEO and readability analysis prompt."""
    i18n = i18n or default_i18n
    return i18n.t(
        "prompts.analysis",
        language=language,
        title=request.title,
        excerpt=request.content_excerpt,
    )
