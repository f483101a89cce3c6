"""Turn raw provider JSON into HTML fragments.

A response that does not have the expected shape is not an error: the
normalizer returns a ``ParseFallback`` notice instead, and the caller shows
it as plain text.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from ..core.i18n import I18n, i18n as default_i18n
from ..core.sanitize import esc_html
from .models import SuggestionRequest

NUMBERING_PATTERN = re.compile(r"^\d+\.\s*")
BULLET_PATTERN = re.compile(r"^(?:\d+[.)]|[-*•])\s*")


class ParseFallback(str):
    """Plain-text notice returned when a response cannot be parsed."""


# --- Field extraction ---


def _openai_text(raw: Any) -> str | None:
    try:
        content = raw["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


def _google_text(raw: Any) -> str | None:
    try:
        parts = raw["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(parts, list):
        return None
    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    return "".join(texts) if texts else None


def _huggingface_text(raw: Any) -> str | None:
    item = raw[0] if isinstance(raw, list) and raw else raw
    if not isinstance(item, dict):
        return None
    text = item.get("generated_text")
    return text if isinstance(text, str) else None


# --- Rendering ---


def render_title_list(text: str) -> str | None:
    """Render a numbered list of titles as ``<ul>``, or None if it is empty."""
    items = []
    for line in text.strip().splitlines():
        title = NUMBERING_PATTERN.sub("", line.strip()).strip()
        if title:
            items.append(f"<li>{esc_html(title)}</li>")
    if not items:
        return None
    return "<ul>" + "".join(items) + "</ul>"


def render_keywords(text: str) -> str | None:
    """Render keywords as one comma-separated paragraph."""
    keywords: list[str] = []
    for chunk in re.split(r"[,\n،]", text):
        keyword = BULLET_PATTERN.sub("", chunk.strip()).strip().strip("\"'")
        if keyword and keyword.lower() not in (k.lower() for k in keywords):
            keywords.append(keyword)
    if not keywords:
        return None
    return "<p>" + esc_html(", ".join(keywords)) + "</p>"


def render_analysis(text: str, title: str, i18n: I18n) -> str | None:
    """Render free-form analysis as a heading followed by paragraphs."""
    blocks = [b.strip() for b in re.split(r"\n\s*\n", text.strip()) if b.strip()]
    if not blocks:
        return None
    heading = f"<h3>{esc_html(i18n.t('analysis.heading', title=title))}</h3>"
    paragraphs = "".join(
        "<p>" + "<br>".join(esc_html(line.strip()) for line in block.splitlines()) + "</p>"
        for block in blocks
    )
    return heading + paragraphs


def _normalize(
    raw: Any,
    extract: Callable[[Any], str | None],
    render: Callable[[str], str | None],
    fallback_key: str,
    provider: str,
    i18n: I18n,
) -> str:
    text = extract(raw)
    html = render(text) if text is not None else None
    if html is None:
        return ParseFallback(i18n.t(fallback_key, provider=provider))
    return html


# --- Public normalizers, one per supported (provider, kind) pair ---


def normalize_title_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    """Normalize an OpenAI chat completion holding numbered titles.

    Returns:
        ``<ul><li>...</li></ul>`` with escaped titles, or a ParseFallback.
    """
    return _normalize(
        raw, _openai_text, render_title_list, "fallback.titles", "OpenAI", i18n or default_i18n
    )


def normalize_keywords_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    return _normalize(
        raw, _openai_text, render_keywords, "fallback.keywords", "OpenAI", i18n or default_i18n
    )


def normalize_google_title_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    return _normalize(
        raw, _google_text, render_title_list, "fallback.titles", "Google AI", i18n or default_i18n
    )


def normalize_huggingface_title_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    return _normalize(
        raw,
        _huggingface_text,
        render_title_list,
        "fallback.titles",
        "Hugging Face",
        i18n or default_i18n,
    )


def normalize_openai_analysis_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    i18n = i18n or default_i18n
    title = request.title if request else ""
    return _normalize(
        raw,
        _openai_text,
        lambda text: render_analysis(text, title, i18n),
        "fallback.analysis",
        "OpenAI",
        i18n,
    )


def normalize_google_analysis_response(
    raw: Any,
    request: SuggestionRequest | None = None,
    i18n: I18n | None = None,
) -> str:
    i18n = i18n or default_i18n
    title = request.title if request else ""
    return _normalize(
        raw,
        _google_text,
        lambda text: render_analysis(text, title, i18n),
        "fallback.analysis",
        "Google AI",
        i18n,
    )
