"""Text sanitization for prompts and rendered suggestions."""

import html
import re

import bleach


# Script and style bodies are code, not post text
SCRIPT_STYLE_PATTERN = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

EXCERPT_LENGTH = 500


def decode_entities(text: str) -> str:
    """Decode HTML entities until none are left.

    Nested encodings such as ``&amp;lt;b&amp;gt;`` are fully decoded. Every
    pass that changes the text shortens it, so the loop ends.
    """
    decoded = html.unescape(text)
    while decoded != text:
        text = decoded
        decoded = html.unescape(text)
    return decoded


def strip_all_tags(text: str | None) -> str:
    """Remove every HTML tag from text.

    Entities are decoded first, so entity-encoded markup is stripped like
    literal markup. Script and style elements are dropped together with
    their content, and surrounding whitespace is trimmed.

    Args:
        text: HTML or plain text.

    Returns:
        Tag-free plain text.
    """
    if not text:
        return ""

    text = SCRIPT_STYLE_PATTERN.sub("", decode_entities(text))
    cleaned = bleach.clean(text, tags=[], attributes={}, strip=True, strip_comments=True)

    return html.unescape(cleaned).strip()


def make_excerpt(content: str | None, limit: int = EXCERPT_LENGTH) -> str:
    """Build the prompt excerpt of post content.

    Args:
        content: Full post content, possibly HTML.
        limit: Maximum excerpt length in characters.

    Returns:
        The first ``limit`` characters of the tag-stripped content.
    """
    return strip_all_tags(content)[:limit]


def esc_html(text: str | None) -> str:
    """Escape text for safe inclusion in HTML."""
    if not text:
        return ""
    return html.escape(text, quote=True)
