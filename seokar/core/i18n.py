"""Message catalogues for failures, fallbacks and prompts.

Catalogues are JSON files in ``seokar/locales`` named by primary language
subtag (``en.json``, ``fa.json``). Keys are dot separated. A key missing
from the site language catalogue is looked up in the English one.
"""

import json
from pathlib import Path
from typing import Any

LOCALES_DIR = Path(__file__).parent.parent / "locales"
DEFAULT_LANGUAGE = "en"


def load_catalogue(locales_dir: Path, lang: str) -> dict[str, Any] | None:
    """Read one catalogue, or None if it is missing or not a JSON object."""
    try:
        with open(locales_dir / f"{lang}.json", "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def lookup(catalogue: dict[str, Any], key: str) -> str | None:
    """Follow a dotted key through nested sections."""
    node: Any = catalogue
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, str) else None


class I18n:
    """Message lookup for one site language with a default-language fallback.

    Catalogues are read once at construction and never modified, so one
    instance can be shared by concurrent suggestion calls.
    """

    def __init__(
        self,
        locales_dir: Path | None = None,
        default_lang: str = DEFAULT_LANGUAGE,
        lang: str | None = None,
    ):
        """Load the catalogues for a language.

        Args:
            locales_dir: Directory holding the JSON catalogues.
            default_lang: Fallback language code.
            lang: Site language code; ignored if it has no catalogue.
        """
        locales_dir = locales_dir or LOCALES_DIR
        self._catalogues: list[dict[str, Any]] = []

        if lang and lang != default_lang:
            site = load_catalogue(locales_dir, lang)
            if site is not None:
                self._catalogues.append(site)

        fallback = load_catalogue(locales_dir, default_lang)
        if fallback is not None:
            self._catalogues.append(fallback)

    def t(self, key: str, **kwargs: Any) -> str:
        """Translate a key.

        Args:
            key: Dotted key (e.g. 'errors.api_error').
            **kwargs: Placeholder values.

        Returns:
            The formatted message. An unknown key is returned as is, and a
            template whose placeholders are not all supplied is returned
            unformatted.
        """
        for catalogue in self._catalogues:
            text = lookup(catalogue, key)
            if text is not None:
                break
        else:
            return key

        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError):
            return text


# English catalogue used when no instance is passed in
i18n = I18n()
