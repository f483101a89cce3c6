"""Tests for message catalogues."""

import json

from seokar.core.i18n import I18n


class TestI18n:
    """Tests for I18n."""

    def test_english_message(self):
        i18n = I18n(lang="en")

        assert i18n.t("errors.api_error", provider="OpenAI", status_code=500, message="x") == (
            "OpenAI API Error (Code: 500): x"
        )

    def test_persian_message(self):
        i18n = I18n(lang="fa")

        assert i18n.t("providers.google_ai") == "Google AI"
        assert i18n.t("errors.generic") != I18n(lang="en").t("errors.generic")

    def test_falls_back_to_english(self):
        """Test keys missing from a catalogue use the default language."""
        i18n = I18n(lang="fa")

        assert i18n.t("prompts.title.format") == I18n().t("prompts.title.format")

    def test_unknown_key_returns_key(self):
        assert I18n().t("errors.nothing_here") == "errors.nothing_here"

    def test_section_key_returns_key(self):
        """Test a key naming a section rather than a message is unknown."""
        assert I18n().t("errors") == "errors"

    def test_unknown_language_uses_default(self):
        assert I18n(lang="xx").t("errors.generic") == I18n().t("errors.generic")

    def test_missing_format_arguments(self):
        """Test a missing placeholder value returns the raw template."""
        assert I18n().t("fallback.titles", other="x") == (
            "Could not parse title suggestions from {provider} response."
        )

    def test_custom_locales_dir(self, tmp_path):
        (tmp_path / "de.json").write_text(
            json.dumps({"errors": {"generic": "Fehler"}}), encoding="utf-8"
        )
        (tmp_path / "nl.json").write_text("[1, 2]", encoding="utf-8")

        assert I18n(locales_dir=tmp_path, default_lang="de").t("errors.generic") == "Fehler"
        assert I18n(locales_dir=tmp_path, default_lang="de", lang="nl").t("errors.generic") == (
            "Fehler"
        )
