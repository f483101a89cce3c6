"""Tests for the command-line interface."""

import json
import os

import pytest
from click.testing import CliRunner

from seokar.cli import main


@pytest.fixture
def runner(monkeypatch):
    """CLI runner with no SEOKAR_* variables set."""
    for name in list(os.environ):
        if name.startswith("SEOKAR_"):
            monkeypatch.delenv(name)
    return CliRunner()


@pytest.fixture
def options_file(tmp_path):
    def write(**options):
        path = tmp_path / "options.json"
        path.write_text(json.dumps(options), encoding="utf-8")
        return str(path)

    return write


class TestProvidersCommand:
    """Tests for `seokar providers`."""

    def test_no_provider(self, runner):
        result = runner.invoke(main, ["providers"])

        assert result.exit_code == 0
        assert "not configured" in result.output
        assert "No active provider." in result.output

    def test_active_provider_marked(self, runner, options_file):
        path = options_file(google_api_key="g", huggingface_api_key="hf")
        result = runner.invoke(main, ["providers", "--options", path])

        assert result.exit_code == 0
        assert " * google_ai" in result.output
        assert "   huggingface" in result.output
        assert "Supported kinds: suggest_title, page_analysis" in result.output

    def test_reads_environment(self, runner, monkeypatch):
        monkeypatch.setenv("SEOKAR_OPENAI_API_KEY", "sk")
        result = runner.invoke(main, ["providers"])

        assert " * openai" in result.output


class TestSuggestCommand:
    """Tests for `seokar suggest` and `seokar analyze` failure paths."""

    def test_no_provider_fails(self, runner):
        result = runner.invoke(main, ["suggest", "suggest_title", "--title", "Hello"])

        assert result.exit_code == 1
        assert "[no_active_service]" in result.output

    def test_unsupported_kind_fails(self, runner, options_file):
        path = options_file(huggingface_api_key="hf")
        result = runner.invoke(main, ["suggest", "suggest_keywords", "--options", path])

        assert result.exit_code == 1
        assert "[invalid_suggestion_type]" in result.output
        assert "Hugging Face" in result.output

    def test_analyze_unsupported(self, runner, options_file):
        path = options_file(huggingface_api_key="hf")
        result = runner.invoke(main, ["analyze", "--title", "Home", "--options", path])

        assert result.exit_code == 1
        assert "[invalid_suggestion_type]" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "seokar" in result.output
