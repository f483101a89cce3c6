"""Shared fixtures for SeoKar AI tests."""

import json

import httpx
import pytest

from seokar.ai.service import SuggestionService
from seokar.core.config import AppConfig, ProviderConfig
from seokar.core.hooks import HookManager
from seokar.core.i18n import I18n


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def en_i18n() -> I18n:
    """English message catalogue."""
    return I18n(lang="en")


@pytest.fixture
def hooks() -> HookManager:
    """Isolated hook manager."""
    return HookManager()


@pytest.fixture
def openai_config() -> ProviderConfig:
    """Credentials with only OpenAI configured."""
    return ProviderConfig(openai_api_key="sk-test")


@pytest.fixture
def make_service(hooks):
    """Factory for services backed by a recording mock transport."""

    def factory(handler, provider_config=None, app_config=None):
        transport = RecordingTransport(handler)
        service = SuggestionService(
            provider_config or ProviderConfig(openai_api_key="sk-test"),
            app_config or AppConfig(),
            hooks=hooks,
            transport=transport,
        )
        return service, transport

    return factory
