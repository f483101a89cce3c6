"""Suggestion facade used by the editor endpoints and the CLI.

Usage:
    service = SuggestionService(ProviderConfig.from_env(), AppConfig.from_env())
    result = await service.get_suggestion("suggest_title", title, content)
    payload = result.to_response()
"""

from __future__ import annotations

import httpx

from ..core.config import AppConfig, ProviderConfig
from ..core.hooks import HookManager, hook_manager
from ..core.i18n import I18n
from ..core.logging import service_logger as logger
from .builders import build_request
from .errors import NoActiveProvider, SuggestionError, UnsupportedCombination
from .models import ActiveProvider, ProviderName, SuggestionKind, SuggestionRequest, SuggestionResult
from .normalizers import ParseFallback
from .providers import provider_label, select_active_provider
from .registry import get_route, supported_kinds
from .transport import send


class SuggestionService:
    """Runs one suggestion call: select, build, send, normalize.

    The service keeps no per-call state. Provider credentials and runtime
    settings are captured at construction and never change, so one instance
    can serve concurrent calls.
    """

    def __init__(
        self,
        provider_config: ProviderConfig,
        app_config: AppConfig | None = None,
        hooks: HookManager | None = None,
        i18n: I18n | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the service.

        Args:
            provider_config: Provider credentials.
            app_config: Runtime settings (defaults if None).
            hooks: Filter chains (uses global if None).
            i18n: Message catalogue (site language if None).
            transport: Optional httpx transport passed to every request.
        """
        self.provider_config = provider_config
        self.config = app_config or AppConfig()
        self.hooks = hooks or hook_manager
        self.i18n = i18n or I18n(lang=self.config.ui_language)
        self._transport = transport

    def active_provider(self) -> ActiveProvider | None:
        """Provider the next call would use."""
        return select_active_provider(self.provider_config)

    def supported_kinds(self) -> list[SuggestionKind]:
        """Kinds the active provider can serve; empty when none is active."""
        provider = self.active_provider()
        return supported_kinds(provider.name) if provider else []

    async def get_suggestion(
        self,
        kind: str | SuggestionKind,
        title: str | None = "",
        content: str | None = "",
    ) -> SuggestionResult:
        """Get an HTML suggestion for the post being edited.

        Args:
            kind: Suggestion kind, e.g. "suggest_title".
            title: Current post title.
            content: Full post content; only a stripped excerpt is sent.

        Returns:
            SuggestionResult with HTML or a Failure.
        """
        return await self._run(kind, title, content)

    async def get_page_analysis(
        self,
        title: str | None = "",
        content: str | None = "",
    ) -> SuggestionResult:
        """Analyze a page for SEO and readability."""
        return await self._run(SuggestionKind.PAGE_ANALYSIS, title, content)

    async def _run(
        self,
        kind: str | SuggestionKind,
        title: str | None,
        content: str | None,
    ) -> SuggestionResult:
        provider_name: ProviderName | None = None
        try:
            provider = self.active_provider()
            if provider is None:
                raise NoActiveProvider()
            provider_name = provider.name
            label = provider_label(provider.name, self.i18n)

            parsed_kind = SuggestionKind.parse(kind)
            if parsed_kind is None:
                raise UnsupportedCombination(kind=str(kind), provider=label)

            request = SuggestionRequest.create(parsed_kind, title, content)
            route = get_route(provider.name, parsed_kind)
            provider_request = build_request(
                provider,
                request,
                config=self.config,
                hooks=self.hooks,
                i18n=self.i18n,
                route=route,
            )
            provider_request = self.hooks.emit("ai_provider_request", provider_request)

            raw = await send(
                provider_request,
                provider_label=label,
                timeout=float(self.hooks.emit("ai_api_request_timeout", self.config.request_timeout)),
                verify=bool(self.hooks.emit("ai_api_sslverify", self.config.sslverify)),
                transport=self._transport,
            )
        except SuggestionError as e:
            logger.warning(f"Suggestion '{kind}' failed: {e.kind}")
            return SuggestionResult.failed(e.to_failure(self.i18n), provider=provider_name)

        html = route.normalizer(raw, request=request, i18n=self.i18n)
        if isinstance(html, ParseFallback):
            logger.info(f"Suggestion '{parsed_kind.value}' from {label} could not be parsed")
            return SuggestionResult.ok(str(html), provider=provider_name, fallback=True)

        html = self.hooks.emit("ai_suggestion_html", html)
        return SuggestionResult.ok(html, provider=provider_name)
