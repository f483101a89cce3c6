"""Provider request builders.

Each builder turns a finished prompt into the HTTP call its provider
expects. Which prompt goes to which provider is decided in ``registry``.
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import quote

from ..core.config import AppConfig
from ..core.hooks import HookManager, hook_manager
from ..core.i18n import I18n
from .models import ActiveProvider, ProviderName, ProviderRequest, SuggestionRequest
from .registry import Route, get_route

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
GOOGLE_GENERATE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
HUGGINGFACE_INFERENCE_URL = "https://api-inference.huggingface.co/models/{model}"

MODEL_FILTERS: dict[ProviderName, tuple[str, str]] = {
    ProviderName.OPENAI: ("ai_openai_model", "openai_model"),
    ProviderName.GOOGLE_AI: ("ai_google_model", "google_model"),
    ProviderName.HUGGINGFACE: ("ai_huggingface_model", "huggingface_model"),
}


def build_openai_request(credential: str, prompt: str, model: str, max_tokens: int) -> ProviderRequest:
    """Chat completion with a single user message."""
    return ProviderRequest(
        url=OPENAI_CHAT_URL,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}",
        },
        body={
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
        },
    )


def build_google_request(credential: str, prompt: str, model: str, max_tokens: int) -> ProviderRequest:
    """Gemini generateContent call; the key travels in a header, not the URL."""
    return ProviderRequest(
        url=GOOGLE_GENERATE_URL.format(model=quote(model, safe="-._")),
        headers={
            "Content-Type": "application/json",
            "x-goog-api-key": credential,
        },
        body={
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": max_tokens},
        },
    )


def build_huggingface_request(credential: str, prompt: str, model: str, max_tokens: int) -> ProviderRequest:
    """Hosted Inference API text generation call."""
    return ProviderRequest(
        url=HUGGINGFACE_INFERENCE_URL.format(model=quote(model, safe="-._/")),
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}",
        },
        body={
            "inputs": prompt,
            "parameters": {"max_new_tokens": max_tokens, "return_full_text": False},
        },
    )


PROVIDER_BUILDERS: dict[ProviderName, Callable[[str, str, str, int], ProviderRequest]] = {
    ProviderName.OPENAI: build_openai_request,
    ProviderName.GOOGLE_AI: build_google_request,
    ProviderName.HUGGINGFACE: build_huggingface_request,
}


def resolve_model(provider: ProviderName, config: AppConfig, hooks: HookManager | None = None) -> str:
    """Configured model for a provider, after the model filter has run."""
    hooks = hooks or hook_manager
    filter_name, field_name = MODEL_FILTERS[provider]
    return str(hooks.emit(filter_name, getattr(config, field_name)))


def build_request(
    provider: ActiveProvider,
    request: SuggestionRequest,
    config: AppConfig | None = None,
    hooks: HookManager | None = None,
    i18n: I18n | None = None,
    route: Route | None = None,
) -> ProviderRequest:
    """Build the outbound request for a provider and suggestion kind.

    Args:
        provider: Selected provider and its credential.
        request: Suggestion request with excerpt.
        config: Runtime settings (language, models, token budget).
        hooks: Filter chains for model overrides.
        i18n: Message catalogue used for prompt text.
        route: Route already looked up by the caller; looked up here if None.

    Returns:
        A new ProviderRequest.

    Raises:
        UnsupportedCombination: If the provider has no template for the kind.
    """
    config = config or AppConfig()
    route = route or get_route(provider.name, request.kind)

    prompt = route.prompt(request, config.site_language, i18n)
    model = resolve_model(provider.name, config, hooks)
    max_tokens = route.max_tokens or config.max_tokens

    return PROVIDER_BUILDERS[provider.name](provider.credential, prompt, model, max_tokens)
