"""Active provider selection."""

from __future__ import annotations

from ..core.config import ProviderConfig
from .models import ActiveProvider, ProviderName

# The first provider with a configured key wins
PROVIDER_PRIORITY: tuple[ProviderName, ...] = (
    ProviderName.OPENAI,
    ProviderName.GOOGLE_AI,
    ProviderName.HUGGINGFACE,
)

PROVIDER_KEY_NAMES: dict[ProviderName, str] = {
    ProviderName.OPENAI: "openai_api_key",
    ProviderName.GOOGLE_AI: "google_api_key",
    ProviderName.HUGGINGFACE: "huggingface_api_key",
}

PROVIDER_LABELS: dict[ProviderName, str] = {
    ProviderName.OPENAI: "OpenAI",
    ProviderName.GOOGLE_AI: "Google AI",
    ProviderName.HUGGINGFACE: "Hugging Face",
}


def select_active_provider(config: ProviderConfig) -> ActiveProvider | None:
    """Pick the provider to use for a call.

    Args:
        config: Provider credentials.

    Returns:
        The highest-priority provider with a non-empty credential, or None
        when no provider is configured.
    """
    for name in PROVIDER_PRIORITY:
        credential = config.credential_for(PROVIDER_KEY_NAMES[name])
        if credential:
            return ActiveProvider(name=name, credential=credential)
    return None


def provider_label(name: ProviderName, i18n=None) -> str:
    """Human-readable provider name."""
    if i18n is not None:
        label = i18n.t(f"providers.{name.value}")
        if label != f"providers.{name.value}":
            return label
    return PROVIDER_LABELS[name]
