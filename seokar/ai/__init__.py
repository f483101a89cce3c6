"""AI suggestion pipeline.

Provider selection, request building, HTTP transport and response
normalization, tied together by ``SuggestionService``.
"""

from .errors import (
    ApiFailure,
    DecodeFailure,
    NetworkFailure,
    NoActiveProvider,
    SuggestionError,
    UnsupportedCombination,
)
from .models import (
    ActiveProvider,
    Failure,
    ProviderName,
    ProviderRequest,
    SuggestionKind,
    SuggestionRequest,
    SuggestionResult,
)
from .providers import select_active_provider
from .service import SuggestionService

__all__ = [
    "ActiveProvider",
    "ApiFailure",
    "DecodeFailure",
    "Failure",
    "NetworkFailure",
    "NoActiveProvider",
    "ProviderName",
    "ProviderRequest",
    "SuggestionError",
    "SuggestionKind",
    "SuggestionRequest",
    "SuggestionResult",
    "SuggestionService",
    "UnsupportedCombination",
    "select_active_provider",
]
