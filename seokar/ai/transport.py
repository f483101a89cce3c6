"""HTTP transport for provider requests.

One POST per call, no retries. Network problems, undecodable bodies and
error statuses are raised as the matching ``SuggestionError``.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from ..core.logging import transport_logger as logger
from ..core.sanitize import strip_all_tags
from .errors import ApiFailure, DecodeFailure, NetworkFailure
from .models import ProviderRequest

# Request timeout in seconds
REQUEST_TIMEOUT = 30.0

ERROR_SNIPPET_LENGTH = 200


def extract_error_message(decoded: Any, body: str) -> str | None:
    """Pick the most useful message out of an error response.

    Tries ``error.message``, then ``message``, then a snippet of the
    tag-stripped body. Returns None when none of them has any text.
    """
    if isinstance(decoded, dict):
        error = decoded.get("error")
        if isinstance(error, dict) and error.get("message") is not None:
            return str(error["message"])
        if decoded.get("message") is not None:
            return str(decoded["message"])
    if body:
        snippet = strip_all_tags(body)[:ERROR_SNIPPET_LENGTH]
        if snippet:
            return snippet
    return None


async def send(
    request: ProviderRequest,
    *,
    provider_label: str,
    timeout: float = REQUEST_TIMEOUT,
    verify: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Send a provider request and decode the JSON response.

    Args:
        request: Request to send.
        provider_label: Provider name used in error messages.
        timeout: Timeout in seconds for the whole exchange.
        verify: Whether TLS certificates are verified.
        transport: Optional httpx transport (used by tests).

    Returns:
        Decoded JSON body of a 2xx response.

    Raises:
        NetworkFailure: If no HTTP status was received.
        DecodeFailure: If a 2xx body is not valid JSON.
        ApiFailure: If the status is outside 200-299.
    """
    logger.debug(f"POST to {provider_label} (timeout={timeout}s, verify={verify})")

    try:
        async with httpx.AsyncClient(timeout=timeout, verify=verify, transport=transport) as client:
            response = await client.post(
                request.url,
                headers=request.headers,
                content=json.dumps(request.body),
            )
    except httpx.TimeoutException as e:
        logger.warning(f"Request to {provider_label} timed out after {timeout}s")
        raise NetworkFailure(provider=provider_label, error=str(e) or "Request timed out")
    except httpx.HTTPError as e:
        logger.warning(f"Request to {provider_label} failed: {type(e).__name__}")
        raise NetworkFailure(provider=provider_label, error=str(e) or type(e).__name__)

    status = response.status_code
    body = response.text
    logger.debug(f"{provider_label} responded with HTTP {status}")

    if 200 <= status < 300:
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeFailure(
                details={"response_body": body},
                provider=provider_label,
                error=str(e),
            )

    try:
        decoded = json.loads(body) if body else None
    except ValueError:
        decoded = None

    error = ApiFailure(
        details={"status_code": status, "response_body": decoded if decoded else body},
        provider=provider_label,
        status_code=status,
        message=extract_error_message(decoded, body),
    )
    logger.warning(f"{provider_label} API error {status}: {error.message}")
    raise error
