"""Editor-facing suggestion endpoints.

Responses use the envelope the editor scripts expect:
``{"success": true, "data": {"html": ...}}`` or
``{"success": false, "data": {"code": ..., "message": ...}}``.
"""

import secrets

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..ai.service import SuggestionService
from ..core.logging import api_logger as logger


router = APIRouter(prefix="/admin/api/ai", tags=["ai"])


class SuggestionPayload(BaseModel):
    """Body of a suggestion request from the post editor."""

    type: str = ""
    title: str = ""
    content: str = ""


class AnalysisPayload(BaseModel):
    """Body of a page analysis request from the front-end modal."""

    title: str = ""
    content: str = ""


def get_suggestion_service(request: Request) -> SuggestionService:
    """Get the suggestion service from application state.

    Raises:
        HTTPException: If the service is not initialized.
    """
    service = getattr(request.app.state, "suggestions", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Suggestion service not initialized")
    return service


async def require_token(
    service: SuggestionService = Depends(get_suggestion_service),
    x_seokar_token: str | None = Header(default=None),
) -> None:
    """Check the shared API token when one is configured.

    Without a configured token, authentication is left to the host.
    """
    expected = service.config.api_token
    if not expected:
        return
    if not x_seokar_token or not secrets.compare_digest(x_seokar_token, expected):
        logger.warning("Rejected suggestion request with invalid token")
        raise HTTPException(status_code=401, detail=service.i18n.t("errors.unauthorized"))


@router.post("/suggest")
async def suggest(
    payload: SuggestionPayload,
    service: SuggestionService = Depends(get_suggestion_service),
    _=Depends(require_token),
):
    """Return an AI suggestion for the post being edited."""
    if not payload.type.strip():
        return JSONResponse(
            {
                "success": False,
                "data": {
                    "code": "invalid_suggestion_type",
                    "message": service.i18n.t("errors.generic"),
                },
            },
            status_code=400,
        )

    result = await service.get_suggestion(payload.type, payload.title, payload.content)
    return result.to_response()


@router.post("/page-analysis")
async def page_analysis(
    payload: AnalysisPayload,
    service: SuggestionService = Depends(get_suggestion_service),
    _=Depends(require_token),
):
    """Return an SEO and readability analysis of a page."""
    result = await service.get_page_analysis(payload.title, payload.content)
    return result.to_response()


@router.get("/status")
async def status(
    service: SuggestionService = Depends(get_suggestion_service),
    _=Depends(require_token),
):
    """Report the active provider and the kinds it supports."""
    provider = service.active_provider()
    return {
        "active_provider": provider.name.value if provider else None,
        "supported_kinds": [kind.value for kind in service.supported_kinds()],
    }
