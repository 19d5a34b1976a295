"""Liveness and readiness endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from waitlist_api.config import get_settings

router = APIRouter(tags=["diagnostics"])


@router.get("/health", summary="Liveness probe")
async def health_check() -> dict[str, str]:
    """Signal that the API process is running."""

    settings = get_settings()
    return {"status": "ok", "service": settings.app_name, "environment": settings.environment}


@router.get(
    "/readiness",
    summary="Readiness probe",
    responses={503: {"description": "Resend credentials are missing; signups would fail with 500"}},
)
async def readiness_check() -> JSONResponse:
    """Report whether signups can be served.

    Pre-flight and health checks work without credentials, but every signup
    needs both the Resend API key and the audience id.
    """

    settings = get_settings()
    missing = [
        name
        for name, value in (
            ("resend_api_key", settings.resend_api_key),
            ("resend_audience_id", settings.resend_audience_id),
        )
        if not value
    ]
    if missing:
        return JSONResponse(
            {"status": "degraded", "missing": missing},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return JSONResponse({"status": "ready", "missing": []})
