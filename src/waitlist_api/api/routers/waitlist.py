"""Waitlist signup endpoint."""

from __future__ import annotations

import re
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from waitlist_api.config import get_settings
from waitlist_api.logging import get_logger
from waitlist_api.resend import (
    ContactRegistrationError,
    add_contact,
    get_resend_client,
    send_confirmation_email,
)

router = APIRouter(prefix="/api", tags=["waitlist"])
WAITLIST_PATH = "/api/waitlist"
logger = get_logger("waitlist")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class WaitlistResponse(BaseModel):
    """Response for a successful signup."""

    success: bool
    alreadyExists: bool


class ErrorResponse(BaseModel):
    """Error response."""

    error: str


def json_response(body: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize a response model with the cross-origin headers attached."""
    return JSONResponse(content=body.model_dump(), status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response(ErrorResponse(error=message), status_code)


def normalize_email(value: Any) -> str:
    """Trim and lowercase a raw ``email`` field; a missing value becomes ``""``.

    Raises:
        TypeError: if the value is present but not a string
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"email must be a string, got {type(value).__name__}")
    return value.strip().lower()


def is_valid_email(email: str) -> bool:
    """Minimal shape check: local part, "@", dotted domain, no whitespace."""
    return EMAIL_PATTERN.fullmatch(email) is not None


@router.options("/waitlist", include_in_schema=False)
async def waitlist_preflight() -> Response:
    """Answer a CORS pre-flight check; no configuration is required."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer any method other than POST or OPTIONS on the signup path with a JSON 405.

    Other paths and statuses keep FastAPI's default handling.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path == WAITLIST_PATH:
        response = error_response("Method not allowed", status.HTTP_405_METHOD_NOT_ALLOWED)
        response.headers["Allow"] = CORS_HEADERS["Access-Control-Allow-Methods"]
        return response
    return await http_exception_handler(request, exc)


@router.post(
    "/waitlist",
    summary="Join the waitlist",
    response_model=WaitlistResponse,
    responses={
        200: {"description": "Contact registered (or already registered)"},
        400: {"model": ErrorResponse, "description": "Invalid body or email address"},
        500: {"model": ErrorResponse, "description": "Server configuration missing"},
        502: {"model": ErrorResponse, "description": "Mailing-list provider error"},
    },
)
async def join_waitlist(
    request: Request,
    client: Annotated[httpx.AsyncClient, Depends(get_resend_client)],
) -> Response:
    """Register an email address with the audience and send a confirmation.

    This endpoint:
    1. Checks that the Resend credentials are configured
    2. Parses and normalizes the email address
    3. Adds the contact to the audience (an existing contact is not an error)
    4. Sends the confirmation email on a best-effort basis
    """
    settings = get_settings()
    if not settings.resend_configured:
        logger.error("Resend API key or audience id is not configured")
        return error_response("Server configuration missing", status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        body = await request.json()
    except ValueError:
        return error_response("Invalid JSON body", status.HTTP_400_BAD_REQUEST)
    if not isinstance(body, dict):
        return error_response("Invalid JSON body", status.HTTP_400_BAD_REQUEST)

    try:
        email = normalize_email(body.get("email"))
    except TypeError:
        return error_response("Invalid email address", status.HTTP_400_BAD_REQUEST)

    if not is_valid_email(email):
        return error_response("Invalid email address", status.HTTP_400_BAD_REQUEST)

    try:
        already_exists = await add_contact(client, settings, email)
    except ContactRegistrationError as e:
        logger.error(f"Waitlist signup failed: {e} (status={e.status_code})")
        return error_response("Signup failed", status.HTTP_502_BAD_GATEWAY)

    # The contact is registered at this point; a failed email does not undo that.
    await send_confirmation_email(client, settings, email)

    return json_response(WaitlistResponse(success=True, alreadyExists=already_exists))
