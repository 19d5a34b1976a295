"""Outbound calls to the Resend contacts and emails APIs."""

from __future__ import annotations

from typing import AsyncGenerator

import httpx

from waitlist_api.config import Settings, get_settings
from waitlist_api.email import create_confirmation_email_html
from waitlist_api.logging import get_logger

logger = get_logger("resend")

DUPLICATE_MARKER = "already"


class ContactRegistrationError(Exception):
    """Raised when a contact could not be added to the audience."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


async def get_resend_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency for FastAPI routes to get a client bound to the Resend API."""
    settings = get_settings()
    async with httpx.AsyncClient(base_url=settings.resend_api_url) as client:
        yield client


def _auth_headers(settings: Settings) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.resend_api_key}",
        "Content-Type": "application/json",
    }


def _error_message(response: httpx.Response) -> str:
    """Return the provider's error message, or the raw body if it is not JSON."""
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return response.text


def is_duplicate_contact(status_code: int, message: str) -> bool:
    """Check whether a failed contact creation means the address is already listed.

    A 409 conflict is the primary signal. Resend has also answered duplicates
    with an error message mentioning the address is "already" present.
    """
    return status_code == httpx.codes.CONFLICT or DUPLICATE_MARKER in message.lower()


async def add_contact(client: httpx.AsyncClient, settings: Settings, email: str) -> bool:
    """Add an email address to the configured Resend audience.

    Args:
        client: HTTP client bound to the Resend API
        settings: Settings carrying the API key and audience id
        email: Normalized email address

    Returns:
        True if the contact already existed, False if it was newly added

    Raises:
        ContactRegistrationError: on any other upstream or network failure
    """
    try:
        response = await client.post(
            f"/audiences/{settings.resend_audience_id}/contacts",
            headers=_auth_headers(settings),
            json={"email": email, "unsubscribed": False},
        )
    except httpx.HTTPError as e:
        logger.error(f"Resend audience request failed: {e!r}")
        raise ContactRegistrationError("Network error reaching Resend") from e

    if response.is_success:
        return False

    message = _error_message(response)
    if is_duplicate_contact(response.status_code, message):
        logger.info(f"Contact already registered (status={response.status_code})")
        return True

    logger.error(f"Resend audience error: status={response.status_code} body={response.text}")
    raise ContactRegistrationError("Resend rejected the contact", status_code=response.status_code)


async def send_confirmation_email(client: httpx.AsyncClient, settings: Settings, email: str) -> bool:
    """Send the waitlist confirmation email.

    Returns:
        True if Resend accepted the email, False otherwise
    """
    try:
        response = await client.post(
            "/emails",
            headers=_auth_headers(settings),
            json={
                "from": settings.email_from,
                "to": [email],
                "subject": settings.email_subject,
                "html": create_confirmation_email_html(),
            },
        )
    except httpx.HTTPError as e:
        logger.error(f"Resend email request failed: {e!r}")
        return False

    if not response.is_success:
        logger.error(f"Resend email error: status={response.status_code} body={response.text}")
        return False

    logger.info("Confirmation email sent")
    return True
