"""reCAPTCHA verification policy driven by application settings."""

import logging

from recaptcha_verify.config import get_settings
from recaptcha_verify.models.request import VerificationRequest
from recaptcha_verify.models.result import VerificationResult
from recaptcha_verify.services.client import AsyncRecaptchaClient

logger = logging.getLogger(__name__)


def is_acceptable(
    result: VerificationResult,
    min_score: float,
    action: str | None = None,
) -> bool:
    """Decide whether a parsed verdict should let the request through."""
    if not result.success:
        logger.warning(f"reCAPTCHA rejected: {', '.join(result.error_codes) or 'no error codes'}")
        return False

    if result.is_v3 and result.score < min_score:
        logger.warning(f"reCAPTCHA score {result.score} below threshold {min_score}")
        return False

    if action is not None and result.action != action:
        logger.warning(f"reCAPTCHA action mismatch: expected {action!r}, got {result.action!r}")
        return False

    return True


async def verify_recaptcha(
    token: str,
    remote_ip: str | None = None,
    action: str | None = None,
    client: AsyncRecaptchaClient | None = None,
) -> bool:
    """Verify a reCAPTCHA token. Returns True if valid.

    Verification is skipped (and passes) when disabled or when no secret key
    is configured. Errors from the api call propagate to the caller.
    """
    settings = get_settings()

    if not settings.recaptcha_enabled or not settings.recaptcha_secret_key:
        return True  # Skip verification if not configured

    request = VerificationRequest(
        secret=settings.recaptcha_secret_key,
        response=token,
        remote_ip=remote_ip or "",
    )

    if client is not None:
        result = await client.verify(request, timeout=settings.recaptcha_timeout)
    else:
        async with AsyncRecaptchaClient(timeout=settings.recaptcha_timeout) as owned:
            result = await owned.verify(request)

    return is_acceptable(result, settings.recaptcha_min_score, action)
