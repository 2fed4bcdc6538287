"""reCAPTCHA middleware - FastAPI dependency guarding routes."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from recaptcha_verify.errors import RecaptchaError, RecaptchaTimeoutError
from recaptcha_verify.services.client import AsyncRecaptchaClient
from recaptcha_verify.services.recaptcha import verify_recaptcha

TOKEN_HEADER = "X-Recaptcha-Token"


async def get_recaptcha_client() -> AsyncRecaptchaClient | None:
    """Shared client for verification.

    Returns None so each check uses a short-lived client. Override with
    app.dependency_overrides to reuse a pooled client.
    """
    return None


def require_recaptcha(action: str | None = None):
    """Create a dependency that requires a valid reCAPTCHA token.

    The token is read from the X-Recaptcha-Token header. When action is
    given, v3 tokens must have been issued for that action.
    """
    async def recaptcha_checker(
        request: Request,
        client: Annotated[AsyncRecaptchaClient | None, Depends(get_recaptcha_client)],
        token: Annotated[str | None, Header(alias=TOKEN_HEADER)] = None,
    ) -> None:
        if not token:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing reCAPTCHA token",
            )

        remote_ip = request.client.host if request.client else None

        try:
            ok = await verify_recaptcha(token, remote_ip=remote_ip, action=action, client=client)
        except RecaptchaTimeoutError as e:
            raise HTTPException(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                detail="reCAPTCHA verification timed out",
            ) from e
        except RecaptchaError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="reCAPTCHA verification unavailable",
            ) from e

        if not ok:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="reCAPTCHA verification failed",
            )
    return recaptcha_checker
