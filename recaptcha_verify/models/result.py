"""Parsed siteverify verdict."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class VerificationResult(BaseModel):
    """Response from the siteverify endpoint.

    A failed verification only carries error_codes. A successful one carries
    challenge_ts and hostname, plus score and action for v3 tokens.
    """

    model_config = ConfigDict(frozen=True)

    # Whether the token was valid for this site
    success: bool

    # (v3) 0.0 is very likely a bot, 1.0 very likely a human
    score: float = 0.0
    # (v3) Action name passed to grecaptcha.execute()
    action: str = ""

    # When the challenge was loaded
    challenge_ts: datetime | None = None
    # Site hostname, or APK package name for Android
    hostname: str = ""

    error_codes: tuple[str, ...] = ()

    # Set when the payload carried score or action, even if zero-valued
    is_v3: bool = False
