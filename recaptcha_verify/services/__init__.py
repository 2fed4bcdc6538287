"""Verification services."""

from .client import (
    VERIFY_URL,
    AsyncRecaptchaClient,
    RecaptchaClient,
    verify,
    verify_async,
)
from .parser import parse, parse_rfc3339
from .recaptcha import is_acceptable, verify_recaptcha

__all__ = [
    "VERIFY_URL",
    "AsyncRecaptchaClient",
    "RecaptchaClient",
    "is_acceptable",
    "parse",
    "parse_rfc3339",
    "verify",
    "verify_async",
    "verify_recaptcha",
]
