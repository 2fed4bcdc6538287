"""Middleware package."""

from .recaptcha import get_recaptcha_client, require_recaptcha

__all__ = [
    "get_recaptcha_client",
    "require_recaptcha",
]
