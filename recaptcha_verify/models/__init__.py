"""Request and result models."""

from recaptcha_verify.models.request import VerificationRequest
from recaptcha_verify.models.result import VerificationResult

__all__ = [
    "VerificationRequest",
    "VerificationResult",
]
