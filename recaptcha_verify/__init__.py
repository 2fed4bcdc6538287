"""reCAPTCHA v2/v3 token verification against Google's siteverify api."""

from recaptcha_verify.errors import (
    FieldTypeError,
    InvalidJSONError,
    MissingFieldError,
    MissingResponseError,
    MissingSecretError,
    RecaptchaError,
    RecaptchaParseError,
    RecaptchaTimeoutError,
    RecaptchaTransportError,
    RecaptchaValidationError,
    TimestampParseError,
)
from recaptcha_verify.models import VerificationRequest, VerificationResult
from recaptcha_verify.services import (
    VERIFY_URL,
    AsyncRecaptchaClient,
    RecaptchaClient,
    parse,
    verify,
    verify_async,
    verify_recaptcha,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "VerificationRequest",
    "VerificationResult",
    # Clients
    "VERIFY_URL",
    "AsyncRecaptchaClient",
    "RecaptchaClient",
    "parse",
    "verify",
    "verify_async",
    "verify_recaptcha",
    # Errors
    "RecaptchaError",
    "RecaptchaValidationError",
    "MissingSecretError",
    "MissingResponseError",
    "RecaptchaTransportError",
    "RecaptchaTimeoutError",
    "RecaptchaParseError",
    "InvalidJSONError",
    "MissingFieldError",
    "FieldTypeError",
    "TimestampParseError",
]
