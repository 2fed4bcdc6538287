"""Exceptions raised while verifying a reCAPTCHA token.

Every error derives from RecaptchaError. The four direct subclasses tell
apart the stage that failed:

- RecaptchaValidationError: the request was incomplete, nothing was sent
- RecaptchaTransportError: the endpoint could not be reached
- RecaptchaTimeoutError: the call exceeded its deadline
- RecaptchaParseError: the endpoint answered with an unexpected body
"""


class RecaptchaError(Exception):
    """Base class for all reCAPTCHA verification errors."""


# --- Request validation ---


class RecaptchaValidationError(RecaptchaError):
    """The verification request is missing a required parameter."""


class MissingSecretError(RecaptchaValidationError):
    def __init__(self) -> None:
        super().__init__("secret must not be empty")


class MissingResponseError(RecaptchaValidationError):
    def __init__(self) -> None:
        super().__init__("response must not be empty")


# --- Transmission ---


class RecaptchaTransportError(RecaptchaError):
    """The verification endpoint could not be reached."""


class RecaptchaTimeoutError(RecaptchaError, TimeoutError):
    """The verification call did not complete within its timeout."""


# --- Response parsing ---


class RecaptchaParseError(RecaptchaError):
    """The verification endpoint returned a body we cannot trust."""


class InvalidJSONError(RecaptchaParseError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to parse api json response: {reason}")
        self.reason = reason


class MissingFieldError(RecaptchaParseError):
    def __init__(self, field: str) -> None:
        super().__init__(f"json field '{field}' not found")
        self.field = field


class FieldTypeError(RecaptchaParseError):
    def __init__(self, field: str, expected: str, actual: object) -> None:
        super().__init__(
            f"json field '{field}' must be {expected}, got {type(actual).__name__}"
        )
        self.field = field
        self.expected = expected


class TimestampParseError(RecaptchaParseError):
    def __init__(self, value: object) -> None:
        super().__init__(f"json field 'challenge_ts' is not an RFC 3339 timestamp: {value!r}")
        self.field = "challenge_ts"
        self.value = value
