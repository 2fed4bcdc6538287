"""siteverify response parsing.

The response shape depends on the verdict: failures only carry error-codes,
successes carry challenge_ts and hostname (or apk_package_name), and v3
successes add score and action. Presence of a field matters as much as its
value, so every read goes through _lookup, which returns MISSING for absent
fields and the raw JSON value (None included) otherwise.
"""

import json
import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any

from recaptcha_verify.errors import (
    FieldTypeError,
    InvalidJSONError,
    MissingFieldError,
    TimestampParseError,
)
from recaptcha_verify.models.result import VerificationResult

logger = logging.getLogger(__name__)

MISSING = object()

# YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"(?:(Z)|([+-])(\d{2}):(\d{2}))$",
    re.ASCII,
)


def _lookup(doc: Any, field: str) -> Any:
    if not isinstance(doc, dict):
        return MISSING
    return doc.get(field, MISSING)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def parse_rfc3339(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp into a timezone-aware datetime."""
    if not isinstance(value, str):
        raise TimestampParseError(value)

    match = RFC3339_PATTERN.match(value)
    if match is None:
        raise TimestampParseError(value)

    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()

    if zulu:
        tz = timezone.utc
    else:
        if int(off_h) > 23 or int(off_m) > 59:
            raise TimestampParseError(value)
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(-offset if sign == "-" else offset)

    microsecond = int((fraction or "0")[:6].ljust(6, "0"))

    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            microsecond,
            tzinfo=tz,
        )
    except ValueError:
        raise TimestampParseError(value) from None


def _parse_failure(doc: dict) -> VerificationResult:
    codes = _lookup(doc, "error-codes")
    if codes is MISSING:
        raise MissingFieldError("error-codes")
    if not isinstance(codes, list):
        raise FieldTypeError("error-codes", "an array", codes)

    for code in codes:
        if not isinstance(code, str):
            raise FieldTypeError("error-codes", "an array of strings", code)

    logger.debug(f"reCAPTCHA verification failed: {codes}")
    return VerificationResult(success=False, error_codes=tuple(codes))


def _parse_success(doc: dict) -> VerificationResult:
    score = 0.0
    action = ""
    is_v3 = False

    # v3 only
    value = _lookup(doc, "score")
    if value is not MISSING:
        if not _is_number(value):
            raise FieldTypeError("score", "a finite number", value)
        score = float(value)
        is_v3 = True

    value = _lookup(doc, "action")
    if value is not MISSING:
        if not isinstance(value, str):
            raise FieldTypeError("action", "a string", value)
        action = value
        is_v3 = True

    value = _lookup(doc, "challenge_ts")
    if value is MISSING:
        raise MissingFieldError("challenge_ts")
    challenge_ts = parse_rfc3339(value)

    field = "hostname"
    value = _lookup(doc, field)
    if value is MISSING:
        field = "apk_package_name"
        value = _lookup(doc, field)
    if value is MISSING:
        raise MissingFieldError("hostname/apk_package_name")
    if not isinstance(value, str):
        raise FieldTypeError(field, "a string", value)

    return VerificationResult(
        success=True,
        score=score,
        action=action,
        challenge_ts=challenge_ts,
        hostname=value,
        is_v3=is_v3,
    )


def parse(body: bytes | str) -> VerificationResult:
    """Parse a reCAPTCHA v2 or v3 siteverify response body.

    Raises a RecaptchaParseError subclass when the body is not valid JSON or
    does not match the documented response shape. Never returns a successful
    result for a malformed body.
    """
    try:
        doc = json.loads(body)
    except ValueError as e:
        raise InvalidJSONError(str(e)) from e

    success = _lookup(doc, "success")
    if success is MISSING:
        raise MissingFieldError("success")
    if not isinstance(success, bool):
        raise FieldTypeError("success", "a boolean", success)

    if not success:
        return _parse_failure(doc)
    return _parse_success(doc)
