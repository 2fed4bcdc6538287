"""Integration tests against the live siteverify endpoint.

Network tests only run with RECAPTCHA_LIVE_TESTS=1.
"""

import os

import pytest

from recaptcha_verify import (
    MissingResponseError,
    RecaptchaClient,
    VerificationRequest,
    verify,
    verify_async,
)

REQUEST = VerificationRequest(secret="shhhh", response="hhhhhh")

live = pytest.mark.skipif(
    os.getenv("RECAPTCHA_LIVE_TESTS") != "1",
    reason="set RECAPTCHA_LIVE_TESTS=1 to call the real siteverify endpoint",
)


def test_verify_rejects_invalid_request_offline():
    """Test that one-shot verify validates before connecting."""
    with pytest.raises(MissingResponseError):
        verify(VerificationRequest(secret="shhhh", response=""))


@live
@pytest.mark.live
def test_verify_invalid_token():
    """Test that a bogus token is a parsed failure, not an error."""
    result = verify(REQUEST)
    assert not result.success
    assert len(result.error_codes) > 0


@live
@pytest.mark.live
def test_verify_invalid_token_with_timeout():
    """Test the timeout-bounded variant with a shared client."""
    with RecaptchaClient() as client:
        result = client.verify(REQUEST, timeout=3.0)
    assert not result.success
    assert len(result.error_codes) > 0


@live
@pytest.mark.live
@pytest.mark.asyncio
async def test_verify_async_invalid_token():
    """Test async one-shot verification."""
    result = await verify_async(REQUEST, timeout=3.0)
    assert not result.success
    assert len(result.error_codes) > 0
