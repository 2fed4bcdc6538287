"""siteverify HTTP clients.

RecaptchaClient and AsyncRecaptchaClient either own an httpx client (created
on demand, closed with the wrapper) or borrow one supplied by the caller,
which is reused across calls and never closed here.

httpx applies a timeout to each connect/read/write/pool phase. On top of
that, every call gets a total deadline equal to the largest phase limit, so
a server trickling its answer cannot hold the call open.
"""

import asyncio
import logging
import time
from typing import Union

import httpx

from recaptcha_verify.errors import RecaptchaTimeoutError, RecaptchaTransportError
from recaptcha_verify.models.request import VerificationRequest
from recaptcha_verify.models.result import VerificationResult
from recaptcha_verify.services.parser import parse

logger = logging.getLogger(__name__)

VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"
FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}
DEFAULT_TIMEOUT = 10.0

TimeoutTypes = Union[float, httpx.Timeout, None]


def _prepare(request: VerificationRequest) -> bytes:
    request.validate_params()
    logger.debug(
        f"Verifying reCAPTCHA token (remoteip {'set' if request.remote_ip else 'unset'})"
    )
    return request.marshal()


def _finish(status_code: int, body: bytes) -> VerificationResult:
    if not 200 <= status_code < 300:
        logger.debug(f"reCAPTCHA api answered with status {status_code}")
    result = parse(body)
    logger.debug(f"reCAPTCHA verification finished: success={result.success}")
    return result


def _total_seconds(timeout, client_timeout: httpx.Timeout) -> float | None:
    """Whole-call deadline in seconds, None when any phase is unbounded."""
    if timeout is httpx.USE_CLIENT_DEFAULT:
        timeout = client_timeout
    if isinstance(timeout, httpx.Timeout):
        phases = [timeout.connect, timeout.read, timeout.write, timeout.pool]
        if any(phase is None for phase in phases):
            return None
        return max(phases)
    return timeout


def _deadline_exceeded(total: float) -> RecaptchaTimeoutError:
    return RecaptchaTimeoutError(f"google recaptcha api did not answer within {total}s")


def _wrap_request_error(e: httpx.RequestError) -> Exception:
    if isinstance(e, httpx.TimeoutException):
        return RecaptchaTimeoutError(f"google recaptcha api timed out: {e}")
    return RecaptchaTransportError(f"failed to reach google recaptcha api: {e}")


class RecaptchaClient:
    """Blocking siteverify client."""

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
    ):
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def verify(
        self,
        request: VerificationRequest,
        timeout=httpx.USE_CLIENT_DEFAULT,
    ) -> VerificationResult:
        """Verify a reCAPTCHA v2 or v3 token.

        Raises RecaptchaValidationError before any network call when the
        request is incomplete, RecaptchaTimeoutError when the call exceeds
        timeout, RecaptchaTransportError when the api cannot be reached and
        RecaptchaParseError when its answer is malformed.
        """
        body = _prepare(request)
        total = _total_seconds(timeout, self._client.timeout)
        deadline = None if total is None else time.monotonic() + total

        try:
            with self._client.stream(
                "POST",
                VERIFY_URL,
                content=body,
                headers=FORM_HEADERS,
                timeout=timeout,
            ) as response:
                chunks = []
                for chunk in response.iter_bytes():
                    if deadline is not None and time.monotonic() > deadline:
                        raise _deadline_exceeded(total)
                    chunks.append(chunk)
                if deadline is not None and time.monotonic() > deadline:
                    raise _deadline_exceeded(total)
        except httpx.RequestError as e:
            raise _wrap_request_error(e) from e
        return _finish(response.status_code, b"".join(chunks))

    def close(self) -> None:
        """Close the underlying httpx client if this wrapper created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RecaptchaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncRecaptchaClient:
    """Async siteverify client, safe to share across concurrent tasks."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
    ):
        self._owns_client = http_client is None
        self._client = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        )

    async def verify(
        self,
        request: VerificationRequest,
        timeout=httpx.USE_CLIENT_DEFAULT,
    ) -> VerificationResult:
        """Verify a reCAPTCHA v2 or v3 token. Raises like RecaptchaClient.verify."""
        body = _prepare(request)
        total = _total_seconds(timeout, self._client.timeout)

        try:
            response = await asyncio.wait_for(
                self._client.post(
                    VERIFY_URL,
                    content=body,
                    headers=FORM_HEADERS,
                    timeout=timeout,
                ),
                total,
            )
        except httpx.RequestError as e:
            raise _wrap_request_error(e) from e
        except asyncio.TimeoutError as e:
            raise _deadline_exceeded(total) from e
        return _finish(response.status_code, response.content)

    async def aclose(self) -> None:
        """Close the underlying httpx client if this wrapper created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRecaptchaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def verify(request: VerificationRequest, timeout: TimeoutTypes = None) -> VerificationResult:
    """One-shot verification with a short-lived client. None means no timeout."""
    with RecaptchaClient(timeout=timeout) as client:
        return client.verify(request)


async def verify_async(
    request: VerificationRequest, timeout: TimeoutTypes = None
) -> VerificationResult:
    """One-shot async verification with a short-lived client. None means no timeout."""
    async with AsyncRecaptchaClient(timeout=timeout) as client:
        return await client.verify(request)
