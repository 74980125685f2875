"""
HTTP exchange helper for provider calls.

Every call produces a RequestResponse describing what went over the wire,
whether or not it succeeded, so callers can record it on a delivery status.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from ..domain.errors import TransportError
from .logging import Timer

logger = structlog.get_logger()

REDACTED = "********"

_REDACTED_HEADERS = frozenset({"authorization"})


@dataclass(frozen=True)
class RequestResponse:
    """Trace of one HTTP request and its response (if any)."""

    method: str
    url: str
    status_code: int  # 0 when no response was received
    request: str
    response: str
    body: bytes
    elapsed_ms: float

    def json(self) -> Any:
        """Decode the response body as JSON. Raises ValueError if it isn't."""
        return json.loads(self.body)


async def make_http_request(
    client: httpx.AsyncClient,
    request: httpx.Request,
    redact: Iterable[str] = (),
) -> RequestResponse:
    """
    Send a request and trace the exchange.

    Args:
        client: Shared HTTP client; its timeout bounds the call
        request: Request built with ``client.build_request``
        redact: Secret values to mask in the recorded request

    Returns:
        RequestResponse for a 2xx response

    Raises:
        TransportError: On network failure or a non-2xx response, with the
            trace available as ``request_response``
    """
    secrets = [s for s in redact if s]
    request_dump = _dump_request(request, secrets)

    timer = Timer()
    try:
        with timer:
            response = await client.send(request)
    except httpx.HTTPError as e:
        rr = RequestResponse(
            method=request.method,
            url=str(request.url),
            status_code=0,
            request=request_dump,
            response="",
            body=b"",
            elapsed_ms=timer.duration_ms,
        )
        logger.warning(
            "Provider request failed",
            url=rr.url,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise TransportError(f"unable to connect to server: {e}", request_response=rr) from e

    rr = RequestResponse(
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        request=request_dump,
        response=_dump_response(response),
        body=response.content,
        elapsed_ms=timer.duration_ms,
    )

    logger.debug(
        "Provider request completed",
        url=rr.url,
        status_code=rr.status_code,
        duration_ms=rr.elapsed_ms,
    )

    if not response.is_success:
        raise TransportError(
            f"received non 200 status: {response.status_code}",
            request_response=rr,
        )
    return rr


def _dump_request(request: httpx.Request, secrets: list[str]) -> str:
    lines = [f"{request.method} {request.url.raw_path.decode()} HTTP/1.1", f"Host: {request.url.host}"]
    for name, value in request.headers.items():
        if name.lower() == "host":
            continue
        if name.lower() in _REDACTED_HEADERS:
            value = REDACTED
        lines.append(f"{name}: {value}")
    dump = "\r\n".join(lines) + "\r\n\r\n" + request.content.decode(errors="replace")
    for secret in secrets:
        dump = dump.replace(secret, REDACTED)
    return dump


def _dump_response(response: httpx.Response) -> str:
    lines = [f"HTTP/1.1 {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + response.text
