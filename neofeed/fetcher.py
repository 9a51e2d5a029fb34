"""
Guarded HTTP fetch: one bounded-time GET whose failures are classified
into Timeout, ServerError, NetworkError or UnknownError.
"""

import asyncio
import time
from typing import Any, Dict, Optional

import httpx
import structlog

from .outcome import (
    FetchOutcome,
    NetworkError,
    ServerError,
    Success,
    Timeout,
    UnknownError,
)

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 30000

USER_AGENT = 'NeoFeed/1.0'
DEFAULT_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'application/json',
}


async def fetch_with_guard(
    url: str,
    query_params: Optional[Dict[str, Any]] = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    client: Optional[httpx.AsyncClient] = None,
) -> FetchOutcome:
    """Issue a single GET to ``url`` and return exactly one outcome.

    The whole attempt, connect through body, is bounded by ``timeout_ms``.
    Failures never escape as exceptions; only cancellation by the caller
    propagates. No retries are made.
    """
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be a positive integer, got {timeout_ms!r}")

    timeout = timeout_ms / 1000
    start_time = time.monotonic()

    try:
        outcome = await asyncio.wait_for(
            _request(url, query_params, timeout, client),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        outcome = Timeout()
        logger.warning("fetch_timeout",
                       url=url,
                       category=outcome.kind,
                       timeout_ms=timeout_ms)
        return outcome

    except httpx.NetworkError as e:
        outcome = NetworkError()
        logger.warning("fetch_network_error",
                       url=url,
                       category=outcome.kind,
                       error=str(e))
        return outcome

    except Exception as e:
        outcome = UnknownError()
        logger.error("fetch_unknown_error",
                     url=url,
                     category=outcome.kind,
                     error=f"{type(e).__name__}: {e}",
                     exc_info=True)
        return outcome

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    if isinstance(outcome, ServerError):
        logger.warning("fetch_server_error",
                       url=url,
                       category=outcome.kind,
                       status=outcome.status,
                       elapsed_ms=elapsed_ms)
    elif isinstance(outcome, Success):
        logger.info("fetch_succeeded",
                    url=url,
                    category=outcome.kind,
                    status=outcome.status,
                    elapsed_ms=elapsed_ms)
    return outcome


async def _request(
    url: str,
    query_params: Optional[Dict[str, Any]],
    timeout: float,
    client: Optional[httpx.AsyncClient],
) -> FetchOutcome:
    if client is not None:
        return await _get(client, url, query_params, timeout)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers=DEFAULT_HEADERS,
    ) as own_client:
        return await _get(own_client, url, query_params, timeout)


async def _get(
    client: httpx.AsyncClient,
    url: str,
    query_params: Optional[Dict[str, Any]],
    timeout: float,
) -> FetchOutcome:
    response = await client.get(url, params=query_params, timeout=timeout)

    if response.is_error:
        return ServerError(status=response.status_code)
    if not response.is_success:
        # unfollowed redirect or informational status
        logger.warning("fetch_unexpected_status",
                       url=url,
                       category=UnknownError.kind,
                       status=response.status_code)
        return UnknownError()

    # Undecodable bodies surface as UnknownError in the caller
    payload = response.json() if response.content else None
    return Success(payload=payload, status=response.status_code)
