"""Async HTTP page fetching using httpx for PyScholar.

This module provides the page fetcher used by the pagination engine and
the facade:
- HTTP/2 support
- Per-request timeouts
- Rotating user agent, referer and accumulated cookies
- Optional retry with exponential backoff (disabled by default)
"""

import asyncio
import random
import time

import httpx

from pyscholar.core.config import PUBLICATIONS_MODE_MARKER
from pyscholar.core.config import config
from pyscholar.exceptions import InvalidRequestError
from pyscholar.exceptions import NotFoundError
from pyscholar.exceptions import TransportError
from pyscholar.logger import get_logger
from pyscholar.logger import log_request
from pyscholar.models import SortBy

from .headers import RequestProfile

logger = get_logger()


def get_async_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create an httpx async client for page requests.

    Parameters
    ----------
    timeout : float, optional
        Read/write/pool timeout in seconds. Uses ``config.total_timeout``
        if None.

    Returns
    -------
    httpx.AsyncClient
        Async client with timeout configuration.
    """
    total = config.total_timeout if timeout is None else timeout
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=min(config.connect_timeout, total),
            read=total,
            write=total,
            pool=total,
        ),
        http2=config.http2,
        follow_redirects=True,
    )


def _response_excerpt(response: httpx.Response) -> str | None:
    return response.text[:200] if response.text else None


async def _handle_retryable_error(
    response: httpx.Response,
    attempt: int,
    max_retries: int,
    backoff_factor: float,
    url: str,
) -> float:
    """Handle retryable HTTP errors.

    Returns:
        Sleep time in seconds before the next attempt

    Raises:
        TransportError: If max retries reached
    """
    if attempt >= max_retries:
        error_msg = f"HTTP {response.status_code} error"
        if response.status_code == 429:
            error_msg = "Too many requests"
        elif response.status_code >= 500:
            error_msg = "Server error"
        raise TransportError(
            error_msg,
            url=url,
            status_code=response.status_code,
            response_text=_response_excerpt(response),
        )

    retry_after = response.headers.get("Retry-After")
    if response.status_code == 429 and retry_after and retry_after.isdigit():
        return int(retry_after)

    # Exponential backoff with jitter
    return backoff_factor * (2**attempt) + (time.time() % 1) * 0.1


def _handle_non_retryable_error(response: httpx.Response, url: str) -> None:
    """Handle non-retryable HTTP errors.

    Raises:
        NotFoundError: For 404 responses
        InvalidRequestError: For 400 responses
        TransportError: For every other error status
    """
    if response.status_code == 404:
        raise NotFoundError("Page not found", resource=url)
    if response.status_code == 400:
        raise InvalidRequestError("Bad request", field="url", value=url)

    error_msg = f"HTTP {response.status_code} error"
    if response.status_code >= 500:
        error_msg = "Server error"
    raise TransportError(
        error_msg,
        url=url,
        status_code=response.status_code,
        response_text=_response_excerpt(response),
    )


class PageFetcher:
    """Fetch raw page text from the scholar site.

    Parameters
    ----------
    profile : RequestProfile, optional
        Header/cookie configuration. Cookies set by the server are merged
        into a new profile after each response.
    client : httpx.AsyncClient, optional
        Shared client, owned and closed by the caller. When omitted a
        short-lived client is opened per request, or one client for the
        duration of an ``async with`` block.
    base_url : str, optional
        Site root. Uses ``config.base_url`` if None.
    timeout : float, optional
        Per-request timeout in seconds.
    max_retries : int, optional
        Retries for retryable statuses and network errors. Uses
        ``config.max_retries`` (0 by default) if None.
    backoff_factor : float, optional
        Backoff factor for retries.
    rng : random.Random, optional
        Source of randomness for user-agent rotation.
    """

    def __init__(
        self,
        profile: RequestProfile | None = None,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_factor: float | None = None,
        rng: random.Random | None = None,
    ):
        self.profile = profile or RequestProfile()
        self.client = client
        # Set when the client was opened by __aenter__ rather than injected
        self._owns_client = False
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.timeout = timeout
        self.max_retries = config.max_retries if max_retries is None else max_retries
        self.backoff_factor = (
            config.retry_backoff_factor if backoff_factor is None else backoff_factor
        )
        self.rng = rng

    @property
    def citations_url(self) -> str:
        return f"{self.base_url}/citations"

    async def fetch_html(self, url: str, params: dict | None = None) -> str:
        """GET ``url`` and return the response body as text.

        Raises
        ------
        InvalidRequestError
            If the URL cannot be requested at all.
        TransportError
            On network failure, timeout or error status.
        NotFoundError
            On 404.
        """
        if self.client is not None:
            return await self._get_with_retry(self.client, url, params)
        async with get_async_client(self.timeout) as client:
            return await self._get_with_retry(client, url, params)

    async def _get_with_retry(
        self, client: httpx.AsyncClient, url: str, params: dict | None
    ) -> str:
        retry_codes = set(config.retry_http_codes)
        log_request(url, params)

        for attempt in range(self.max_retries + 1):
            try:
                response = await client.get(
                    url, params=params, headers=self.profile.build_headers(self.rng)
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
                raise InvalidRequestError(
                    f"Invalid URL: {e}", field="url", value=url
                ) from e
            except httpx.TimeoutException as e:
                if attempt >= self.max_retries:
                    raise TransportError(f"Request timed out: {e}", url=url) from e
                await asyncio.sleep(self._backoff(attempt))
                continue
            except httpx.RequestError as e:
                if attempt >= self.max_retries:
                    raise TransportError(f"Network error: {e}", url=url) from e
                await asyncio.sleep(self._backoff(attempt))
                continue

            # Redirect hops may set cookies too
            for hop in (*response.history, response):
                if hop.cookies:
                    self.profile = self.profile.with_cookies(dict(hop.cookies))

            request_url = str(response.request.url)

            if response.status_code in retry_codes:
                sleep_time = await _handle_retryable_error(
                    response,
                    attempt,
                    self.max_retries,
                    self.backoff_factor,
                    request_url,
                )
                logger.debug(
                    f"Retrying {request_url} in {sleep_time:.2f}s "
                    f"(status {response.status_code})"
                )
                await asyncio.sleep(sleep_time)
                continue

            if response.status_code >= 400:
                _handle_non_retryable_error(response, request_url)

            return response.text

        # Should not reach here
        raise TransportError(
            f"Failed to fetch {url} after {self.max_retries} retries", url=url
        )

    def _backoff(self, attempt: int) -> float:
        return self.backoff_factor * (2**attempt) + (time.time() % 1) * 0.1

    async def fetch_publications_page(
        self,
        author_id: str,
        offset: int,
        page_size: int,
        sort_by: SortBy = SortBy.CITED,
    ) -> str:
        """Fetch one page of an author's publication table."""
        params = {
            "user": author_id,
            "hl": config.language,
            "oi": PUBLICATIONS_MODE_MARKER,
            "cstart": offset,
            "pagesize": page_size,
            "sortby": SortBy.coerce(sort_by).value,
        }
        return await self.fetch_html(self.citations_url, params)

    async def fetch_author_page(self, author_id: str) -> str:
        """Fetch an author's profile page (summary, co-authors, details)."""
        params = {"user": author_id, "hl": config.language}
        return await self.fetch_html(self.citations_url, params)

    async def aclose(self) -> None:
        """Close the client opened by ``async with``; an injected client is left open."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()
            self.client = None
            self._owns_client = False

    async def __aenter__(self) -> "PageFetcher":
        if self.client is None:
            self.client = get_async_client(self.timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
