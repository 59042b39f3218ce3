"""Configuration and error translation shared by the blocking and async clients."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from trivia_client.config.settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from trivia_client.errors import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

CATEGORIES_PATH = "/api_category.php"
QUESTIONS_PATH = "/api.php"


class BaseTriviaClient:
    """
    Holds the connection settings for one Open Trivia DB endpoint.

    Subclasses implement a single GET primitive for their concurrency model
    and build the fetch operations on top of it. A new httpx client is opened
    for every request, so instances carry no connection state.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs):
        """Build a client from application settings."""
        return cls(base_url=settings.base_url, timeout=settings.timeout_seconds, **kwargs)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, timeout={self.timeout!r})"


@contextmanager
def translate_errors(url: str) -> Iterator[None]:
    """
    Re-raise httpx failures as trivia_client errors.

    Args:
        url: The URL being requested, attached to the raised error

    Raises:
        HttpStatusError: On a non-2xx response
        DecodeError: If the body cannot be decompressed
        TransportError: On connection, DNS, timeout, redirect, URL or protocol failures
    """
    try:
        yield
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        logger.warning("GET %s returned HTTP %d", url, status_code)
        raise HttpStatusError(status_code, url) from exc
    except httpx.DecodingError as exc:
        logger.warning("GET %s returned an undecodable body: %s", url, exc)
        raise DecodeError(f"Could not decode response body from {url}: {exc}") from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.warning("GET %s failed: %s", url, exc)
        raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc
