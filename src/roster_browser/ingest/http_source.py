import logging
from collections.abc import Callable
from typing import Any

import httpx

from roster_browser.ingest._retry import http_retry

logger = logging.getLogger(__name__)


class HttpCsvSource:
    """Fetches CSV resources from a static web host."""

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        retry: Callable[[Callable[..., Any]], Callable[..., Any]] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=httpx.Timeout(30.0, connect=10.0))
        self._fetch_with_retry = (retry or http_retry("CSV download"))(self._do_fetch)

    @property
    def source_type(self) -> str:
        return "http"

    @property
    def source_detail(self) -> str:
        return self._base_url

    def locate(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _do_fetch(self, url: str) -> httpx.Response:
        response = self._client.get(url)
        response.raise_for_status()
        return response

    def fetch(self, path: str) -> bytes:
        url = self.locate(path)
        logger.debug("GET %s", url)
        response = self._fetch_with_retry(url)
        logger.debug("%s responded %d (%d bytes)", url, response.status_code, len(response.content))
        return response.content
