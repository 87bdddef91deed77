from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import httpx

from roster_browser.config import DataSettings
from roster_browser.domain.dataset import SCHEMAS
from roster_browser.ingest._retry import http_retry
from roster_browser.ingest.http_source import HttpCsvSource
from roster_browser.ingest.loader import PlayerLoader
from roster_browser.ingest.protocols import CsvResourceSource
from roster_browser.ingest.static_source import StaticDirSource
from roster_browser.services.player_browser import PlayerBrowser


@dataclass(frozen=True)
class BrowseContext:
    browser: PlayerBrowser


@contextmanager
def build_source(settings: DataSettings) -> Iterator[CsvResourceSource]:
    if not settings.remote:
        yield StaticDirSource(settings.root)
        return
    client = httpx.Client(timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout))
    try:
        yield HttpCsvSource(settings.base_url, client=client, retry=http_retry("CSV download", settings.attempts))
    finally:
        client.close()


@contextmanager
def build_browse_context(settings: DataSettings) -> Iterator[BrowseContext]:
    with build_source(settings) as source:
        loader = PlayerLoader(source, paths=settings.paths, schemas=SCHEMAS)
        browser = PlayerBrowser(loader)
        try:
            yield BrowseContext(browser=browser)
        finally:
            browser.close()
