"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import pytest

from roster_browser.domain.dataset import RESOURCE_PATHS, Dataset
from roster_browser.ingest.loader import PlayerLoader
from tests.fakes.sources import BATTERS_CSV, PITCHERS_CSV, FakeSource


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource(
        {
            RESOURCE_PATHS[Dataset.BATTERS]: BATTERS_CSV,
            RESOURCE_PATHS[Dataset.PITCHERS]: PITCHERS_CSV,
        }
    )


@pytest.fixture
def loader(fake_source: FakeSource) -> PlayerLoader:
    return PlayerLoader(fake_source)
