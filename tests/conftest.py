"""Shared fixtures for the migration tests."""

import io

import pytest
from rich.console import Console

from cms_migration.config.settings import Settings


class FakeFetcher:
    """Serves canned HTML by URL; unknown URLs fail like a transport error."""

    def __init__(self, pages):
        self.pages = pages
        self.requested = []
        self.closed = False

    def fetch(self, url):
        self.requested.append(url)
        return self.pages.get(url)

    def close(self):
        self.closed = True


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "migration_output.json"


@pytest.fixture
def settings(output_file):
    return Settings(output_file=output_file)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def fake_fetcher_factory():
    return FakeFetcher
