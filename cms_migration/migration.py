"""
CMS Migration Module

Main migration class that runs every configured page through the fetch,
extract and record steps, then hands the results to the reporter.
"""

import logging

from rich.console import Console

from .registry import PAGE_INFO, SELECTOR_MAPPING
from .fetcher import PageFetcher
from .content_extractor import ContentExtractor
from .aggregator import MigrationAggregator
from .reporter import MigrationReporter

logger = logging.getLogger(__name__)


class CMSMigration:
    """Coordinates one sequential migration run."""

    def __init__(self, settings, pages=PAGE_INFO, selector_mapping=SELECTOR_MAPPING,
                 fetcher=None, console=None):
        """
        Initialize the CMSMigration.

        Args:
            settings: Settings instance (output file, timeout, user agent)
            pages: Ordered PageInfo entries to process
            selector_mapping: Ordered SelectorRule entries to extract
            fetcher (PageFetcher): Fetcher to use (default: built from settings)
            console (Console): Rich console for progress output (default: stdout)
        """
        self.pages = pages
        self.selector_mapping = selector_mapping
        self.console = console or Console()

        self.fetcher = fetcher or PageFetcher(
            user_agent=settings.user_agent,
            timeout=settings.request_timeout
        )
        self.content_extractor = ContentExtractor()
        self.aggregator = MigrationAggregator()
        self.reporter = MigrationReporter(settings.output_file, console=self.console)

    def _say(self, message):
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def process_page(self, page):
        """
        Fetch, extract and record a single page.

        Args:
            page (PageInfo): Page to process

        Returns:
            bool: True if the page was recorded, False if the fetch failed
        """
        self._say(f"Processing Page ID: {page.page_id}")
        self._say(f"URL: {page.url}")

        html_content = self.fetcher.fetch(page.url)
        if html_content is None:
            self._say(f"Failed to fetch HTML from {page.url}\n")
            return False

        contents = self.content_extractor.extract(html_content, self.selector_mapping)
        self.aggregator.record(page.page_id, page.url, contents)

        self._say(f"Extracted {len(contents)} elements\n")
        return True

    def run(self):
        """
        Process every page in order and report the results.

        Returns:
            dict: Page id to MigrationRecord for every page that was fetched
        """
        self._say("Starting CMS Migration...\n")

        try:
            for page in self.pages:
                self.process_page(page)
        finally:
            self.fetcher.close()

        logger.debug(f"Recorded {len(self.aggregator)} of {len(self.pages)} page(s)")

        self.reporter.report(self.aggregator.records)
        return self.aggregator.records
