"""
Migration Aggregator Module

Collects the extracted contents of every processed page, keyed by page id
in the order the pages were processed.
"""

import logging

from .schemas.datamodel import MigrationRecord

logger = logging.getLogger(__name__)


class MigrationAggregator:
    """Accumulates migration records per page."""

    def __init__(self):
        self.records = {}

    def record(self, page_id, url, contents):
        """
        Insert or overwrite the record for a page.

        Overwriting keeps the page's original position.

        Args:
            page_id (int): Page identifier
            url (str): Source URL
            contents (dict): Sequence number to ExtractedItem
        """
        if page_id in self.records:
            logger.debug(f"Overwriting record for page {page_id}")

        self.records[page_id] = MigrationRecord(url=url, contents=contents)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __contains__(self, page_id):
        return page_id in self.records
