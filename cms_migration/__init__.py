"""
CMS Migration Package

Fetches a fixed list of CMS pages, extracts labelled content with CSS
selectors, and saves the results as JSON.
"""

from .migration import CMSMigration
from .fetcher import PageFetcher
from .content_extractor import ContentExtractor, element_value
from .aggregator import MigrationAggregator
from .reporter import MigrationReporter

__version__ = '1.0.0'
__all__ = [
    'CMSMigration',
    'PageFetcher',
    'ContentExtractor',
    'element_value',
    'MigrationAggregator',
    'MigrationReporter'
]
