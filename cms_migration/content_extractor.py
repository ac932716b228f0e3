"""
Content Extractor Module

This module pulls the migratable content fragments out of a page using the
configured CSS selectors and labels each one with its component name.
"""

from bs4 import BeautifulSoup
import logging

from .schemas.datamodel import ExtractedItem
from .registry import MAIN_CONTENT_SELECTOR

logger = logging.getLogger(__name__)

# Characters stripped from both ends of an element's text
TRIM_CHARACTERS = ' \t\n\r\x00\x0b'

DATA_VALUE_SEPARATOR = ' - '


def element_value(element):
    """
    Derive the migrated value of a single element.

    The trimmed text content is used as is, or prefixed with the element's
    ``data-value`` attribute when that attribute is present and non-empty.

    Args:
        element: BeautifulSoup element

    Returns:
        str: Derived value, possibly empty
    """
    value = element.get_text().strip(TRIM_CHARACTERS)

    data_value = element.get('data-value')
    if data_value:
        value = f"{data_value}{DATA_VALUE_SEPARATOR}{value}"

    return value


class ContentExtractor:
    """Extracts labelled content fragments from HTML."""

    def __init__(self, scope_selector=MAIN_CONTENT_SELECTOR):
        """
        Initialize the ContentExtractor.

        Args:
            scope_selector (str): Selector of the landmark element that limits queries
        """
        self.scope_selector = scope_selector

    def _find_scope(self, soup):
        """
        Locate the landmark element to search within.

        Args:
            soup: BeautifulSoup object

        Returns:
            tuple: (scope element, True if the landmark was found)
        """
        try:
            scope = soup.select_one(self.scope_selector)
        except Exception as e:
            logger.warning(f"Error filtering main content: {e}. Extracting from entire document.")
            return soup, False

        if scope is None:
            logger.warning(
                'Could not find <main id="main" role="main"> element. Extracting from entire document.'
            )
            return soup, False

        return scope, True

    def _select(self, scope, selector):
        """
        Run one selector against the scope.

        Args:
            scope: Element or document to search
            selector (str): CSS selector

        Returns:
            list or None: Matched elements in document order, None if the query failed
        """
        try:
            return scope.select(selector)
        except Exception as e:
            logger.warning(f"Failed to extract elements for selector '{selector}': {e}")
            return None

    def extract(self, html_content, selector_mapping):
        """
        Extract labelled content from HTML.

        Items are numbered from 1 in selector order, then document order
        within each selector. Elements with an empty value are skipped
        without consuming a number.

        Args:
            html_content (str): Raw HTML content
            selector_mapping: Ordered SelectorRule entries

        Returns:
            dict: Sequence number to ExtractedItem
        """
        soup = BeautifulSoup(html_content, 'html.parser')
        scope, _ = self._find_scope(soup)

        contents = {}
        seq_no = 1

        for rule in selector_mapping:
            elements = self._select(scope, rule.selector)
            if elements is None:
                continue

            for element in elements:
                value = element_value(element)
                if not value:
                    continue

                contents[seq_no] = ExtractedItem(
                    block_id=None,
                    component_name=rule.component_name,
                    value=value
                )
                seq_no += 1

            logger.debug(f"Selector '{rule.selector}' matched {len(elements)} element(s)")

        return contents
