"""
Page Fetcher Module

Retrieves raw HTML for the pages being migrated. Any transport problem is
reported as a missing page rather than an exception.
"""

import requests
from bs4.dammit import EncodingDetector
import logging

from .config.settings import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches HTML pages with a browser-like User-Agent."""

    def __init__(self, user_agent=DEFAULT_USER_AGENT, timeout=None):
        """
        Initialize the PageFetcher.

        Args:
            user_agent (str): User agent string for requests
            timeout (float): Request timeout in seconds, None for no explicit timeout
        """
        self.timeout = timeout

        # Request session for connection pooling
        self.session = requests.Session()

        # Some CMS front ends reject the default python-requests agent
        self.session.headers.update({
            'User-Agent': user_agent
        })

    def _decode(self, response):
        """
        Decode a response body to text.

        Args:
            response (requests.Response): Successful response

        Returns:
            str: Body text
        """
        content_type = response.headers.get('Content-Type', '')
        candidates = []
        if 'charset=' in content_type.lower() and response.encoding:
            candidates.append(response.encoding)

        # Many CMS pages only declare their charset in a <meta> tag
        declared = EncodingDetector.find_declared_encoding(response.content, is_html=True)
        if declared:
            candidates.append(declared)

        for encoding in candidates:
            try:
                return response.content.decode(encoding, errors='replace')
            except LookupError:
                logger.debug(f"Unknown charset {encoding}")

        return response.content.decode('utf-8', errors='replace')

    def fetch(self, url):
        """
        Fetch a webpage.

        Args:
            url (str): URL to fetch

        Returns:
            str or None: HTML content or None if fetch failed
        """
        try:
            logger.debug(f"Fetching: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.debug(f"Error fetching {url}: {e}")
            return None

        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return self._decode(response)

    def close(self):
        """Clean up resources."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
