"""Scraper for the Major League Hacking events listing."""
import logging
from typing import List, Optional, Union

import requests
from bs4 import BeautifulSoup

from processor.models import EventRecord, FetchResult

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://mlh.io/seasons/2024/events"


class MalformedEventError(ValueError):
    """Raised when an event container lacks an expected sub-element."""


class MlhEventsScraper:
    """Scraper for the MLH season events page."""

    CONTAINER_CLASS = 'event'
    DATE_CLASS = 'event-date'
    LOCATION_CLASS = 'event-location'

    def __init__(self, url: str = DEFAULT_URL, timeout: int = 30):
        """
        Initialize the events scraper.

        Args:
            url: Events listing URL
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.url = url
        self.timeout = timeout

    def fetch_page(self) -> FetchResult:
        """
        Fetch the events listing HTML with a single GET request.

        Returns:
            FetchResult holding the raw page bytes, or the error on failure
        """
        logger.info(f"Fetching events page: {self.url}")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching hackathons: {e}")
            return FetchResult(
                url=self.url,
                error=str(e),
                error_type=type(e).__name__
            )

        return FetchResult(url=self.url, content=response.content)

    def parse_events(self, html_content: Union[bytes, str]) -> List[EventRecord]:
        """
        Parse events from the listing HTML, in document order.

        Containers missing a heading, date, location or link are skipped
        with a warning.

        Args:
            html_content: HTML of the events page; bytes are decoded using
                the page's declared charset

        Returns:
            List of EventRecord objects
        """
        soup = BeautifulSoup(html_content, 'html.parser')
        events = []

        containers = soup.find_all('div', class_=self.CONTAINER_CLASS)

        for index, element in enumerate(containers):
            try:
                events.append(self._parse_event_element(element))
            except MalformedEventError as e:
                logger.warning(f"Skipping event container #{index + 1}: {e}")

        logger.info(
            f"Extracted {len(events)} events from {len(containers)} containers"
        )
        return events

    def _parse_event_element(self, element) -> EventRecord:
        """
        Parse a single event container.

        Raises:
            MalformedEventError: If an expected sub-element is missing
        """
        title_elem = self._require(element.find('h3'), 'heading')
        date_elem = self._require(
            element.find('div', class_=self.DATE_CLASS), 'date'
        )
        location_elem = self._require(
            element.find('div', class_=self.LOCATION_CLASS), 'location'
        )
        link_elem = self._require(element.find('a'), 'link')

        return EventRecord(
            title=title_elem.get_text().strip(),
            date=date_elem.get_text().strip(),
            location=location_elem.get_text().strip(),
            link=(link_elem.get('href') or '').strip()
        )

    @staticmethod
    def _require(node: Optional[object], part: str):
        if node is None:
            raise MalformedEventError(f"missing {part} element")
        return node
