"""Event processor for selecting events by location."""
import logging
from typing import Iterable, List

from processor.models import EventRecord

logger = logging.getLogger(__name__)


class EventProcessor:
    """Keeps events whose location contains a target substring."""

    TARGET_LOCATION = 'South Africa'

    def __init__(self, target_location: str = TARGET_LOCATION):
        self.target_location = target_location

    def matches(self, event: EventRecord) -> bool:
        """Case-sensitive substring test on the event location."""
        return self.target_location in event.location

    def filter_events(self, events: Iterable[EventRecord]) -> List[EventRecord]:
        """
        Filter events by location, preserving their order.

        Args:
            events: Events in document order

        Returns:
            Events whose location contains the target location
        """
        events = list(events)
        matched = [event for event in events if self.matches(event)]

        logger.info(
            f"{len(matched)} of {len(events)} events located in "
            f"'{self.target_location}'"
        )
        return matched
