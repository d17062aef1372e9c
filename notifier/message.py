"""Plain-text formatting of events for the notification email."""
from typing import Iterable, List

from processor.models import EventRecord

SUBJECT = "Upcoming Hackathons in South Africa!"


def format_event(event: EventRecord) -> str:
    return f"{event.title} - {event.date} - {event.location} - {event.link}"


def format_events(events: Iterable[EventRecord]) -> List[str]:
    return [format_event(event) for event in events]


def build_body(lines: Iterable[str]) -> str:
    """Join formatted event lines into the email body."""
    return "\n".join(lines)
