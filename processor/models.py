"""Data models for hackathon scraping and notification."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class EventRecord:
    """Event extracted from the events listing page."""
    title: str
    date: str
    location: str
    link: str


@dataclass(frozen=True)
class EmailCredentials:
    """Sender, receiver and password used for SMTP submission."""
    sender: Optional[str]
    receiver: Optional[str]
    password: Optional[str]

    @property
    def is_complete(self) -> bool:
        return bool(self.sender) and bool(self.receiver) and bool(self.password)


@dataclass
class FetchResult:
    """Outcome of fetching the events page."""
    url: str
    content: bytes = b''
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SendResult:
    """Outcome of a single notification attempt."""
    sent: bool
    error: Optional[str] = None
    error_type: Optional[str] = None


class RunOutcome(str, Enum):
    FETCH_FAILED = 'fetch_failed'
    NO_MATCHES = 'no_matches'
    EMAIL_SENT = 'email_sent'
    EMAIL_FAILED = 'email_failed'
    CONFIG_ERROR = 'config_error'


@dataclass
class RunSummary:
    """Result of one pipeline run."""
    outcome: RunOutcome
    events_found: int = 0
    events_matched: int = 0
    error: Optional[str] = None
