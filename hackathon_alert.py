"""Entry points and orchestration for the MLH hackathon alert."""
import json
import logging
import sys
import time
from dataclasses import asdict
from typing import Any, Dict, Optional

from notifier.email_notifier import EmailNotifier
from notifier.message import format_events
from processor.event_processor import EventProcessor
from processor.models import RunOutcome, RunSummary
from scraper.mlh_events import MlhEventsScraper
from settings import Settings, load_settings


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


class HackathonAlert:
    """Runs fetch, extract, filter and notify once."""

    def __init__(
        self,
        scraper: MlhEventsScraper,
        processor: EventProcessor,
        notifier: EmailNotifier,
        logger: Optional[logging.Logger] = None
    ):
        self.scraper = scraper
        self.processor = processor
        self.notifier = notifier
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'HackathonAlert':
        """Build the pipeline from resolved settings."""
        return cls(
            scraper=MlhEventsScraper(
                url=settings.events_url,
                timeout=settings.timeout_seconds
            ),
            processor=EventProcessor(target_location=settings.location_filter),
            notifier=EmailNotifier(
                credentials=settings.credentials,
                smtp_host=settings.smtp_host,
                smtp_port=settings.smtp_port,
                timeout=settings.timeout_seconds
            )
        )

    def run(self) -> RunSummary:
        """
        Run the pipeline once.

        Fetch, configuration and transmission errors are logged and
        reported in the summary, never raised.

        Returns:
            RunSummary describing the outcome
        """
        fetch_result = self.scraper.fetch_page()
        if not fetch_result.ok:
            self.logger.error(
                f"Run finished without results: {fetch_result.error}"
            )
            return RunSummary(
                outcome=RunOutcome.FETCH_FAILED,
                error=fetch_result.error
            )

        events = self.scraper.parse_events(fetch_result.content)
        matched = self.processor.filter_events(events)

        if not matched:
            self.logger.info("No hackathons found.")
            return RunSummary(
                outcome=RunOutcome.NO_MATCHES,
                events_found=len(events)
            )

        self.logger.info(f"Sending notification for {len(matched)} hackathons")
        send_result = self.notifier.send(format_events(matched))

        if send_result.sent:
            outcome = RunOutcome.EMAIL_SENT
        elif send_result.error_type == 'configuration':
            outcome = RunOutcome.CONFIG_ERROR
        else:
            outcome = RunOutcome.EMAIL_FAILED

        return RunSummary(
            outcome=outcome,
            events_found=len(events),
            events_matched=len(matched),
            error=send_result.error
        )


def _run_once() -> RunSummary:
    settings = load_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info("Hackathon alert started")

    summary = HackathonAlert.from_settings(settings).run()

    logger.info(
        f"Hackathon alert finished: {summary.outcome.value} "
        f"({summary.events_matched} of {summary.events_found} events matched, "
        f"{round(time.time() - start_time, 2)}s)"
    )
    return summary


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for a scheduled (EventBridge) invocation.

    Args:
        event: EventBridge event payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and run summary; the status code does
        not distinguish outcomes
    """
    summary = _run_once()
    body = asdict(summary)
    body['outcome'] = summary.outcome.value
    return {
        'statusCode': 200,
        'body': json.dumps(body)
    }


def main() -> int:
    _run_once()
    return 0


if __name__ == '__main__':
    sys.exit(main())
