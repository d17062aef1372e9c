"""Configuration loading from a JSON settings file and environment variables."""
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from processor.models import EmailCredentials

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = 'appsettings.json'

DEFAULTS = {
    'EVENTS_URL': 'https://mlh.io/seasons/2024/events',
    'LOCATION_FILTER': 'South Africa',
    'SMTP_HOST': 'smtp.gmail.com',
    'SMTP_PORT': '587',
    'TIMEOUT_SECONDS': '30',
    'LOG_LEVEL': 'INFO',
}

KEYS = (
    'EMAIL_SENDER',
    'EMAIL_RECEIVER',
    'EMAIL_PASSWORD',
) + tuple(DEFAULTS)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one run."""
    credentials: EmailCredentials
    events_url: str
    location_filter: str
    smtp_host: str
    smtp_port: int
    timeout_seconds: int
    log_level: str


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    settings_file: Optional[str] = None
) -> Settings:
    """
    Resolve settings from defaults, the JSON settings file and the environment.

    Later sources win: defaults < settings file < environment variables.

    Args:
        environ: Environment mapping (default: os.environ)
        settings_file: Path of the JSON settings file (default: SETTINGS_FILE
            environment variable, then appsettings.json)

    Returns:
        Settings object
    """
    if environ is None:
        environ = os.environ
    if settings_file is None:
        settings_file = environ.get('SETTINGS_FILE', DEFAULT_SETTINGS_FILE)

    values: Dict[str, Any] = dict(DEFAULTS)
    values.update(_read_settings_file(settings_file))
    values.update({key: environ[key] for key in KEYS if key in environ})

    return Settings(
        credentials=EmailCredentials(
            sender=values.get('EMAIL_SENDER'),
            receiver=values.get('EMAIL_RECEIVER'),
            password=values.get('EMAIL_PASSWORD')
        ),
        events_url=str(values['EVENTS_URL']),
        location_filter=str(values['LOCATION_FILTER']),
        smtp_host=str(values['SMTP_HOST']),
        smtp_port=_to_int(values, 'SMTP_PORT'),
        timeout_seconds=_to_int(values, 'TIMEOUT_SECONDS'),
        log_level=str(values['LOG_LEVEL'])
    )


def _read_settings_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: expected a JSON object")
        return {}

    return {
        key: None if data[key] is None else str(data[key])
        for key in KEYS if key in data
    }


def _to_int(values: Mapping[str, Any], key: str) -> int:
    try:
        return int(values[key])
    except (TypeError, ValueError):
        logger.warning(
            f"Invalid {key} value {values[key]!r}, using {DEFAULTS[key]}"
        )
        return int(DEFAULTS[key])
