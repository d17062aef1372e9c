"""Unit tests for settings loading."""
import json
import logging

import pytest

from settings import load_settings


@pytest.fixture
def settings_file(tmp_path):
    """Write a JSON settings file and return its path."""
    def _write(data):
        path = tmp_path / 'appsettings.json'
        path.write_text(json.dumps(data), encoding='utf-8')
        return str(path)
    return _write


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_defaults(self, tmp_path):
        settings = load_settings(environ={}, settings_file=str(tmp_path / 'missing.json'))

        assert settings.events_url == 'https://mlh.io/seasons/2024/events'
        assert settings.location_filter == 'South Africa'
        assert settings.smtp_host == 'smtp.gmail.com'
        assert settings.smtp_port == 587
        assert settings.timeout_seconds == 30
        assert settings.log_level == 'INFO'
        assert settings.credentials.sender is None
        assert not settings.credentials.is_complete

    def test_environment_credentials(self, tmp_path):
        environ = {
            'EMAIL_SENDER': 'alerts@example.com',
            'EMAIL_RECEIVER': 'me@example.com',
            'EMAIL_PASSWORD': 'secret',
        }

        settings = load_settings(environ=environ, settings_file=str(tmp_path / 'none.json'))

        assert settings.credentials.sender == 'alerts@example.com'
        assert settings.credentials.receiver == 'me@example.com'
        assert settings.credentials.password == 'secret'
        assert settings.credentials.is_complete

    def test_settings_file_values(self, settings_file):
        path = settings_file({
            'EMAIL_SENDER': 'file@example.com',
            'EMAIL_RECEIVER': 'me@example.com',
            'EMAIL_PASSWORD': 'from-file',
            'SMTP_PORT': 465,
            'UNRELATED': 'ignored',
        })

        settings = load_settings(environ={}, settings_file=path)

        assert settings.credentials.sender == 'file@example.com'
        assert settings.credentials.password == 'from-file'
        assert settings.smtp_port == 465

    def test_environment_overrides_settings_file(self, settings_file):
        path = settings_file({
            'EMAIL_SENDER': 'file@example.com',
            'EMAIL_PASSWORD': 'from-file',
        })
        environ = {'EMAIL_SENDER': 'env@example.com', 'EMAIL_PASSWORD': ''}

        settings = load_settings(environ=environ, settings_file=path)

        assert settings.credentials.sender == 'env@example.com'
        assert settings.credentials.password == ''

    def test_settings_file_from_environment(self, settings_file):
        path = settings_file({'LOCATION_FILTER': 'Kenya'})

        settings = load_settings(environ={'SETTINGS_FILE': path})

        assert settings.location_filter == 'Kenya'

    def test_invalid_settings_file_is_ignored(self, tmp_path, caplog):
        path = tmp_path / 'appsettings.json'
        path.write_text('{not json', encoding='utf-8')

        with caplog.at_level(logging.WARNING):
            settings = load_settings(environ={}, settings_file=str(path))

        assert settings.smtp_host == 'smtp.gmail.com'
        assert any('Ignoring unreadable settings file' in r.message for r in caplog.records)

    def test_non_object_settings_file_is_ignored(self, settings_file):
        path = settings_file(['EMAIL_SENDER'])

        settings = load_settings(environ={}, settings_file=path)

        assert settings.credentials.sender is None

    def test_invalid_integer_falls_back_to_default(self, tmp_path):
        environ = {'SMTP_PORT': 'abc', 'TIMEOUT_SECONDS': '12'}

        settings = load_settings(environ=environ, settings_file=str(tmp_path / 'none.json'))

        assert settings.smtp_port == 587
        assert settings.timeout_seconds == 12

    def test_settings_file_values_become_strings(self, settings_file):
        path = settings_file({
            'EMAIL_SENDER': 'file@example.com',
            'EMAIL_RECEIVER': None,
            'EMAIL_PASSWORD': 12345,
        })

        settings = load_settings(environ={}, settings_file=path)

        assert settings.credentials.password == '12345'
        assert settings.credentials.receiver is None
