"""Tests for environment configuration."""

from __future__ import annotations

import os

import pytest

from versa.config import Settings
from versa.exceptions import ConfigurationError


def test_from_env_reads_names() -> None:
    settings = Settings.from_env(
        {
            'TABLE_NAME': 'items',
            'REPORTS_TABLE': 'reports',
            'BUCKET_NAME': 'uploads',
            'EVENT_BUS_NAME': 'bus',
        }
    )
    assert settings.table_name == 'items'
    assert settings.reports_table == 'reports'
    assert settings.bucket_name == 'uploads'
    assert settings.event_bus_name == 'bus'
    assert settings.upload_url_expires_in == 300
    assert settings.download_url_expires_in == 3600


def test_from_env_defaults_to_os_environ() -> None:
    os.environ['TABLE_NAME'] = 'from-os'
    assert Settings.from_env().table_name == 'from-os'


def test_empty_values_are_unset() -> None:
    settings = Settings.from_env({'EVENT_BUS_NAME': ''})
    assert settings.event_bus_name is None


def test_require_raises_with_env_name() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env({}).require('reports_table')
    assert exc_info.value.config_name == 'REPORTS_TABLE'


def test_require_returns_value() -> None:
    assert Settings.from_env({'BUCKET_NAME': 'b'}).require('bucket_name') == 'b'


@pytest.mark.parametrize('value', ['abc', '0', '-5'])
def test_rejects_bad_expiry(value: str) -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env({'UPLOAD_URL_EXPIRES_IN': value})
