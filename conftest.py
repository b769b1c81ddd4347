# conftest.py - Global pytest configuration and fixtures
import os

import pytest

from egypt_national_id.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from EGYPT_NID_* variables and the cached settings"""
    for name in list(os.environ):
        if name.upper().startswith("EGYPT_NID_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Common test data fixtures
@pytest.fixture
def valid_national_ids():
    """National IDs with a correct check digit"""
    return [
        "30101010123458",  # 2001-01-01, Cairo, serial 2345, male
        "30101011234565",  # 2001-01-01, Dakahlia, serial 3456, female
        "30101011200007",  # 2001-01-01, Dakahlia, serial 0000, female
        "30101011200019",  # 2001-01-01, Dakahlia, serial 0001, male
        "28506152500130",  # 1985-06-15, Asyut, serial 0013, male
        "30002290123458",  # 2000-02-29 (leap year), Cairo
        "30505058800115",  # 2005-05-05, born abroad
    ]


@pytest.fixture
def checksum_broken_ids():
    """Structurally valid national IDs whose check digit is wrong"""
    return [
        "30101010123459",
        "30101021234565",
        "29001011234567",
    ]


@pytest.fixture
def invalid_national_ids():
    """National IDs failing a structural rule, with the expected rule"""
    return [
        ("abc123", "InvalidFormat"),
        ("3010101012345", "InvalidFormat"),
        ("301010101234580", "InvalidFormat"),
        ("10101010123454", "InvalidCentury"),
        ("40101010123450", "InvalidCentury"),
        ("30113010123450", "InvalidDate"),
        ("30102300123459", "InvalidDate"),
        ("30101010523452", "InvalidGovernorate"),
    ]


@pytest.fixture
def cairo_id():
    from egypt_national_id import parse
    return parse("30101010123458")


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "smoke: marks tests as smoke tests (critical functionality)"
    )
    config.addinivalue_line(
        "markers", "regression: marks tests as regression tests"
    )
