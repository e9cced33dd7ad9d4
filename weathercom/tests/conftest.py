"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weathercom.client import WeatherClient
from weathercom.tests.payloads import (
    FIXTURE_DIR,
    TEST_API_KEY,
    TEST_BASE_URL,
    load_fixture,
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast10_payload() -> dict:
    return load_fixture("forecast10.json")


@pytest.fixture
def hourly_payload() -> dict:
    return load_fixture("hourly.json")


@pytest.fixture
def wwir_payload() -> dict:
    return load_fixture("wwir.json")


@pytest.fixture
def error_payload() -> dict:
    return load_fixture("error_invalid_key.json")


@pytest.fixture
def client():
    with WeatherClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL) as c:
        yield c


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {"api_key": TEST_API_KEY, "base_url": TEST_BASE_URL}
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
