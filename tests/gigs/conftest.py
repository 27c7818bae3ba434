"""Pytest fixtures for the GIGS harness tests."""
from typing import Iterator

import pytest

from gigs_harness.configuration import ConfigurationRegistry, Option
from gigs_harness.registry import load_families
from gigs_harness.settings import HarnessSettings

from fakes import fake_factories


@pytest.fixture(scope="session", autouse=True)
def registered_cases() -> None:
    """Import every fixture family so the registry is complete."""
    load_families()


@pytest.fixture
def factories():
    """In-memory factories preserving user values exactly."""
    return fake_factories()


@pytest.fixture
def configuration() -> ConfigurationRegistry:
    return ConfigurationRegistry.defaults()


@pytest.fixture
def non_preserving() -> ConfigurationRegistry:
    registry = ConfigurationRegistry.defaults()
    registry.set(Option.FACTORY_PRESERVING_USER_VALUES, False)
    return registry


@pytest.fixture
def settings(tmp_path) -> HarnessSettings:
    return HarnessSettings(report_dir=tmp_path)


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> Iterator[None]:
    """No GIGS_* variables and no gigs.yaml in the working directory."""
    for name in ("GIGS_CONFIG", "GIGS_RELATIVE_TOLERANCE", "GIGS_REPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
