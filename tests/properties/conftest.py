"""Shared configuration for hypothesis property tests."""

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "gitinfo", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("gitinfo")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    properties_dir = Path(__file__).parent
    for item in items:
        if Path(item.path).is_relative_to(properties_dir):
            item.add_marker(pytest.mark.property)
