"""Shared test fixtures for mongo_stubs.

This module provides pytest fixtures used across all tests. The
mongo_stubs pytest plugin is enabled through addopts in pyproject.toml.
"""

from typing import Any

import pytest

from mongo_stubs.config import StubSettings


# Settings fixtures
@pytest.fixture
def stub_settings() -> StubSettings:
    """Create settings that ignore any local .env file."""
    return StubSettings(_env_file=None, auto_return=False)


@pytest.fixture
def mongo_stub_settings(stub_settings: StubSettings) -> StubSettings:
    """Point the plugin fixtures at the test settings."""
    return stub_settings


# Sample data fixtures
@pytest.fixture
def sample_customer() -> dict[str, Any]:
    """Create a single customer document."""
    return {"_id": "cust-1", "name": "Ada", "org_name": "acme", "email": "ada@acme.test"}


@pytest.fixture
def sample_customers(sample_customer: dict[str, Any]) -> list[dict[str, Any]]:
    """Create a list of customer documents."""
    return [
        sample_customer,
        {"_id": "cust-2", "name": "Grace", "org_name": "acme", "email": "grace@acme.test"},
        {"_id": "cust-3", "name": "Edsger", "org_name": "acme", "email": "edsger@acme.test"},
    ]
