"""Shared pytest fixtures for the multitenancy-strategy test suite.

Hierarchy
---------
_clean_tenancy_env      autouse; strips TENANCY_* variables so settings tests
                        only see what they set themselves
properties              factory building a settings mapping for the resolver
pool                    minimal ConnectionProvider
schema_router           minimal MultiTenantConnectionProvider
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from multitenancy_strategy.resolution.strategy import MULTI_TENANT


@pytest.fixture(autouse=True)
def _clean_tenancy_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in list(os.environ):
        if name.upper().startswith("TENANCY_"):
            monkeypatch.delenv(name)
    # Keep a developer's .env out of settings tests.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def properties():
    """Return a factory that wraps *value* under the multi-tenancy key."""

    def _make(value: Any) -> dict[str, Any]:
        return {MULTI_TENANT: value}

    return _make


########################
# Connection providers #
########################


class StubConnectionProvider:
    def get_connection(self) -> Any:
        return object()

    def close_connection(self, connection: Any) -> None:
        return None


class StubMultiTenantConnectionProvider:
    def get_any_connection(self) -> Any:
        return object()

    def release_any_connection(self, connection: Any) -> None:
        return None

    def get_connection(self, tenant_identifier: str) -> Any:
        return (tenant_identifier, object())

    def close_connection(self, tenant_identifier: str, connection: Any) -> None:
        return None


@pytest.fixture
def pool() -> StubConnectionProvider:
    return StubConnectionProvider()


@pytest.fixture
def schema_router() -> StubMultiTenantConnectionProvider:
    return StubMultiTenantConnectionProvider()
