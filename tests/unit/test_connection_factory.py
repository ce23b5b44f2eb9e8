"""Unit tests — multitenancy_strategy.connection.factory

Verified:
* SCHEMA / DATABASE selections get the multi-tenant provider
* DISCRIMINATOR / NONE selections get the conventional provider
* Missing required provider → ConfigurationError naming the parameter
* Unused multi-tenant provider is logged and ignored
* End-to-end from settings to provider
"""

from __future__ import annotations

import logging

import pytest

from multitenancy_strategy.connection.factory import ConnectionProviderFactory
from multitenancy_strategy.core.config import MultiTenancySettings
from multitenancy_strategy.core.exceptions import ConfigurationError, TenancyError
from multitenancy_strategy.core.types import MultiTenancyStrategy

pytestmark = pytest.mark.unit

S = MultiTenancyStrategy
_LOGGER_NAME = "multitenancy_strategy.connection.factory"


class TestMultiTenantSelections:
    @pytest.mark.parametrize(
        "strategies",
        [
            frozenset({S.SCHEMA}),
            frozenset({S.DATABASE}),
            frozenset({S.SCHEMA, S.DISCRIMINATOR}),
        ],
    )
    def test_returns_router(self, strategies, pool, schema_router):
        provider = ConnectionProviderFactory.create(
            strategies,
            connection_provider=pool,
            multi_tenant_connection_provider=schema_router,
        )
        assert provider is schema_router

    def test_missing_router_raises(self, pool):
        with pytest.raises(ConfigurationError) as exc_info:
            ConnectionProviderFactory.create(frozenset({S.SCHEMA}), connection_provider=pool)
        assert exc_info.value.parameter == "multi_tenant_connection_provider"
        assert exc_info.value.details == {"strategies": "SCHEMA"}

    def test_error_is_tenancy_error(self):
        with pytest.raises(TenancyError):
            ConnectionProviderFactory.create(frozenset({S.DATABASE}))


class TestSingleTenantSelections:
    @pytest.mark.parametrize(
        "strategies",
        [
            frozenset({S.NONE}),
            frozenset({S.DISCRIMINATOR}),
            frozenset(),
        ],
    )
    def test_returns_pool(self, strategies, pool):
        assert ConnectionProviderFactory.create(strategies, connection_provider=pool) is pool

    def test_missing_pool_raises(self):
        with pytest.raises(ConfigurationError, match="connection_provider"):
            ConnectionProviderFactory.create(frozenset({S.NONE}))

    def test_unused_router_logged(self, pool, schema_router, caplog):
        with caplog.at_level(logging.WARNING):
            provider = ConnectionProviderFactory.create(
                frozenset({S.DISCRIMINATOR}),
                connection_provider=pool,
                multi_tenant_connection_provider=schema_router,
            )
        assert provider is pool
        records = [r for r in caplog.records if r.name == _LOGGER_NAME]
        assert len(records) == 1
        assert "DISCRIMINATOR" in records[0].getMessage()


class TestFromSettings:
    def test_schema_setting_wires_router(self, pool, schema_router):
        strategies = MultiTenancySettings(multi_tenancy="SCHEMA").resolve_strategies()
        provider = ConnectionProviderFactory.create(
            strategies,
            connection_provider=pool,
            multi_tenant_connection_provider=schema_router,
        )
        assert provider.get_connection("acme")[0] == "acme"

    def test_bogus_setting_wires_pool(self, pool, schema_router):
        strategies = MultiTenancySettings(multi_tenancy="bogus").resolve_strategies()
        provider = ConnectionProviderFactory.create(
            strategies,
            connection_provider=pool,
            multi_tenant_connection_provider=schema_router,
        )
        assert provider is pool
