"""Core abstractions — strategy types and exceptions.

:class:`~multitenancy_strategy.core.config.MultiTenancySettings` is not
re-exported here because it depends on the resolution package.
"""

from multitenancy_strategy.core.exceptions import ConfigurationError, TenancyError
from multitenancy_strategy.core.types import (
    ConnectionProvider,
    MultiTenancyStrategy,
    MultiTenantConnectionProvider,
    StrategySet,
    enabled,
    requires_multi_tenant_connection_provider,
)

__all__ = [
    # Exceptions
    "ConfigurationError",
    "TenancyError",
    # Types
    "ConnectionProvider",
    "MultiTenancyStrategy",
    "MultiTenantConnectionProvider",
    "StrategySet",
    "enabled",
    "requires_multi_tenant_connection_provider",
]
