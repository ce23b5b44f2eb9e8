"""multitenancy-strategy — decide how a persistence layer keeps tenants apart.

This package resolves a raw ``multi_tenancy`` setting into a set of
:class:`MultiTenancyStrategy` members (discriminator, schema, database, none)
and answers the two questions a persistence bootstrap asks of that set: is
multi-tenancy on, and does it need a multi-tenant connection provider.

Quick start
-----------
.. code-block:: python

    from multitenancy_strategy import (
        ConnectionProviderFactory,
        MultiTenancySettings,
        enabled,
    )

    settings = MultiTenancySettings()          # TENANCY_MULTI_TENANCY=schema
    strategies = settings.resolve_strategies()

    if enabled(strategies):
        provider = ConnectionProviderFactory.create(
            strategies,
            connection_provider=pool,
            multi_tenant_connection_provider=schema_router,
        )

Resolution never raises: an unknown value logs a warning and falls back to
``{MultiTenancyStrategy.NONE}``.
"""

from multitenancy_strategy.core.config import MultiTenancySettings
from multitenancy_strategy.connection.factory import ConnectionProviderFactory
from multitenancy_strategy.core.exceptions import ConfigurationError, TenancyError
from multitenancy_strategy.core.types import (
    ConnectionProvider,
    MultiTenancyStrategy,
    MultiTenantConnectionProvider,
    StrategySet,
    enabled,
    requires_multi_tenant_connection_provider,
)
from multitenancy_strategy.resolution.strategy import MULTI_TENANT, determine_multi_tenancy_strategy

try:
    from importlib.metadata import version as _pkg_version
    __version__: str = _pkg_version("multitenancy-strategy")
except Exception:  # pragma: no cover — package not installed
    __version__ = "0.0.0.dev0"

__all__ = [  # NOQA
    # Version
    "__version__",
    # Configuration
    "MULTI_TENANT",
    "MultiTenancySettings",
    # Domain types
    "MultiTenancyStrategy",
    "StrategySet",
    "enabled",
    "requires_multi_tenant_connection_provider",
    # Resolution
    "determine_multi_tenancy_strategy",
    # Connection providers
    "ConnectionProvider",
    "ConnectionProviderFactory",
    "MultiTenantConnectionProvider",
    # Exceptions
    "ConfigurationError",
    "TenancyError",
]
