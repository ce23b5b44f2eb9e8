"""Factory that picks the connection provider a strategy selection needs."""

from __future__ import annotations

from collections.abc import Set
import logging

from multitenancy_strategy.core.exceptions import ConfigurationError
from multitenancy_strategy.core.types import (
    ConnectionProvider,
    MultiTenancyStrategy,
    MultiTenantConnectionProvider,
    requires_multi_tenant_connection_provider,
)

logger = logging.getLogger(__name__)


def _describe(strategies: Set[MultiTenancyStrategy]) -> str:
    return ",".join(sorted(s.name for s in strategies))


class ConnectionProviderFactory:
    """Static factory that returns the caller's provider matching a selection.

    The providers are supplied by the host; this factory only decides which
    one the resolved strategies call for.
    """

    @staticmethod
    def create(
        strategies: Set[MultiTenancyStrategy],
        *,
        connection_provider: ConnectionProvider | None = None,
        multi_tenant_connection_provider: MultiTenantConnectionProvider | None = None,
    ) -> ConnectionProvider | MultiTenantConnectionProvider:
        """Select a connection provider for *strategies*.

        Args:
            strategies: A resolved strategy selection.
            connection_provider: Conventional single-tenant provider.
            multi_tenant_connection_provider: Provider that routes connections
                per tenant.

        Returns:
            *multi_tenant_connection_provider* when ``SCHEMA`` or ``DATABASE``
            is selected, *connection_provider* otherwise.

        Raises:
            ConfigurationError: When the provider the selection needs was not
                supplied.
        """
        details = {"strategies": _describe(strategies)}

        if requires_multi_tenant_connection_provider(strategies):
            if multi_tenant_connection_provider is None:
                raise ConfigurationError(
                    parameter="multi_tenant_connection_provider",
                    reason="SCHEMA and DATABASE strategies require a multi-tenant connection provider.",
                    details=details,
                )
            logger.debug(
                "Using %s for strategies %s",
                type(multi_tenant_connection_provider).__name__,
                details["strategies"],
            )
            return multi_tenant_connection_provider

        if connection_provider is None:
            raise ConfigurationError(
                parameter="connection_provider",
                reason="A connection provider is required when no strategy routes per tenant.",
                details=details,
            )
        if multi_tenant_connection_provider is not None:
            logger.warning(
                "multi_tenant_connection_provider supplied but strategies %s do not "
                "route connections per tenant; ignoring it",
                details["strategies"],
            )
        return connection_provider


__all__ = ["ConnectionProviderFactory"]
