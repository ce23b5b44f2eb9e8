"""Domain types and enumerations for multitenancy-strategy.

This module is the single source of truth for the library's strategy
vocabulary.  All other modules import *from* this module — never the reverse —
to keep the dependency graph acyclic.

Design notes
------------
* :class:`MultiTenancyStrategy` is a :class:`~enum.StrEnum` so members
  serialise to plain strings in logs and settings without extra conversion.
  Member *names* (upper-case) are what configuration values are matched
  against; member *values* are their lower-case spelling.
* A resolved selection is always a ``frozenset`` so it can be shared across
  threads and tasks without copying.
"""

from __future__ import annotations

from collections.abc import Set
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class MultiTenancyStrategy(StrEnum):
    """Method used by the persistence layer to keep tenants apart.

    Strategies
    ----------
    DISCRIMINATOR
        All tenants share tables; every row carries a tenant discriminator
        column.
    SCHEMA
        Each tenant owns a dedicated schema.  Connections are switched to the
        tenant's schema before use.
    DATABASE
        Each tenant owns a separate database.  Connections are routed to the
        tenant's database.
    NONE
        No multi-tenancy.
    """

    DISCRIMINATOR = "discriminator"
    SCHEMA = "schema"
    DATABASE = "database"
    NONE = "none"

    def requires_multi_tenant_connection_provider(self) -> bool:
        """Return ``True`` if this strategy needs a multi-tenant connection provider.

        Only strategies that route connections per tenant (``SCHEMA`` and
        ``DATABASE``) need the specialised provider; ``DISCRIMINATOR`` filters
        rows over an ordinary connection.
        """
        return self in (MultiTenancyStrategy.DATABASE, MultiTenancyStrategy.SCHEMA)


StrategySet = frozenset[MultiTenancyStrategy]


# ---------------------------------------------------------------------------
# Set-level queries
# ---------------------------------------------------------------------------


def enabled(strategies: Set[MultiTenancyStrategy]) -> bool:
    """Return ``True`` unless *strategies* contains :attr:`MultiTenancyStrategy.NONE`.

    Args:
        strategies: A resolved strategy selection.

    Returns:
        ``False`` when ``NONE`` is present (multi-tenancy off), ``True``
        otherwise.
    """
    return MultiTenancyStrategy.NONE not in strategies


def requires_multi_tenant_connection_provider(strategies: Set[MultiTenancyStrategy]) -> bool:
    """Return ``True`` if any strategy in *strategies* routes connections per tenant."""
    return MultiTenancyStrategy.DATABASE in strategies or MultiTenancyStrategy.SCHEMA in strategies


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ConnectionProvider(Protocol):
    """Structural type for conventional, tenant-agnostic connection providers."""

    def get_connection(self) -> Any:
        """Obtain a connection."""
        ...

    def close_connection(self, connection: Any) -> None:
        """Release *connection* obtained from :meth:`get_connection`."""
        ...


@runtime_checkable
class MultiTenantConnectionProvider(Protocol):
    """Structural type for providers that hand out tenant-specific connections.

    Required whenever the resolved selection contains ``SCHEMA`` or
    ``DATABASE``.  The ``*_any_connection`` pair serves work that is not bound
    to a tenant, such as schema export or sequence initialisation.
    """

    def get_any_connection(self) -> Any:
        """Obtain a connection not bound to any tenant."""
        ...

    def release_any_connection(self, connection: Any) -> None:
        """Release a connection obtained from :meth:`get_any_connection`."""
        ...

    def get_connection(self, tenant_identifier: str) -> Any:
        """Obtain a connection routed to *tenant_identifier*'s data."""
        ...

    def close_connection(self, tenant_identifier: str, connection: Any) -> None:
        """Release a connection obtained from :meth:`get_connection`."""
        ...


__all__ = [
    "ConnectionProvider",
    "MultiTenancyStrategy",
    "MultiTenantConnectionProvider",
    "StrategySet",
    "enabled",
    "requires_multi_tenant_connection_provider",
]
