"""
Basic Example 1 — Select a connection provider
===============================================
Resolve the multi-tenancy strategy from the environment and pick the
connection provider it needs.

What you'll learn
-----------------
- Configure MultiTenancySettings through TENANCY_* variables
- Check whether multi-tenancy is on
- Let ConnectionProviderFactory choose between a shared pool and a
  per-tenant router

Run
---
    pip install "multitenancy-strategy"

    TENANCY_MULTI_TENANCY=schema python main.py
    TENANCY_MULTI_TENANCY=discriminator python main.py
    TENANCY_MULTI_TENANCY=bogus python main.py      # warning, falls back to NONE
"""
import logging

from multitenancy_strategy import (
    ConnectionProviderFactory,
    MultiTenancySettings,
    enabled,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


# ── 1. Connection providers ───────────────────────────────────────────────────
#
# Real applications plug in a DB-API pool and a router that switches
# schema / database per tenant.  Strings stand in for connections here.
#
class SharedPool:
    def get_connection(self):
        return "shared-connection"

    def close_connection(self, connection):
        pass


class SchemaRouter:
    def get_any_connection(self):
        return "public-connection"

    def release_any_connection(self, connection):
        pass

    def get_connection(self, tenant_identifier):
        return f"connection[search_path=tenant_{tenant_identifier}]"

    def close_connection(self, tenant_identifier, connection):
        pass


# ── 2. Resolve & wire ─────────────────────────────────────────────────────────
def main() -> None:
    settings = MultiTenancySettings()
    strategies = settings.resolve_strategies()
    print("strategies:", sorted(s.name for s in strategies))
    print("multi-tenancy enabled:", enabled(strategies))

    provider = ConnectionProviderFactory.create(
        strategies,
        connection_provider=SharedPool(),
        multi_tenant_connection_provider=SchemaRouter(),
    )
    print("provider:", type(provider).__name__)


if __name__ == "__main__":
    main()
