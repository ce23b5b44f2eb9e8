"""Connection-provider selection."""

from multitenancy_strategy.connection.factory import ConnectionProviderFactory

__all__ = ["ConnectionProviderFactory"]
