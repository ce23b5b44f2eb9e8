"""Strategy resolution from settings mappings."""

from multitenancy_strategy.resolution.strategy import MULTI_TENANT, determine_multi_tenancy_strategy

__all__ = ["MULTI_TENANT", "determine_multi_tenancy_strategy"]
