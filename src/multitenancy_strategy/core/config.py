"""Configuration management for multitenancy-strategy.

``MultiTenancySettings`` is a ``pydantic_settings.BaseSettings`` model that
reads its values from environment variables (prefix ``TENANCY_``), an optional
``.env`` file, or explicit keyword arguments.

The strategy value is stored *unparsed*: unknown names must not
fail settings construction, they fall back to ``NONE`` during resolution.

Environment variables
---------------------
::

    TENANCY_MULTI_TENANCY=discriminator,schema
    TENANCY_STRICT_RESOLUTION=true
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multitenancy_strategy.core.types import MultiTenancyStrategy, StrategySet
from multitenancy_strategy.resolution.strategy import (
    MULTI_TENANT,
    determine_multi_tenancy_strategy,
)


class MultiTenancySettings(BaseSettings):
    """Settings that select the multi-tenancy strategy.

    Example — programmatic::

        settings = MultiTenancySettings(multi_tenancy="schema")
        settings.resolve_strategies()  # frozenset({MultiTenancyStrategy.SCHEMA})

    Example — environment variables::

        # .env
        TENANCY_MULTI_TENANCY=database

        settings = MultiTenancySettings()  # reads from environment / .env
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    multi_tenancy: MultiTenancyStrategy | str | None = Field(
        default=None,
        description=(
            "Strategy name, or comma-separated names: discriminator, schema, "
            "database, none.  Unset means no multi-tenancy."
        ),
    )

    strict_resolution: bool = Field(
        default=False,
        description=(
            "Replace an empty or NONE-contradictory strategy list with NONE "
            "instead of returning it unchanged."
        ),
    )

    @field_validator("multi_tenancy", mode="before")
    @classmethod
    def _keep_raw_value(cls, v: Any) -> Any:
        """Pass members through and stringify anything else.

        Args:
            v: Raw value from the environment or keyword arguments.

        Returns:
            ``None``, a :class:`MultiTenancyStrategy`, or a string.
        """
        if v is None or isinstance(v, MultiTenancyStrategy):
            return v
        return str(v)

    def as_properties(self) -> dict[str, Any]:
        """Return the settings as a properties mapping keyed by :data:`MULTI_TENANT`."""
        if self.multi_tenancy is None:
            return {}
        return {MULTI_TENANT: self.multi_tenancy}

    def resolve_strategies(self, logger: logging.Logger | None = None) -> StrategySet:
        """Resolve the configured value into a strategy selection.

        Args:
            logger: Optional sink for fallback warnings.

        Returns:
            The resolved ``frozenset`` of strategies.
        """
        return determine_multi_tenancy_strategy(
            self.as_properties(),
            logger=logger,
            strict=self.strict_resolution,
        )


__all__ = ["MultiTenancySettings"]
