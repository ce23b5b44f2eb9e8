"""Resolve the configured multi-tenancy strategy from a settings mapping.

Accepted value shapes under :data:`MULTI_TENANT`:

* absent or ``None`` — multi-tenancy is off (``{NONE}``);
* a :class:`~multitenancy_strategy.core.types.MultiTenancyStrategy` member;
* a string holding one strategy name, case-insensitive (``"schema"``);
* a string holding a comma-separated list of names
  (``"discriminator,schema"``).

Resolution never raises.  A value that cannot be parsed falls back to
``{NONE}`` and a single WARNING naming the raw value is logged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from multitenancy_strategy.core.types import MultiTenancyStrategy, StrategySet

if TYPE_CHECKING:
    from collections.abc import Mapping

MULTI_TENANT = "multi_tenancy"

_NONE_ONLY: StrategySet = frozenset({MultiTenancyStrategy.NONE})


def _parse_name(name: str) -> MultiTenancyStrategy:
    # Exact match on the member name; raises KeyError for anything else.
    return MultiTenancyStrategy[name]


def _split_names(value: str) -> list[str]:
    """Split a comma-separated list the way the settings format defines it.

    Trailing empty tokens (``"schema,"``) are dropped.  A value without any
    comma is returned as a single token, so ``""`` stays one empty token.
    """
    if "," not in value:
        return [value]
    tokens = value.split(",")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def determine_multi_tenancy_strategy(
    properties: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
    strict: bool = False,
) -> StrategySet:
    """Extract the enabled multi-tenancy strategies from *properties*.

    Args:
        properties: Settings mapping; only :data:`MULTI_TENANT` is read.
        logger: Sink for the fallback warning.  Defaults to this module's
            logger.
        strict: When ``True``, a parsed list that is empty or combines
            ``NONE`` with another strategy is replaced by ``{NONE}`` (with a
            warning).  When ``False`` such a list is returned unchanged.

    Returns:
        An immutable ``frozenset`` of strategies.  ``{NONE}`` is the default.
    """
    log = logger if logger is not None else logging.getLogger(__name__)

    strategy = properties.get(MULTI_TENANT)
    if strategy is None:
        return _NONE_ONLY

    if isinstance(strategy, MultiTenancyStrategy):
        return frozenset({strategy})

    strategy_name = str(strategy)
    upper = strategy_name.upper()
    try:
        return frozenset({_parse_name(upper)})
    except KeyError:
        pass

    try:
        strategies = frozenset(_parse_name(token) for token in _split_names(upper))
    except KeyError:
        log.warning(
            "Unknown multi tenancy strategy [ %s ], using MultiTenancyStrategy.NONE.",
            strategy_name,
        )
        return _NONE_ONLY

    if strict and (
        not strategies
        or (len(strategies) > 1 and MultiTenancyStrategy.NONE in strategies)
    ):
        log.warning(
            "Contradictory multi tenancy strategy [ %s ], using MultiTenancyStrategy.NONE.",
            strategy_name,
        )
        return _NONE_ONLY

    return strategies


__all__ = ["MULTI_TENANT", "determine_multi_tenancy_strategy"]
