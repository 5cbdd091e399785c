"""
Seller Metrics — Input Validation

Fail fast on bad top-level shape before any aggregation runs:
- data missing or not a mapping            → InvalidInputError
- collection missing / not a list or tuple → InvalidInputError
- collection empty (strict mode)           → EmptyCollectionError
- row fails model validation               → InvalidInputError
- strategy missing / not callable          → MissingStrategyError

Unknown seller ids and SKUs inside rows are NOT checked here. The
aggregator skips them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple, Optional

import structlog
from pydantic import BaseModel, ValidationError

from seller_metrics.config import settings
from seller_metrics.engine.strategies import BonusStrategy, RevenueStrategy
from seller_metrics.errors import (
    EmptyCollectionError,
    InvalidInputError,
    MissingStrategyError,
)
from seller_metrics.models.records import Product, PurchaseRecord, SalesData, Seller

logger = structlog.get_logger(__name__)

_COLLECTIONS: tuple[tuple[str, type[BaseModel]], ...] = (
    ("sellers", Seller),
    ("products", Product),
    ("purchase_records", PurchaseRecord),
)

# snake_case name → accepted camelCase alias
_OPTION_ALIASES: dict[str, str] = {
    "calculate_revenue": "calculateRevenue",
    "calculate_bonus": "calculateBonus",
    "bonus_returns_amount": "bonusReturnsAmount",
}


class AnalysisOptions(NamedTuple):
    """Strategies plus the bonus calling convention."""
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy
    bonus_returns_amount: Optional[bool] = None


def _parse_collection(name: str, raw: Any, model: type[BaseModel]) -> list[Any]:
    if raw is None:
        logger.warning("sales_data_invalid", collection=name, reason="missing")
        raise InvalidInputError(f"{name} is missing")
    if not isinstance(raw, (list, tuple)):
        logger.warning(
            "sales_data_invalid",
            collection=name,
            reason="not_a_sequence",
            got=type(raw).__name__,
        )
        raise InvalidInputError(f"{name} must be a list, got {type(raw).__name__}")
    if not raw and settings.REQUIRE_NON_EMPTY_COLLECTIONS:
        logger.warning("sales_data_invalid", collection=name, reason="empty")
        raise EmptyCollectionError(name)

    parsed: list[Any] = []
    for position, row in enumerate(raw):
        if isinstance(row, model):
            parsed.append(row)
            continue
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as exc:
            logger.warning(
                "sales_data_invalid",
                collection=name,
                reason="row_invalid",
                position=position,
                errors=exc.error_count(),
            )
            raise InvalidInputError(f"{name}[{position}] is invalid: {exc}") from exc
    return parsed


def validate_sales_data(data: Any) -> SalesData:
    """
    Check the raw bundle and parse it into typed records.

    Args:
        data: A SalesData, or a mapping with sellers, products and
            purchase_records lists (rows may be dicts or model instances).

    Returns:
        Parsed SalesData.

    Raises:
        InvalidInputError: Bad top-level shape or an unparsable row.
        EmptyCollectionError: A collection has zero elements.
    """
    if isinstance(data, SalesData):
        raw = {name: getattr(data, name) for name, _ in _COLLECTIONS}
    elif isinstance(data, Mapping):
        raw = data
    else:
        logger.warning("sales_data_invalid", reason="not_a_mapping", got=type(data).__name__)
        raise InvalidInputError(
            f"sales data must be a mapping, got {type(data).__name__}"
        )

    parsed = {
        name: _parse_collection(name, raw.get(name), model)
        for name, model in _COLLECTIONS
    }
    return SalesData(**parsed)


def _read_option(options: Any, name: str) -> Any:
    if isinstance(options, Mapping):
        if name in options:
            return options[name]
        return options.get(_OPTION_ALIASES[name])
    return getattr(options, name, getattr(options, _OPTION_ALIASES[name], None))


def validate_options(options: Any) -> AnalysisOptions:
    """
    Check that both strategies are present and callable.

    No built-in strategy is substituted for a missing one.

    Raises:
        MissingStrategyError: Revenue or bonus strategy missing/not callable.
        InvalidInputError: bonus_returns_amount given but not a bool.
    """
    if isinstance(options, AnalysisOptions):
        candidate = options
    elif options is None:
        logger.warning("analysis_options_invalid", reason="missing")
        raise MissingStrategyError("calculate_revenue")
    else:
        candidate = AnalysisOptions(
            calculate_revenue=_read_option(options, "calculate_revenue"),
            calculate_bonus=_read_option(options, "calculate_bonus"),
            bonus_returns_amount=_read_option(options, "bonus_returns_amount"),
        )

    for name in ("calculate_revenue", "calculate_bonus"):
        if not callable(getattr(candidate, name)):
            logger.warning("analysis_options_invalid", strategy=name, reason="not_callable")
            raise MissingStrategyError(name)

    returns_amount = candidate.bonus_returns_amount
    if returns_amount is None:
        returns_amount = settings.BONUS_RETURNS_AMOUNT
    elif not isinstance(returns_amount, bool):
        raise InvalidInputError("bonus_returns_amount must be a bool")

    return candidate._replace(bonus_returns_amount=returns_amount)
