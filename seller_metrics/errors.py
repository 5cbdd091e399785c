"""
Seller Metrics — Error Types

Top-level shape problems are fatal. Row-level referential gaps (unknown
seller or SKU) are not errors and never reach this module.
"""

from __future__ import annotations


class SalesAnalysisError(ValueError):
    """Base error for the sales analysis pipeline."""


class InvalidInputError(SalesAnalysisError):
    """Data bundle is missing, malformed, or has an unparsable row."""


class EmptyCollectionError(SalesAnalysisError):
    """A required collection is present but has zero elements."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"{collection} must not be empty")


class MissingStrategyError(SalesAnalysisError):
    """A revenue or bonus strategy was not supplied or is not callable."""

    def __init__(self, strategy: str) -> None:
        self.strategy = strategy
        super().__init__(f"{strategy} must be a callable strategy")


class StrategyResultError(SalesAnalysisError):
    """A strategy returned something that is not a number."""
