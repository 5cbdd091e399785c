from seller_metrics.utils.logging import configure_logging
from seller_metrics.utils.money import quantize_money, to_decimal

__all__ = ["configure_logging", "quantize_money", "to_decimal"]
