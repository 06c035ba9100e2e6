"""Rating module for pricing calls against a tariff."""

from .base import BaseRateCalculator, format_cost
from .flat_rate import FlatRateCalculator

__all__ = ["BaseRateCalculator", "FlatRateCalculator", "format_cost"]
