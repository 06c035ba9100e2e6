"""Flat per-minute tariff for long-distance calls."""

import logging

from collector.models import CallRecord
from .base import BaseRateCalculator

logger = logging.getLogger(__name__)


class FlatRateCalculator(BaseRateCalculator):
    """Calculator charging one flat rate per minute based on when a call began.

    Saturday and Sunday calls use the weekend rate at any hour. On weekdays,
    calls starting between 8:00 and 18:59 use the peak rate and all other
    calls use the off-peak rate. Only the hour is compared, so 18:45 is peak.
    """

    WEEKEND_RATE = 0.15
    OFF_PEAK_RATE = 0.25
    PEAK_RATE = 0.40
    PEAK_START_HOUR = 8
    PEAK_END_HOUR = 18

    def rate_for(self, record: CallRecord) -> float:
        if record.weekday.is_weekend:
            rate = self.WEEKEND_RATE
        elif record.start_hour < self.PEAK_START_HOUR or record.start_hour > self.PEAK_END_HOUR:
            rate = self.OFF_PEAK_RATE
        else:
            rate = self.PEAK_RATE

        logger.debug(
            "Rate for %s at %s: $%.2f/min",
            record.weekday.display_name, record.formatted_time(), rate
        )
        return rate
