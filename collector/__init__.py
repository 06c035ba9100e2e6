"""Collector module for reading call details from the console."""

from .models import CallRecord, InvalidInputError, Weekday
from .prompts import (
    CallInputCollector,
    parse_call_length,
    parse_start_time,
    parse_weekday,
)

__all__ = [
    "CallInputCollector",
    "CallRecord",
    "InvalidInputError",
    "Weekday",
    "parse_call_length",
    "parse_start_time",
    "parse_weekday",
]
