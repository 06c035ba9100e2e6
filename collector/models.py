"""Data models for long-distance call input."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InvalidInputError(ValueError):
    """Raised when console input fails validation.

    The message is shown to the user before re-prompting. An empty
    message means the prompt is repeated silently.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def validate_hour(hour: int) -> None:
    """Raise InvalidInputError unless hour is in [0, 24]."""
    if hour < 0 or hour > 24:
        raise InvalidInputError("You entered an invalid hour.")


def validate_minute(hour: int, minute: int) -> None:
    """Raise InvalidInputError unless minute is in [0, 59], or 0 when hour is 24."""
    if minute < 0 or minute > 59 or (minute > 0 and hour == 24):
        raise InvalidInputError("You entered an invalid minutes.")


class Weekday(Enum):
    """Day of the week a call began on."""

    NONE = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


@dataclass
class CallRecord:
    """Input collected for a single call."""

    weekday: Weekday = field(default=Weekday.NONE)
    start_hour: Optional[int] = None
    start_minute: Optional[int] = None
    duration_minutes: Optional[int] = None

    def set_start_time(self, hour: int, minute: int) -> None:
        """Validate and store the start time.

        24:00 is accepted only as the exact midnight boundary.

        Raises:
            InvalidInputError: If hour or minute is out of range.
        """
        validate_hour(hour)
        validate_minute(hour, minute)

        self.start_hour = hour
        self.start_minute = minute

    def set_duration(self, minutes: int) -> None:
        if minutes < 0:
            raise InvalidInputError("You did not enter a valid number.")
        self.duration_minutes = minutes

    @property
    def is_complete(self) -> bool:
        return (
            self.weekday is not Weekday.NONE
            and self.start_hour is not None
            and self.start_minute is not None
            and self.duration_minutes is not None
        )

    def formatted_time(self) -> str:
        """Return the start time in 24-hour H:MM format."""
        if self.start_hour is None or self.start_minute is None:
            return ""
        return f"{self.start_hour}:{self.start_minute:02d}"
