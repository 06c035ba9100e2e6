"""Console prompts for collecting call details."""

import logging
import re
from typing import Any, Callable, Optional

from .models import (
    CallRecord,
    InvalidInputError,
    Weekday,
    validate_hour,
    validate_minute,
)

logger = logging.getLogger(__name__)

MAX_LENGTH_INPUT = 255

# First letters that identify a weekday on their own
_SINGLE_LETTER_DAYS = {
    "m": Weekday.MONDAY,
    "w": Weekday.WEDNESDAY,
    "f": Weekday.FRIDAY,
}

# Two-letter codes for days sharing a first letter
_TWO_LETTER_DAYS = {
    "tu": Weekday.TUESDAY,
    "th": Weekday.THURSDAY,
    "sa": Weekday.SATURDAY,
    "su": Weekday.SUNDAY,
}

_INTEGER_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def parse_weekday(text: str) -> Weekday:
    """Decode a two-letter weekday abbreviation.

    Whitespace is skipped and anything after the first two letters is
    ignored. Matching is case-insensitive.

    Args:
        text: Raw console line.

    Returns:
        The matching weekday.

    Raises:
        InvalidInputError: If the token is not a known abbreviation. The
            error carries no message when the token is not alphabetic or
            is an unknown code starting with "s".
    """
    letters = "".join(text.split())[:2]
    if len(letters) < 2 or not letters.isalpha():
        raise InvalidInputError()

    code = letters.lower()
    if code[0] in _SINGLE_LETTER_DAYS:
        return _SINGLE_LETTER_DAYS[code[0]]
    if code in _TWO_LETTER_DAYS:
        return _TWO_LETTER_DAYS[code]
    if code[0] == "s":
        raise InvalidInputError()

    raise InvalidInputError("You entered an invalid weekday.")


def _to_int(digits: str, message: str) -> int:
    """Convert a matched digit run, rejecting ones too long to convert.

    Args:
        digits: Optionally signed run of ASCII digits.
        message: Rejection message shown if conversion fails.

    Raises:
        InvalidInputError: If the run exceeds the interpreter's digit limit.
    """
    try:
        return int(digits)
    except ValueError:
        raise InvalidInputError(message)


def parse_start_time(text: str) -> tuple[int, int]:
    """Parse a start time such as ``16:32``.

    The separator may be any single character. Text after the minutes is
    ignored.

    Raises:
        InvalidInputError: If the hour or minutes are missing or out of range.
    """
    hour_match = _INTEGER_PATTERN.match(text)
    if hour_match is None:
        raise InvalidInputError("You entered an invalid hour.")
    hour = _to_int(hour_match.group(1), "You entered an invalid hour.")
    validate_hour(hour)

    rest = text[hour_match.end():].lstrip()
    minute_match = _INTEGER_PATTERN.match(rest, 1) if rest else None
    if minute_match is None:
        raise InvalidInputError("You entered an invalid minutes.")
    minute = _to_int(minute_match.group(1), "You entered an invalid minutes.")
    validate_minute(hour, minute)

    return hour, minute


def parse_call_length(text: str) -> int:
    """Parse a call length in minutes.

    Only the first word is considered. It must start with a digit; the
    leading run of digits is used and any trailing characters are dropped,
    so ``"12abc"`` reads as 12.

    Raises:
        InvalidInputError: If the word does not start with a digit.
    """
    words = text.split()
    token = words[0][:MAX_LENGTH_INPUT] if words else ""

    digits = _DIGITS_PATTERN.match(token)
    if digits is None:
        raise InvalidInputError("You did not enter a valid number.")

    return int(digits.group())


class CallInputCollector:
    """Prompts for call details until each one is valid.

    Every read loops without limit on bad input, printing the rejection
    message (if any) and asking again.
    """

    WEEKDAY_PROMPT = (
        "\nPlease enter the day of the week you made your call (e.g. Mo, Tu, etc.): "
    )
    TIME_PROMPT = "Please enter the time you began your call (e.g. 16:32): "
    LENGTH_PROMPT = "Please enter the length of your call in minutes: "

    def __init__(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        """Initialize the collector.

        Args:
            read_line: Function that shows a prompt and returns one line of
                input, raising EOFError when input is exhausted. Defaults to
                the built-in input().
        """
        self._read_line = read_line if read_line is not None else input

    def _prompt_until_valid(self, prompt: str, parse: Callable[[str], Any]) -> Any:
        """Read lines until one parses.

        Args:
            prompt: Text shown before each read.
            parse: Parser raising InvalidInputError on bad input.

        Returns:
            The first successfully parsed value.
        """
        while True:
            text = self._read_line(prompt)
            try:
                value = parse(text)
            except InvalidInputError as e:
                logger.debug("Rejected input %r: %s", text, e.message or "silent")
                if e.message:
                    print(e.message)
                continue
            logger.debug("Accepted input %r as %r", text, value)
            return value

    def read_weekday(self) -> Weekday:
        return self._prompt_until_valid(self.WEEKDAY_PROMPT, parse_weekday)

    def read_start_time(self) -> tuple[int, int]:
        return self._prompt_until_valid(self.TIME_PROMPT, parse_start_time)

    def read_call_length(self) -> int:
        return self._prompt_until_valid(self.LENGTH_PROMPT, parse_call_length)

    def collect(self, record: Optional[CallRecord] = None) -> CallRecord:
        """Fill a call record from the console.

        Reads the weekday, start time and length in that order, echoing each
        accepted value back to the user.

        Args:
            record: Record to fill. A new one is created if omitted.

        Returns:
            The completed record.
        """
        if record is None:
            record = CallRecord()

        record.weekday = self.read_weekday()
        print(f"You entered: {record.weekday.display_name}\n")

        hour, minute = self.read_start_time()
        record.set_start_time(hour, minute)
        print(f"You entered the time: {record.formatted_time()}\n")

        record.set_duration(self.read_call_length())
        print(f"You entered: {record.duration_minutes} minutes.\n")

        return record
