"""Abstract base class for call rate calculators."""

from abc import ABC, abstractmethod

from collector.models import CallRecord


class BaseRateCalculator(ABC):
    """Abstract base class defining the interface for rate calculators.

    Extend this class to implement other tariffs (e.g., per-second billing,
    distance bands, etc.).
    """

    @abstractmethod
    def rate_for(self, record: CallRecord) -> float:
        """Select the per-minute rate for a call.

        Args:
            record: A complete call record.

        Returns:
            Rate in dollars per minute.
        """
        pass

    def cost(self, record: CallRecord) -> float:
        """Calculate the cost of a call.

        Args:
            record: A complete call record.

        Returns:
            Cost in dollars.

        Raises:
            ValueError: If the record is missing any field.
        """
        if not record.is_complete:
            raise ValueError("Call record is incomplete. Collect all fields first.")

        return record.duration_minutes * self.rate_for(record)


def format_cost(value: float) -> str:
    """Render a dollar amount with exactly two decimals."""
    return f"{value:.2f}"
