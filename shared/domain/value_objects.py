"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: A reservation window (start date to end date, both inclusive)

The interval overlap oracle also lives here. Two boundary policies are
supported and selected by the caller:

- inclusive (default): a stay ending on day D collides with one starting
  on day D
- same-day turnover: the end date is exclusive, so the checkout day is
  free for the next check-in
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import ValueObject
from shared.domain.errors import InvalidInput


def overlaps(
    a_start: date,
    a_end: date,
    b_start: date,
    b_end: date,
    *,
    same_day_turnover: bool = False,
) -> bool:
    """
    Does window A intersect window B?

    Inclusive policy:    a_start <= b_end AND b_start <= a_end
    Same-day turnover:   a_start <  b_end AND b_start <  a_end
    """
    if same_day_turnover:
        return a_start < b_end and b_start < a_end
    return a_start <= b_end and b_start <= a_end


def nights_between(start: date, end: date) -> int:
    """Number of nights between two calendar dates (may be zero or negative)."""
    return (end - start).days


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a window from start_date to end_date. A zero-night window
    (start_date == end_date) is representable so that callers can report
    it precisely; a reversed window is not.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date is None or self.end_date is None:
            raise InvalidInput("Both start and end dates are required")
        if self.start_date > self.end_date:
            raise InvalidInput(
                f"Start date ({self.start_date}) must not be after end date ({self.end_date})"
            )

    def overlaps_with(self, other: 'DateRange', *, same_day_turnover: bool = False) -> bool:
        """
        Check if this range overlaps with another

        Examples (inclusive policy):
            - DateRange(1, 5) overlaps with DateRange(5, 8) -> True
            - DateRange(1, 5) overlaps with DateRange(6, 8) -> False
        With same_day_turnover=True the first pair no longer overlaps.
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")
        return overlaps(
            self.start_date,
            self.end_date,
            other.start_date,
            other.end_date,
            same_day_turnover=same_day_turnover,
        )

    def contains(self, check_date: date, *, same_day_turnover: bool = False) -> bool:
        """
        Check if a date is within this range

        The end date counts as occupied unless same-day turnover is allowed.
        """
        if same_day_turnover:
            return self.start_date <= check_date < self.end_date
        return self.start_date <= check_date <= self.end_date

    @property
    def nights(self) -> int:
        """Number of nights in this range (calendar-day granularity)."""
        return nights_between(self.start_date, self.end_date)

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
