"""Unit tests for the interval overlap oracle and DateRange."""

from __future__ import annotations

from datetime import date

import pytest

from shared.domain.errors import InvalidInput
from shared.domain.value_objects import DateRange, nights_between, overlaps


def d(day: int) -> date:
    return date(2024, 1, day)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((1, 5), (5, 8), True),  # checkout day == check-in day
        ((1, 5), (6, 8), False),
        ((3, 4), (1, 10), True),  # contained
        ((1, 10), (3, 4), True),  # containing
        ((6, 8), (1, 5), False),
        ((2, 2), (2, 2), True),
    ],
)
def test_inclusive_policy(a, b, expected) -> None:
    assert overlaps(d(a[0]), d(a[1]), d(b[0]), d(b[1])) is expected


def test_inclusive_policy_is_symmetric() -> None:
    assert overlaps(d(1), d(5), d(5), d(8)) == overlaps(d(5), d(8), d(1), d(5))


def test_same_day_turnover_frees_checkout_day() -> None:
    assert overlaps(d(1), d(5), d(5), d(8), same_day_turnover=True) is False
    assert overlaps(d(1), d(5), d(4), d(8), same_day_turnover=True) is True


def test_date_range_rejects_reversed_window() -> None:
    with pytest.raises(InvalidInput):
        DateRange(d(5), d(1))


@pytest.mark.parametrize(("start", "end"), [(None, d(2)), (d(1), None), (None, None)])
def test_date_range_requires_both_dates(start, end) -> None:
    with pytest.raises(InvalidInput):
        DateRange(start, end)


def test_date_range_allows_zero_nights() -> None:
    window = DateRange(d(3), d(3))
    assert window.nights == 0


def test_date_range_helpers() -> None:
    window = DateRange(d(1), d(5))

    assert window.nights == 4
    assert window.overlaps_with(DateRange(d(5), d(8)))
    assert not window.overlaps_with(DateRange(d(5), d(8)), same_day_turnover=True)
    assert window.contains(d(5))
    assert not window.contains(d(5), same_day_turnover=True)
    assert not window.contains(d(6))
    assert str(window) == "2024-01-01 - 2024-01-05"


def test_nights_between_counts_calendar_days() -> None:
    assert nights_between(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert nights_between(d(5), d(1)) == -4
