"""Pricing calculator: nights x nightly rate."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from shared.domain.errors import InvalidInput
from shared.domain.value_objects import nights_between

CENT = Decimal("0.01")


def calculate_price(rate: Decimal | int | str, start: date, end: date) -> Decimal:
    """Total price of a stay.

    Nights are counted in calendar days, not elapsed hours. A stay that
    starts and ends on the same day has no nights and is rejected rather
    than priced at zero.
    """
    nights = nights_between(start, end)
    if nights <= 0:
        raise InvalidInput(f"A stay must last at least one night ({start} - {end})")
    return (Decimal(str(rate)) * nights).quantize(CENT)
