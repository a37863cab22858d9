"""Reservations app package.

This app encapsulates the reservation lifecycle: creation, modification
and cancellation of room reservations, pricing, and the guarantees that
keep confirmed reservations of a room from overlapping. Every
check-then-write sequence runs inside a single transaction serialised on
the room being booked.
"""
