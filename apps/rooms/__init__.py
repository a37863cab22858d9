"""Rooms app package.

This app owns the physical resources that reservations allocate: the room
model, the availability checker built on the interval overlap oracle, and
the directory projection that derives each room's effective status.
"""
