"""
Shared Kernel

Base classes and infrastructure shared by the rooms, reservations and
events apps: value objects, the domain error taxonomy, the unit of work
and the helpers that serialise check-then-write sections.
"""
