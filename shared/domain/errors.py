"""
Domain Errors

Every core operation either returns its payload or raises exactly one of
the errors below. The transport layer maps ``status_code`` and ``code``
to the response; the core never inspects HTTP.
"""


class DomainError(Exception):
    """Base class for all domain-level failures"""

    code = 'domain_error'
    status_code = 400
    default_message = 'Operation failed'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(DomainError):
    """Entity is absent, or the caller does not own it"""

    code = 'not_found'
    status_code = 404
    default_message = 'Not found'


class InvalidInput(DomainError):
    """Malformed or degenerate input (missing dates, zero-night stays)"""

    code = 'invalid_input'
    status_code = 400
    default_message = 'Invalid input'


class InvalidState(DomainError):
    """Operation is not allowed in the entity's current state"""

    code = 'invalid_state'
    status_code = 400
    default_message = 'Operation not allowed in the current state'


class Conflict(DomainError):
    """Overlapping reservation or duplicate enrollment"""

    code = 'conflict'
    status_code = 409
    default_message = 'Conflict with existing data'


class CapacityExceeded(DomainError):
    """Event has reached its maximum capacity"""

    code = 'capacity_exceeded'
    status_code = 409
    default_message = 'Event has reached its maximum capacity'
