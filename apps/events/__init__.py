"""Hotel events and the attendee capacity guard."""
