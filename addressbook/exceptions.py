"""Exceptions raised by the address book data layer."""


class IllegalValueException(ValueError):
    """Signals that a value does not satisfy the data constraints of its model."""
