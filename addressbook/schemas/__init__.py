"""Schema package for the address book.

Exposes commonly used models for convenient imports.
"""

from .person import (
    Address,
    Associate,
    Email,
    Name,
    Nric,
    Person,
    Phone,
    Schedule,
    Tag,
    Title,
)

__all__ = [
    "Address",
    "Associate",
    "Email",
    "Name",
    "Nric",
    "Person",
    "Phone",
    "Schedule",
    "Tag",
    "Title",
]
