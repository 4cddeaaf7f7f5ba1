"""Shared fixtures for address book tests."""

from __future__ import annotations

from typing import Callable

import pytest

from addressbook.schemas.person import Address, Email, Name, Nric, Person, Phone, Schedule, Tag, Title


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Return a factory building John Doe with per-field privacy overrides."""

    def _make(
        nric_private: bool = False,
        phone_private: bool = False,
        email_private: bool = False,
        address_private: bool = False,
        access_level: int = 3,
        nric: str = "S1234567A",
    ) -> Person:
        return Person(
            name=Name(value="John Doe"),
            nric=Nric(value=nric, is_private=nric_private),
            phone=Phone(value="98765432", is_private=phone_private),
            email=Email(value="john@example.com", is_private=email_private),
            address=Address(value="Blk 1 Clementi Rd", is_private=address_private, access_level=access_level),
            title=Title(value="Sergeant"),
            schedules={Schedule("Tue"), Schedule("Mon")},
            tags={Tag(name="friend"), Tag(name="colleague")},
        )

    return _make
