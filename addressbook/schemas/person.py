"""Person schemas for the address book.

This module defines Pydantic models representing a person record and the
values it is made of. Every contact detail carries its own privacy flag so
that views can decide, field by field, what to show.

All models are frozen: a person is replaced, never edited in place.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Set

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from addressbook.exceptions import IllegalValueException


class PrivacyField(BaseModel):
    """A contact detail value with a privacy flag.

    Parameters
    ----------
    value : str
        The detail as entered by the user.
    is_private : bool, default=False
        Whether the detail should be masked or omitted from default views.
    """

    value: str = Field(description="Detail value")
    is_private: bool = Field(default=False, description="Hide from default views")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.value


class Name(PrivacyField):
    """Person's full name."""


class Nric(PrivacyField):
    """National registration identity card number; identifies a person."""


class Phone(PrivacyField):
    """Person's phone number."""


class Email(PrivacyField):
    """Person's email address."""


class Title(PrivacyField):
    """Person's job title or rank."""


class Address(PrivacyField):
    """Person's address, visible only to sufficiently privileged sessions.

    Parameters
    ----------
    access_level : int
        Least privileged session level allowed to read the address. Lower
        levels are more privileged, so a session sees the address when its
        level is less than or equal to this threshold. Required: every
        address states who may read it.

    Examples
    --------
    >>> Address(value="Blk 1 Clementi Rd", access_level=3)
    Address(value='Blk 1 Clementi Rd', is_private=False, access_level=3)
    """

    access_level: int = Field(description="Least privileged level allowed to read the address")

    def get_access_level(self) -> int:
        return self.access_level


class Schedule(BaseModel):
    """A single schedule entry of a person.

    Examples
    --------
    >>> str(Schedule("Mon 0900 briefing"))
    'Mon 0900 briefing'
    """

    value: str

    model_config = ConfigDict(frozen=True)

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            if len(args) > 1 or "value" in data:
                raise TypeError("Schedule takes a single value, positionally or as value=")
            data["value"] = args[0]
        if data.get("value") is None:
            raise IllegalValueException("Schedule value must be present")
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise IllegalValueException(f"Invalid schedule value: {data['value']!r}") from e

    def __str__(self) -> str:
        return self.value


class Tag(BaseModel):
    """A label attached to a person, rendered as ``[name]``."""

    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[{self.name}]"


class Associate(BaseModel):
    """Another person associated with this one, referred to by name."""

    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Person(BaseModel):
    """A person in the address book.

    Details are validated and present. Collections are stored as frozen sets;
    the ``get_*`` accessors hand out independent copies so callers can never
    change the person through them.

    Parameters
    ----------
    name : Name
    nric : Nric
        Identity of the person, see :func:`addressbook.views.person_view.is_same_state_as`.
    phone : Phone
    email : Email
    address : Address
    title : Title
    schedules : FrozenSet[Schedule], default=frozenset()
    associates : FrozenSet[Associate], default=frozenset()
    tags : FrozenSet[Tag], default=frozenset()

    Examples
    --------
    >>> person = Person(
    ...     name=Name(value="John Doe"),
    ...     nric=Nric(value="S1234567A"),
    ...     phone=Phone(value="98765432"),
    ...     email=Email(value="john@example.com"),
    ...     address=Address(value="Blk 1 Clementi Rd", access_level=3),
    ...     title=Title(value="Sergeant"),
    ...     tags={Tag(name="friend")},
    ... )
    >>> person.get_tags()
    {Tag(name='friend')}
    """

    name: Name
    nric: Nric
    phone: Phone
    email: Email
    address: Address
    title: Title
    schedules: FrozenSet[Schedule] = Field(default_factory=frozenset)
    associates: FrozenSet[Associate] = Field(default_factory=frozenset)
    tags: FrozenSet[Tag] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    def get_schedules(self) -> Set[Schedule]:
        return set(self.schedules)

    def get_associates(self) -> Set[Associate]:
        return set(self.associates)

    def get_tags(self) -> Set[Tag]:
        """Return a copy of the tags; changes to it do not affect this person."""
        return set(self.tags)
