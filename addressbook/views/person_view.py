"""Text renderings of a person at three levels of detail.

Each contact detail carries a privacy flag. ``render_show_all`` marks
private details with ``(private) ``, ``render_hide_private`` leaves them out,
and ``render_show_minimal`` shows only name, NRIC, title and schedules.

The address is also gated by the session access level: it is shown only
when the session level is less than or equal to the address's own
threshold, otherwise a hidden placeholder is rendered. No other detail is
access gated.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Set

from addressbook.login.access_gate import AccessGate, session_gate
from addressbook.schemas.person import Address, Email, Name, Nric, Phone, Schedule, Tag, Title


PRIVATE_MARKER = "(private) "
HIDDEN_PLACEHOLDER = " *** HIDDEN *** "


class ReadOnlyPerson(Protocol):
    """Accessors a person must offer to be rendered."""

    name: Name
    nric: Nric
    phone: Phone
    email: Email
    address: Address
    title: Title

    def get_schedules(self) -> Set[Schedule]:
        ...

    def get_tags(self) -> Set[Tag]:
        ...


def is_same_state_as(person: ReadOnlyPerson, other: Optional[ReadOnlyPerson]) -> bool:
    """Return True if ``other`` is the same person, judged by NRIC only.

    Examples
    --------
    >>> is_same_state_as(person, None)
    False
    """
    return other is person or (
        other is not None
        and other.nric.value == person.nric.value
    )


def _joined(items: Iterable[object]) -> str:
    # Sorted by rendered text, sets are unordered
    return "".join(sorted(str(item) for item in items))


def _private_marker(is_private: bool) -> str:
    return PRIVATE_MARKER if is_private else ""


def _address_text(address: Address, gate: AccessGate) -> str:
    if gate.current_level() <= address.get_access_level():
        return str(address)
    return HIDDEN_PLACEHOLDER


def render_show_all(person: ReadOnlyPerson, gate: AccessGate) -> str:
    """Format the person as text, showing all contact details.

    Private details are prefixed with ``(private) ``. The address is replaced
    by `` *** HIDDEN *** `` when ``gate`` reports an insufficient level,
    whatever its privacy flag.

    Parameters
    ----------
    person : ReadOnlyPerson
        Person to render.
    gate : AccessGate
        Source of the current session access level.

    Returns
    -------
    str
        ``"<Name> NRIC: ... Phone: ... Email: ... Address: ... Title: ... Schedule: ... Tags: ..."``
    """
    parts = [
        str(person.name),
        " NRIC: ", _private_marker(person.nric.is_private), str(person.nric),
        " Phone: ", _private_marker(person.phone.is_private), str(person.phone),
        " Email: ", _private_marker(person.email.is_private), str(person.email),
        " Address: ", _private_marker(person.address.is_private), _address_text(person.address, gate),
        " Title: ", str(person.title),
        " Schedule: ", _joined(person.get_schedules()),
        " Tags: ", _joined(person.get_tags()),
    ]
    return "".join(parts)


def render_hide_private(person: ReadOnlyPerson, gate: AccessGate) -> str:
    """Format the person as text, showing only non-private contact details.

    Private NRIC, phone, email and address are left out entirely. A public
    address is still subject to the access level check. Title, schedules and
    tags are always shown.
    """
    parts = [str(person.name)]
    if not person.nric.is_private:
        parts.append(f" NRIC: {person.nric}")
    if not person.phone.is_private:
        parts.append(f" Phone: {person.phone}")
    if not person.email.is_private:
        parts.append(f" Email: {person.email}")
    if not person.address.is_private:
        parts.append(f" Address: {_address_text(person.address, gate)}")
    parts.append(f" Title: {person.title}")
    parts.append(f" Schedule: {_joined(person.get_schedules())}")
    parts.append(f" Tags: {_joined(person.get_tags())}")
    return "".join(parts)


def render_show_minimal(person: ReadOnlyPerson) -> str:
    """Format the person as text with name, NRIC, title and schedules only."""
    parts = [str(person.name)]
    if not person.nric.is_private:
        parts.append(f"\t\tNRIC: {person.nric}")
    parts.append(f"\t\tTitle: {person.title}")
    parts.append(f"\n\tSchedule: {_joined(person.get_schedules())}")
    return "".join(parts)


class PersonRenderer:
    """Renders people against an access gate.

    Parameters
    ----------
    gate : Optional[AccessGate], default=None
        Queried afresh for every rendering, so level changes made by the
        login layer between calls are picked up. Defaults to the gate over
        the process-wide login session.

    Examples
    --------
    >>> renderer = PersonRenderer(FixedAccessGate(1))
    >>> renderer.show_minimal(person)
    'John Doe\\t\\tNRIC: S1234567A\\t\\tTitle: Sergeant\\n\\tSchedule: '
    """

    def __init__(self, gate: Optional[AccessGate] = None) -> None:
        self._gate = gate if gate is not None else session_gate

    def show_all(self, person: ReadOnlyPerson) -> str:
        return render_show_all(person, self._gate)

    def hide_private(self, person: ReadOnlyPerson) -> str:
        return render_hide_private(person, self._gate)

    def show_minimal(self, person: ReadOnlyPerson) -> str:
        return render_show_minimal(person)
