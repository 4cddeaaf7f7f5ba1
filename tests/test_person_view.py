"""Test the person text renderings."""

from __future__ import annotations

from typing import Callable

import pytest

from addressbook.login.access_gate import FixedAccessGate, SessionAccessGate, SessionAccessLevel, session
from addressbook.schemas.person import Person
from addressbook.views.person_view import (
    PersonRenderer,
    is_same_state_as,
    render_hide_private,
    render_show_all,
    render_show_minimal,
)


class CountingGate:
    """Gate recording how often it is asked for the level."""

    def __init__(self, level: int) -> None:
        self.level = level
        self.calls = 0

    def current_level(self) -> int:
        self.calls += 1
        return self.level


def test_show_all_public_and_privileged(make_person: Callable[..., Person]) -> None:
    """All details are shown unmarked when public and the level suffices."""
    person = make_person()
    assert render_show_all(person, FixedAccessGate(2)) == (
        "John Doe NRIC: S1234567A Phone: 98765432 Email: john@example.com "
        "Address: Blk 1 Clementi Rd Title: Sergeant Schedule: MonTue Tags: [colleague][friend]"
    )


def test_show_all_marks_private_details(make_person: Callable[..., Person]) -> None:
    """Private details keep their value but gain the private marker."""
    person = make_person(nric_private=True, phone_private=True, email_private=True)
    assert render_show_all(person, FixedAccessGate(3)) == (
        "John Doe NRIC: (private) S1234567A Phone: (private) 98765432 Email: (private) john@example.com "
        "Address: Blk 1 Clementi Rd Title: Sergeant Schedule: MonTue Tags: [colleague][friend]"
    )


def test_show_all_private_and_hidden_address(make_person: Callable[..., Person]) -> None:
    """Marker and hidden placeholder are independent and can both appear."""
    person = make_person(address_private=True, access_level=3)
    output = render_show_all(person, FixedAccessGate(5))
    assert "Address: (private)  *** HIDDEN ***  Title: Sergeant" in output
    assert "Blk 1 Clementi Rd" not in output


def test_hide_private_omits_private_address_regardless_of_level(make_person: Callable[..., Person]) -> None:
    """A private address is left out entirely, the access check does not matter."""
    person = make_person(address_private=True, access_level=3)
    gate = CountingGate(5)
    output = render_hide_private(person, gate)
    assert "Address" not in output
    assert "*** HIDDEN ***" not in output
    assert gate.calls == 0


@pytest.mark.parametrize(
    "level,expected_address",
    [
        (2, "Address: Blk 1 Clementi Rd Title:"),
        (3, "Address: Blk 1 Clementi Rd Title:"),
        (5, "Address:  *** HIDDEN ***  Title:"),
    ]
)
def test_address_is_access_gated(make_person: Callable[..., Person], level: int, expected_address: str) -> None:
    """Levels at or below the threshold see the address, others see the placeholder."""
    person = make_person(access_level=3)
    assert expected_address in render_show_all(person, FixedAccessGate(level))
    assert expected_address in render_hide_private(person, FixedAccessGate(level))


def test_hide_private_all_public(make_person: Callable[..., Person]) -> None:
    """Public details are shown with their labels and no marker."""
    person = make_person()
    assert render_hide_private(person, FixedAccessGate(0)) == (
        "John Doe NRIC: S1234567A Phone: 98765432 Email: john@example.com "
        "Address: Blk 1 Clementi Rd Title: Sergeant Schedule: MonTue Tags: [colleague][friend]"
    )


def test_hide_private_all_private(make_person: Callable[..., Person]) -> None:
    """Only name, title, schedules and tags remain when every detail is private."""
    person = make_person(nric_private=True, phone_private=True, email_private=True, address_private=True)
    assert render_hide_private(person, FixedAccessGate(0)) == (
        "John Doe Title: Sergeant Schedule: MonTue Tags: [colleague][friend]"
    )


def test_show_minimal(make_person: Callable[..., Person]) -> None:
    """Minimal rendering shows name, NRIC, title and schedules."""
    assert render_show_minimal(make_person()) == "John Doe\t\tNRIC: S1234567A\t\tTitle: Sergeant\n\tSchedule: MonTue"


def test_show_minimal_private_nric(make_person: Callable[..., Person]) -> None:
    """A private NRIC never appears in the minimal rendering."""
    output = render_show_minimal(make_person(nric_private=True))
    assert "NRIC:" not in output
    assert output == "John Doe\t\tTitle: Sergeant\n\tSchedule: MonTue"


def test_show_all_reads_level_once(make_person: Callable[..., Person]) -> None:
    """The gate is consulted once per rendering."""
    gate = CountingGate(1)
    render_show_all(make_person(), gate)
    assert gate.calls == 1


def test_renderer_picks_up_session_changes(make_person: Callable[..., Person]) -> None:
    """Level changes between renderings are reflected, nothing is cached."""
    store = SessionAccessLevel(5)
    renderer = PersonRenderer(SessionAccessGate(store))
    person = make_person(access_level=3)
    assert "*** HIDDEN ***" in renderer.show_all(person)
    store.set_level(1)
    assert "Blk 1 Clementi Rd" in renderer.show_all(person)
    assert "Blk 1 Clementi Rd" in renderer.hide_private(person)
    assert renderer.show_minimal(person) == render_show_minimal(person)


def test_is_same_state_as(make_person: Callable[..., Person]) -> None:
    """Identity is decided by NRIC only."""
    person = make_person()
    assert is_same_state_as(person, person)
    assert not is_same_state_as(person, None)
    assert is_same_state_as(person, make_person(phone_private=True, access_level=9))
    assert not is_same_state_as(person, make_person(nric="T7654321B"))


def test_same_state_is_not_structural_equality(make_person: Callable[..., Person]) -> None:
    """Two records with the same NRIC can differ structurally."""
    person = make_person()
    other = make_person(email_private=True)
    assert is_same_state_as(person, other)
    assert person != other


def test_default_renderer_follows_login_session(
    make_person: Callable[..., Person], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an explicit gate the renderer reads the process-wide session."""
    monkeypatch.setattr(session, "_level", None)
    renderer = PersonRenderer()
    person = make_person(access_level=3)
    session.set_level(5)
    assert "Address:  *** HIDDEN ***  Title:" in renderer.show_all(person)
    session.set_level(3)
    assert "Address: Blk 1 Clementi Rd Title:" in renderer.show_all(person)
    assert "Address: Blk 1 Clementi Rd Title:" in renderer.hide_private(person)
