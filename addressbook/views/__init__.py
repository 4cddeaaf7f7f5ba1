"""Read-only views over address book records."""

from .person_view import (
    PersonRenderer,
    ReadOnlyPerson,
    is_same_state_as,
    render_hide_private,
    render_show_all,
    render_show_minimal,
)

__all__ = [
    "PersonRenderer",
    "ReadOnlyPerson",
    "is_same_state_as",
    "render_hide_private",
    "render_show_all",
    "render_show_minimal",
]
