"""Access level of the current session.

The login layer owns a single, process-wide access level that changes as
users log in and out. Views do not read it directly; they receive an
:class:`AccessGate` and ask it for the level at the moment they need it.

Lower levels are more privileged.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from addressbook.configs.settings import Settings, app_config


class AccessGate(Protocol):
    """Anything that can report the current session's access level."""

    def current_level(self) -> int:
        ...


class SessionAccessLevel:
    """Mutable holder of the session access level.

    The level is written by the login layer and read by
    :class:`SessionAccessGate`. No locking is done here.

    Parameters
    ----------
    level : Optional[int], default=None
        Initial level. ``None`` means nobody has logged in yet.

    Examples
    --------
    >>> store = SessionAccessLevel()
    >>> store.set_level(2)
    >>> store.get_level()
    2
    """

    def __init__(self, level: Optional[int] = None) -> None:
        self._level = level

    def set_level(self, level: int) -> None:
        logging.info("Session access level set to %s", level)
        self._level = level

    def clear(self) -> None:
        self._level = None

    def is_set(self) -> bool:
        return self._level is not None

    def get_level(self) -> int:
        """Return the current level.

        Raises
        ------
        RuntimeError
            If no level has been set; the session was never initialised.
        """
        if self._level is None:
            raise RuntimeError("Session access level has not been initialised")
        return self._level


class SessionAccessGate:
    """Gate backed by a :class:`SessionAccessLevel`, read on every call."""

    def __init__(self, store: SessionAccessLevel) -> None:
        self._store = store

    def current_level(self) -> int:
        return self._store.get_level()


class FixedAccessGate:
    """Gate that always reports the same level.

    Examples
    --------
    >>> FixedAccessGate(3).current_level()
    3
    """

    def __init__(self, level: int) -> None:
        self._level = level

    def current_level(self) -> int:
        return self._level


def session_from_settings(settings: Settings) -> SessionAccessLevel:
    """Create a session store seeded with ``settings.DEFAULT_ACCESS_LEVEL``.

    Examples
    --------
    >>> session_from_settings(Settings(DEFAULT_ACCESS_LEVEL=4)).get_level()
    4
    """
    return SessionAccessLevel(settings.DEFAULT_ACCESS_LEVEL)


# Process-wide session and the gate views use by default
session = session_from_settings(app_config)
session_gate = SessionAccessGate(session)
