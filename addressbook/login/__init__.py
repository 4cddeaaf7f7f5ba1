"""Login layer: session access levels consumed by the views."""

from .access_gate import (
    AccessGate,
    FixedAccessGate,
    SessionAccessGate,
    SessionAccessLevel,
    session,
    session_from_settings,
    session_gate,
)

__all__ = [
    "AccessGate",
    "FixedAccessGate",
    "SessionAccessGate",
    "SessionAccessLevel",
    "session",
    "session_from_settings",
    "session_gate",
]
