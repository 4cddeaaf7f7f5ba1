"""Storage adapters converting address book models to persisted forms."""

from .adapted_schedule import AdaptedSchedule

__all__ = ["AdaptedSchedule"]
