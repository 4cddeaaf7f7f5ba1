"""Storage-friendly adapted schedule data holder.

The storage layer reads and writes flat mappings. A loader may hand over a
structurally valid mapping with the schedule field missing, so absence is
checked explicitly: a missing field is an error while an empty string is a
valid, empty schedule.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from addressbook.common.utils import is_any_none
from addressbook.exceptions import IllegalValueException
from addressbook.schemas.person import Schedule


class AdaptedSchedule(BaseModel):
    """Persisted form of a :class:`Schedule`.

    Parameters
    ----------
    schedule_name : Optional[str], default=None
        The schedule text. ``None`` until the loader populates it.

    Examples
    --------
    >>> AdaptedSchedule.from_schedule(Schedule("Mon 0900 briefing"))
    AdaptedSchedule(schedule_name='Mon 0900 briefing')
    >>> AdaptedSchedule().is_any_required_field_missing()
    True
    """

    schedule_name: Optional[str] = Field(default=None, description="Schedule text")

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_schedule(cls, source: Schedule) -> "AdaptedSchedule":
        """Convert a schedule into its persisted form.

        Parameters
        ----------
        source : Schedule
            Future changes to this will not affect the created adapted schedule.
        """
        return cls(schedule_name=source.value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdaptedSchedule":
        """Build the persisted form from a mapping read by the storage loader.

        Raises
        ------
        IllegalValueException
            If a field holds a value of the wrong type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logging.warning("Adapted schedule has an invalid field: %s", e)
            raise IllegalValueException(f"Schedule has an invalid field: {data!r}") from e

    def to_dict(self) -> Dict[str, Optional[str]]:
        return self.model_dump()

    def is_any_required_field_missing(self) -> bool:
        """Return True if any required field is missing.

        The loader sets missing elements to ``None``; that is the only thing
        checked here since the model constructors do the rest of the validation.
        """
        return is_any_none(self.schedule_name)

    def to_model_type(self) -> Schedule:
        """Convert this adapted schedule back into a :class:`Schedule`.

        Raises
        ------
        IllegalValueException
            If the schedule field is missing or invalid.
        """
        if self.is_any_required_field_missing():
            logging.warning("Adapted schedule is missing required field 'schedule_name'")
            raise IllegalValueException("Schedule is missing required field 'schedule_name'")
        return Schedule(self.schedule_name)
