"""Address book person view and storage adapters.

This package provides the read-only rendering of a person record at three
visibility tiers and the storage adapter for schedule entries.
"""

from .exceptions import IllegalValueException

__all__ = ["IllegalValueException"]
