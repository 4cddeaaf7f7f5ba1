"""Configuration module for the address book.

This module defines application settings using Pydantic's settings management.
It loads environment variables via ``python-dotenv`` to simplify local development.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv


load_dotenv(override=True)


class Settings(BaseSettings):
    """
    Settings class for the address book.

    Parameters
    ----------
    DEFAULT_ACCESS_LEVEL : Optional[int], default=None
        Access level the session starts with before anyone logs in. Lower
        values are more privileged. ``None`` leaves the session unset.
    LOG_FILE : str, default="addressbook.log"
        File the address book writes its log to.

    Returns
    -------
    Settings
        A validated settings object.

    See Also
    --------
    BaseSettings : Pydantic settings base class for environment variable loading.

    Examples
    --------
    >>> from addressbook.configs.settings import Settings
    >>> settings = Settings()
    >>> settings.LOG_FILE
    'addressbook.log'
    """

    DEFAULT_ACCESS_LEVEL: Optional[int] = Field(default=None, description="Session access level before login")
    LOG_FILE: str = Field(default="addressbook.log", description="Path of the address book log file")


# Create a global instance of the settings
app_config = Settings()
