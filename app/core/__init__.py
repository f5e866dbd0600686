# app/core/__init__.py

from .config import get_settings, Settings
from .exceptions import FilmorateError, ValidationError, DataNotFound

__all__ = [
    "get_settings",
    "Settings",
    "FilmorateError",
    "ValidationError",
    "DataNotFound",
]
