# app/core/__init__.py

from .config import get_settings, Settings
from .logging import setup_logging
from .exceptions import (
    FilmorateError,
    NotFoundError,
    MalformedAggregateError,
    UnsupportedSortKeyError,
    InvalidCriteriaError,
    InvalidOperationError,
    InvalidDataError,
    InfrastructureError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "FilmorateError",
    "NotFoundError",
    "MalformedAggregateError",
    "UnsupportedSortKeyError",
    "InvalidCriteriaError",
    "InvalidOperationError",
    "InvalidDataError",
    "InfrastructureError",
]
