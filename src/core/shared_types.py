"""
Type definitions used across layers
"""

from enum import StrEnum


class Period(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    ALL_TIME = "all-time"


class StoreKind(StrEnum):
    MEMORY = "memory"
    SQL = "sql"
