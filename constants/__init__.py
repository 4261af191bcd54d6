"""
Constants package for the Factory Issue Dashboard.

Contains shared enums and lookup ids.
"""

from .enums import (
    Language,
    PriorityTier,
    StatusTier,
    EventKind,
    NO_DEPARTMENT_LABEL,
)

__all__ = [
    "Language",
    "PriorityTier",
    "StatusTier",
    "EventKind",
    "NO_DEPARTMENT_LABEL",
]
