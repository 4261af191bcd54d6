"""
Shared Enums

Application-wide enums and lookup ids used across multiple modules.
"""
from enum import Enum, IntEnum


class Language(str, Enum):
    """Languages a label can be rendered in."""
    KOREAN = "ko"
    ENGLISH = "en"
    THAI = "th"


class PriorityTier(IntEnum):
    """Seeded priority ids; lower is more urgent."""
    CRITICAL = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4


class StatusTier(IntEnum):
    """Seeded status ids."""
    OPEN = 1
    IN_PROGRESS = 2
    RESOLVED = 3
    VERIFIED = 4
    CLOSED = 5


class EventKind(str, Enum):
    """Kinds of raw events a leaderboard is built from."""
    RESOLVER = "resolver"
    COMMENTER = "commenter"
    FINDER = "finder"


# Shown when an employee has no department
NO_DEPARTMENT_LABEL = "부서 없음"
