"""
101 Fixes - Catalog Models

The catalog is fixed reference data. Fix records are immutable; the only
mutable state on the visitor side is the progress map, keyed by Fix.id.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


# Filter value that disables a category predicate
ALL = "All"


# =============================================================================
# ENUMS
# =============================================================================

class Difficulty(str, Enum):
    EASY = "Easy Fix"
    MEDIUM = "Medium Fix"
    HARD = "Hard Fix"

    @property
    def short_name(self) -> str:
        """Lowercase key used in stats payloads (easy/medium/hard)."""
        return self.name.lower()


class Channel(str, Enum):
    LANDING_PAGE = "Landing Page"
    PAID_ADS = "Paid Ads"
    EMAIL = "Email"
    MARKETING = "Marketing"


class Progress(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


ProgressMap = Dict[int, Progress]


class UnknownFixError(ValueError):
    """Raised when a fix id is not part of the catalog."""

    def __init__(self, fix_id):
        super().__init__(f"Unknown fix id: {fix_id!r}")
        self.fix_id = fix_id


# =============================================================================
# FIX
# =============================================================================

@dataclass(frozen=True)
class Fix:
    """One catalog entry: a problem, the fix, and a worked example."""
    id: int
    difficulty: Difficulty
    channel: Channel
    problem: str
    solution: str
    example: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "difficulty": self.difficulty.value,
            "channel": self.channel.value,
            "problem": self.problem,
            "solution": self.solution,
            "example": self.example,
        }


# =============================================================================
# FILTER QUERY
# =============================================================================

def _coerce(value, enum_cls):
    """Map a filter label to its enum member, leaving "All" untouched."""
    if value is None or value == ALL:
        return ALL
    return enum_cls(value)


@dataclass
class FixQuery:
    """
    Filter inputs for the catalog.

    Category fields take either "All" or one of the enum labels. Unknown
    labels raise ValueError here, not at filter time.
    """
    search_term: str = ""
    difficulty: Union[Difficulty, str] = ALL
    channel: Union[Channel, str] = ALL
    progress: Union[Progress, str] = ALL
    progress_map: ProgressMap = field(default_factory=dict)

    def __post_init__(self):
        self.search_term = self.search_term or ""
        self.difficulty = _coerce(self.difficulty, Difficulty)
        self.channel = _coerce(self.channel, Channel)
        self.progress = _coerce(self.progress, Progress)


# =============================================================================
# PROGRESS STATS
# =============================================================================

@dataclass
class ProgressStats:
    """Aggregates derived from a progress map. Never persisted."""
    total: int
    completed_count: int
    in_progress_count: int
    pending_count: int
    completed_by_difficulty: Dict[Difficulty, int]

    @property
    def completion_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.completed_count / self.total * 100, 1)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "completed_count": self.completed_count,
            "in_progress_count": self.in_progress_count,
            "pending_count": self.pending_count,
            "completed_by_difficulty": {
                difficulty.short_name: count
                for difficulty, count in self.completed_by_difficulty.items()
            },
            "completion_percent": self.completion_percent,
        }
