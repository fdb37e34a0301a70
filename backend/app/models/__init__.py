"""101 Fixes - Data Models"""
from .catalog import (
    # Enums
    Difficulty, Channel, Progress,
    # Catalog
    ALL, Fix, FixQuery, ProgressMap, ProgressStats, UnknownFixError,
)

__all__ = [
    "Difficulty", "Channel", "Progress",
    "ALL", "Fix", "FixQuery", "ProgressMap", "ProgressStats", "UnknownFixError",
]
