"""
Catalog Services

Filtering, progress tracking and aggregates over the 101 Fixes catalog.
"""

from .filtering import filter_fixes, effective_progress
from .progress import ProgressTracker, compute_stats
from .storage import (
    ProgressStorage,
    InMemoryProgressStorage,
    JsonFileProgressStorage,
    parse_progress,
    serialize_progress,
    PROGRESS_KEY,
)
from .engine import CatalogEngine

__all__ = [
    'filter_fixes',
    'effective_progress',
    'ProgressTracker',
    'compute_stats',
    'ProgressStorage',
    'InMemoryProgressStorage',
    'JsonFileProgressStorage',
    'parse_progress',
    'serialize_progress',
    'PROGRESS_KEY',
    'CatalogEngine',
]
