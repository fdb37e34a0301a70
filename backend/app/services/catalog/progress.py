"""
Progress tracking.

The progress map is the only mutable visitor state. Every change replaces one
entry, writes the whole map back to storage (last write wins) and yields
freshly computed aggregates. Aggregates are never cached, so they cannot
drift from the map.
"""
from collections import Counter
import logging
from typing import Dict, Iterable, Sequence, Union

from ...data import FIXES
from ...models.catalog import Difficulty, Fix, Progress, ProgressMap, ProgressStats, UnknownFixError
from .filtering import effective_progress
from .storage import ProgressStorage

logger = logging.getLogger(__name__)


def compute_stats(fixes: Sequence[Fix], progress_map: ProgressMap) -> ProgressStats:
    """
    Aggregate progress over the catalog.

    Counts are taken over catalog fixes only, using effective progress, so
    untouched fixes count as pending and completed_by_difficulty always sums
    to completed_count.
    """
    completed = 0
    in_progress = 0
    completed_by_difficulty: Dict[Difficulty, int] = {difficulty: 0 for difficulty in Difficulty}

    for fix in fixes:
        progress = effective_progress(progress_map, fix.id)
        if progress == Progress.DONE:
            completed += 1
            completed_by_difficulty[fix.difficulty] += 1
        elif progress == Progress.IN_PROGRESS:
            in_progress += 1

    return ProgressStats(
        total=len(fixes),
        completed_count=completed,
        in_progress_count=in_progress,
        pending_count=len(fixes) - completed - in_progress,
        completed_by_difficulty=completed_by_difficulty,
    )


class ProgressTracker:
    """Owns the progress map for one visitor device."""

    def __init__(self, storage: ProgressStorage, fixes: Sequence[Fix] = FIXES):
        self.storage = storage
        self.fixes = tuple(fixes)
        self._fix_ids = frozenset(fix.id for fix in self.fixes)
        self._progress = self._load()

    def _load(self) -> ProgressMap:
        loaded = self.storage.load()
        progress_map = {
            fix_id: progress for fix_id, progress in loaded.items()
            if fix_id in self._fix_ids
        }
        if len(progress_map) != len(loaded):
            logger.warning(f"Dropped {len(loaded) - len(progress_map)} stored entries for unknown fixes")
        counts = Counter(progress_map.values())
        logger.info(
            f"Loaded progress for {len(progress_map)} fixes "
            f"({counts[Progress.DONE]} done, {counts[Progress.IN_PROGRESS]} in progress)"
        )
        return progress_map

    @property
    def progress_map(self) -> ProgressMap:
        """Copy of the current map; mutate through set_progress only."""
        return dict(self._progress)

    def get(self, fix_id: int) -> Progress:
        self._require_known(fix_id)
        return effective_progress(self._progress, fix_id)

    def _require_known(self, fix_id: int) -> None:
        if fix_id not in self._fix_ids:
            raise UnknownFixError(fix_id)

    def set_progress(self, fix_id: int, progress: Union[Progress, str]) -> ProgressStats:
        """
        Record progress for one fix and persist the full map.

        Unknown ids raise UnknownFixError and unknown labels raise ValueError;
        neither touches the map. Re-setting the current value is allowed.
        """
        self._require_known(fix_id)
        value = Progress(progress)

        self._progress[fix_id] = value
        self.storage.save(dict(self._progress))
        logger.debug(f"Fix {fix_id} -> {value.value}")
        return self.stats()

    def set_many(self, updates: Iterable) -> ProgressStats:
        """Apply (fix_id, progress) pairs in order. Validation happens before any write."""
        pending = [(fix_id, Progress(progress)) for fix_id, progress in updates]
        for fix_id, _ in pending:
            self._require_known(fix_id)

        for fix_id, value in pending:
            self._progress[fix_id] = value
        self.storage.save(dict(self._progress))
        return self.stats()

    def stats(self) -> ProgressStats:
        return compute_stats(self.fixes, self._progress)
