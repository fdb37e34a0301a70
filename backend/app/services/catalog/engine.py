"""
Catalog Engine

What the visitor interacts with after the gate opens: the fixed catalog, the
current filter selection, and the per-fix progress tracker.
"""
import logging
from typing import List, Optional, Sequence, Union

from ...data import FIXES
from ...models.catalog import (
    ALL, Channel, Difficulty, Fix, FixQuery, Progress, ProgressMap, ProgressStats, UnknownFixError
)
from .filtering import effective_progress, filter_fixes
from .progress import ProgressTracker
from .storage import ProgressStorage

logger = logging.getLogger(__name__)

_UNSET = object()


class CatalogEngine:
    """
    Filter state plus progress tracking over one catalog.

    Filters are plain session state; only progress is persisted.
    """

    def __init__(self, storage: ProgressStorage, fixes: Sequence[Fix] = FIXES):
        self.fixes = tuple(fixes)
        self._by_id = {fix.id: fix for fix in self.fixes}
        self.tracker = ProgressTracker(storage, self.fixes)

        self.search_term = ""
        self.difficulty: Union[Difficulty, str] = ALL
        self.channel: Union[Channel, str] = ALL
        self.progress: Union[Progress, str] = ALL

    # =========================================================================
    # CATALOG
    # =========================================================================

    def fix(self, fix_id: int) -> Fix:
        try:
            return self._by_id[fix_id]
        except KeyError:
            raise UnknownFixError(fix_id) from None

    # =========================================================================
    # FILTERS
    # =========================================================================

    def update_filters(
        self,
        search_term=_UNSET,
        difficulty=_UNSET,
        channel=_UNSET,
        progress=_UNSET,
    ) -> None:
        """Change any subset of the filters. Labels are validated before anything changes."""
        current = self.current_query()
        query = FixQuery(
            search_term=current.search_term if search_term is _UNSET else search_term,
            difficulty=current.difficulty if difficulty is _UNSET else difficulty,
            channel=current.channel if channel is _UNSET else channel,
            progress=current.progress if progress is _UNSET else progress,
        )
        self.search_term = query.search_term
        self.difficulty = query.difficulty
        self.channel = query.channel
        self.progress = query.progress

    def reset_filters(self) -> None:
        """Clear search and set every category back to All. Progress is untouched."""
        self.search_term = ""
        self.difficulty = ALL
        self.channel = ALL
        self.progress = ALL

    def current_query(self) -> FixQuery:
        return FixQuery(
            search_term=self.search_term,
            difficulty=self.difficulty,
            channel=self.channel,
            progress=self.progress,
            progress_map=self.tracker.progress_map,
        )

    def filter(self, query: Optional[FixQuery] = None) -> List[Fix]:
        """Fixes matching query, or the current filters when none is given."""
        if query is None:
            query = self.current_query()
        return filter_fixes(self.fixes, query)

    # =========================================================================
    # PROGRESS
    # =========================================================================

    @property
    def progress_map(self) -> ProgressMap:
        return self.tracker.progress_map

    def effective_progress(self, fix_id: int) -> Progress:
        self.fix(fix_id)
        return effective_progress(self.tracker.progress_map, fix_id)

    def set_progress(self, fix_id: int, progress: Union[Progress, str]) -> ProgressStats:
        return self.tracker.set_progress(fix_id, progress)

    @property
    def stats(self) -> ProgressStats:
        return self.tracker.stats()
