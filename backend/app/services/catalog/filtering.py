"""
Catalog filtering.

A fix is shown iff it passes every predicate: search, difficulty, channel and
progress. Filtering is pure and keeps catalog order, so it is safe to re-run
on every keystroke.
"""
from typing import Iterable, List, Mapping

from ...models.catalog import ALL, Fix, FixQuery, Progress


def effective_progress(progress_map: Mapping[int, Progress], fix_id: int) -> Progress:
    """Progress of a fix, defaulting to Pending for untouched fixes."""
    return progress_map.get(fix_id, Progress.PENDING)


def matches_search(fix: Fix, search_term: str) -> bool:
    if search_term == "":
        return True
    needle = search_term.casefold()
    return (
        needle in fix.problem.casefold()
        or needle in fix.solution.casefold()
        or needle in fix.example.casefold()
    )


def matches_difficulty(fix: Fix, difficulty) -> bool:
    return difficulty == ALL or fix.difficulty == difficulty


def matches_channel(fix: Fix, channel) -> bool:
    return channel == ALL or fix.channel == channel


def matches_progress(fix: Fix, progress, progress_map: Mapping[int, Progress]) -> bool:
    return progress == ALL or effective_progress(progress_map, fix.id) == progress


def filter_fixes(fixes: Iterable[Fix], query: FixQuery) -> List[Fix]:
    """Return the fixes matching every predicate of query, in catalog order."""
    return [
        fix for fix in fixes
        if matches_search(fix, query.search_term)
        and matches_difficulty(fix, query.difficulty)
        and matches_channel(fix, query.channel)
        and matches_progress(fix, query.progress, query.progress_map)
    ]
