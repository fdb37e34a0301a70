"""
Tests for CatalogEngine: filter state plus progress over the shipped catalog.
"""
import pytest

from app.models.catalog import ALL, Channel, Difficulty, FixQuery, Progress, UnknownFixError
from app.services.catalog import CatalogEngine, InMemoryProgressStorage


@pytest.fixture
def engine(progress_storage):
    return CatalogEngine(progress_storage)


class TestFilters:

    def test_starts_unfiltered(self, engine):
        assert len(engine.filter()) == 101
        query = engine.current_query()
        assert query.search_term == ""
        assert query.difficulty == ALL
        assert query.channel == ALL
        assert query.progress == ALL

    def test_update_filters_partially(self, engine):
        engine.update_filters(difficulty="Hard Fix")
        engine.update_filters(channel=Channel.EMAIL)

        assert engine.difficulty == Difficulty.HARD
        assert [fix.id for fix in engine.filter()] == [73, 78, 84, 89, 93, 97]

    def test_invalid_label_leaves_filters_unchanged(self, engine):
        engine.update_filters(search_term="checkout")
        with pytest.raises(ValueError):
            engine.update_filters(search_term="email", channel="Billboards")

        assert engine.search_term == "checkout"
        assert engine.channel == ALL

    def test_reset_returns_whole_catalog(self, engine):
        engine.update_filters(search_term="checkout", difficulty="Easy Fix", progress="Done")
        engine.reset_filters()

        assert [fix.id for fix in engine.filter()] == list(range(1, 102))

    def test_reset_keeps_progress(self, engine):
        engine.set_progress(12, Progress.DONE)
        engine.reset_filters()
        assert engine.effective_progress(12) == Progress.DONE

    def test_progress_filter_sees_latest_changes(self, engine):
        engine.update_filters(progress=Progress.DONE)
        assert engine.filter() == []

        engine.set_progress(40, Progress.DONE)
        assert [fix.id for fix in engine.filter()] == [40]

    def test_explicit_query_used_as_given(self, engine):
        engine.set_progress(40, Progress.DONE)
        engine.update_filters(difficulty=Difficulty.EASY)

        result = engine.filter(FixQuery(progress=Progress.DONE))
        assert result == []

        result = engine.filter(FixQuery(progress=Progress.DONE, progress_map=engine.progress_map))
        assert [fix.id for fix in result] == [40]


class TestProgress:

    def test_unknown_fix(self, engine):
        with pytest.raises(UnknownFixError):
            engine.fix(0)
        with pytest.raises(UnknownFixError):
            engine.effective_progress(102)
        with pytest.raises(UnknownFixError):
            engine.set_progress(102, Progress.DONE)

    def test_stats_follow_set_progress(self, engine):
        stats = engine.set_progress(1, Progress.DONE)
        assert stats == engine.stats
        assert engine.stats.completed_count == 1
        assert engine.stats.completed_by_difficulty[Difficulty.EASY] == 1

    def test_progress_persists_across_engines(self, progress_storage):
        CatalogEngine(progress_storage).set_progress(99, Progress.IN_PROGRESS)

        engine = CatalogEngine(InMemoryProgressStorage(progress_storage.raw))
        assert engine.effective_progress(99) == Progress.IN_PROGRESS
        assert engine.stats.in_progress_count == 1

    def test_custom_catalog(self, progress_storage):
        from app.data import FIXES

        engine = CatalogEngine(progress_storage, fixes=FIXES[:3])
        assert [fix.id for fix in engine.filter()] == [1, 2, 3]
        assert engine.stats.total == 3
        with pytest.raises(UnknownFixError):
            engine.set_progress(4, Progress.DONE)
