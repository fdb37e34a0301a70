"""
Tests for catalog filtering.

A fix is shown iff it passes search, difficulty, channel and progress
predicates. Order of the catalog is always preserved.
"""
import pytest

from app.data import FIXES
from app.models.catalog import ALL, Channel, Difficulty, FixQuery, Progress
from app.services.catalog import effective_progress, filter_fixes


def ids(fixes):
    return [fix.id for fix in fixes]


# =============================================================================
# TEST: SEARCH
# =============================================================================

class TestSearch:

    def test_empty_query_returns_whole_catalog_in_order(self):
        assert ids(filter_fixes(FIXES, FixQuery())) == list(range(1, 102))

    def test_checkout_search(self):
        result = ids(filter_fixes(FIXES, FixQuery(search_term="checkout")))
        assert result == [26, 69]
        assert 1 not in result

    def test_search_is_case_insensitive(self):
        lower = filter_fixes(FIXES, FixQuery(search_term="checkout"))
        upper = filter_fixes(FIXES, FixQuery(search_term="CHECKOUT"))
        assert lower == upper

    def test_search_covers_problem_solution_and_example(self):
        # Only in the example text of fix 1
        assert 1 in ids(filter_fixes(FIXES, FixQuery(search_term="Clearer skin in 14 days")))
        # Only in the solution text of fix 1
        assert 1 in ids(filter_fixes(FIXES, FixQuery(search_term="under ~12 words")))

    def test_search_without_matches(self):
        assert filter_fixes(FIXES, FixQuery(search_term="zzz-no-such-text")) == []

    def test_none_search_term_means_no_search(self):
        assert len(filter_fixes(FIXES, FixQuery(search_term=None))) == 101


# =============================================================================
# TEST: CATEGORY FILTERS
# =============================================================================

class TestCategoryFilters:

    def test_hard_email(self):
        query = FixQuery(difficulty="Hard Fix", channel="Email")
        assert ids(filter_fixes(FIXES, query)) == [73, 78, 84, 89, 93, 97]

    def test_enum_members_and_labels_agree(self):
        by_label = filter_fixes(FIXES, FixQuery(difficulty="Medium Fix", channel="Paid Ads"))
        by_enum = filter_fixes(FIXES, FixQuery(difficulty=Difficulty.MEDIUM, channel=Channel.PAID_ADS))
        assert by_label == by_enum
        assert by_label

    def test_combined_filter_is_intersection_of_single_filters(self):
        search = set(ids(filter_fixes(FIXES, FixQuery(search_term="email"))))
        easy = set(ids(filter_fixes(FIXES, FixQuery(difficulty=Difficulty.EASY))))
        marketing = set(ids(filter_fixes(FIXES, FixQuery(channel=Channel.MARKETING))))

        combined = ids(filter_fixes(FIXES, FixQuery(
            search_term="email", difficulty=Difficulty.EASY, channel=Channel.MARKETING,
        )))
        assert set(combined) == search & easy & marketing
        assert combined == sorted(combined)

    def test_all_disables_a_predicate(self):
        assert len(filter_fixes(FIXES, FixQuery(difficulty=ALL, channel=ALL, progress=ALL))) == 101

    @pytest.mark.parametrize("field,label", [
        ("difficulty", "Impossible Fix"),
        ("channel", "Billboards"),
        ("progress", "Abandoned"),
    ])
    def test_unknown_label_rejected(self, field, label):
        with pytest.raises(ValueError):
            FixQuery(**{field: label})


# =============================================================================
# TEST: PROGRESS FILTER
# =============================================================================

class TestProgressFilter:

    def test_untouched_fixes_count_as_pending(self):
        assert effective_progress({}, 5) == Progress.PENDING
        assert len(filter_fixes(FIXES, FixQuery(progress=Progress.PENDING))) == 101

    def test_filters_on_effective_progress(self):
        progress_map = {3: Progress.DONE, 7: Progress.IN_PROGRESS, 9: Progress.DONE}

        done = filter_fixes(FIXES, FixQuery(progress="Done", progress_map=progress_map))
        in_progress = filter_fixes(FIXES, FixQuery(progress="In Progress", progress_map=progress_map))
        pending = filter_fixes(FIXES, FixQuery(progress="Pending", progress_map=progress_map))

        assert ids(done) == [3, 9]
        assert ids(in_progress) == [7]
        assert len(pending) == 98
        assert 3 not in ids(pending)

    def test_explicit_pending_entry_matches_pending(self):
        progress_map = {4: Progress.PENDING}
        assert 4 in ids(filter_fixes(FIXES, FixQuery(progress=Progress.PENDING, progress_map=progress_map)))

    def test_progress_combines_with_other_filters(self):
        progress_map = {73: Progress.DONE, 78: Progress.DONE, 1: Progress.DONE}
        query = FixQuery(
            difficulty=Difficulty.HARD,
            channel=Channel.EMAIL,
            progress=Progress.DONE,
            progress_map=progress_map,
        )
        assert ids(filter_fixes(FIXES, query)) == [73, 78]
