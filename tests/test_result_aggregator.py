"""
Tests for ResultAggregator - cross-provider merging.

Covers:
1. Order-preserving merge with first-occurrence dedup
2. AggregationStats tracking
3. extend_unique with and without a cap
"""

from conftest import make_item, make_items

from feeling_art.application.search.result_aggregator import AggregationStats, ResultAggregator
from feeling_art.domain.entities.artwork import ArtworkSource


class TestMerge:
    def test_concatenates_in_argument_order(self):
        met = make_items("m", 3)
        aic = make_items("aic-", 2)

        merged = ResultAggregator().merge(met, aic)

        assert [i.id for i in merged] == ["m0", "m1", "m2", "aic-0", "aic-1"]

    def test_duplicate_keeps_first_position(self):
        a = [make_item("1", title="first"), make_item("2")]
        b = [make_item("3"), make_item("1", title="second")]

        merged = ResultAggregator().merge(a, b)

        assert [i.id for i in merged] == ["1", "2", "3"]
        assert merged[0].title == "first"

    def test_duplicates_within_one_list(self):
        merged = ResultAggregator().merge([make_item("1"), make_item("1"), make_item("2")])
        assert [i.id for i in merged] == ["1", "2"]

    def test_ids_unique(self):
        merged = ResultAggregator().merge(make_items("x", 5), make_items("x", 5, start=3))
        ids = [i.id for i in merged]
        assert len(ids) == len(set(ids)) == 8

    def test_empty_lists(self):
        assert ResultAggregator().merge([], []) == []
        assert ResultAggregator().merge() == []


class TestAggregationStats:
    def test_stats(self):
        aggregator = ResultAggregator()
        met = [make_item("1"), make_item("2")]
        aic = [make_item("aic-1", source=ArtworkSource.AIC), make_item("2")]

        aggregator.merge(met, aic)

        stats = aggregator.last_stats
        assert stats.total_input == 4
        assert stats.unique_items == 3
        assert stats.duplicates_removed == 1
        assert stats.by_source == {"met": 2, "aic": 1}

    def test_stats_replaced_per_merge(self):
        aggregator = ResultAggregator()
        aggregator.merge(make_items("a", 4))
        aggregator.merge(make_items("b", 1))
        assert aggregator.last_stats.total_input == 1

    def test_to_dict(self):
        stats = AggregationStats(total_input=3, unique_items=2, duplicates_removed=1, by_source={"met": 2})
        assert stats.to_dict() == {
            "total_input": 3,
            "unique_items": 2,
            "duplicates_removed": 1,
            "by_source": {"met": 2},
        }


class TestExtendUnique:
    def test_skips_seen(self):
        items = [make_item("1")]
        seen = {"1"}

        added = ResultAggregator.extend_unique(items, seen, [make_item("1"), make_item("2")])

        assert added == 1
        assert [i.id for i in items] == ["1", "2"]
        assert seen == {"1", "2"}

    def test_cap(self):
        items = make_items("a", 3)
        seen = {i.id for i in items}

        added = ResultAggregator.extend_unique(items, seen, make_items("b", 10), cap=5)

        assert added == 2
        assert len(items) == 5
        assert "b2" not in seen

    def test_cap_already_reached(self):
        items = make_items("a", 5)
        added = ResultAggregator.extend_unique(items, set(), make_items("b", 3), cap=5)
        assert added == 0
