"""Unit tests for feed ranking."""

from datetime import timedelta

import pytest

from camp.domain.service import hot_rank, sort_feed
from camp.domain.value import FeedSort
from tests.conftest import NOW, make_item


class TestHotRank:
    """Tests for hot_rank values."""

    def test_young_item_keeps_full_score(self):
        """Score 10 at 30 minutes ranks 10."""
        assert hot_rank(10, NOW - timedelta(minutes=30), NOW) == 10

    def test_score_decays_with_age(self):
        """Score 10 at 3 hours ranks 10/3."""
        assert hot_rank(10, NOW - timedelta(hours=3), NOW) == pytest.approx(10 / 3)

    def test_negative_score_gives_negative_rank(self):
        """Score -4 at 2 hours ranks -2."""
        assert hot_rank(-4, NOW - timedelta(hours=2), NOW) == pytest.approx(-2)

    def test_min_age_is_configurable(self):
        assert hot_rank(10, NOW, NOW, min_age_hours=2.0) == 5

    def test_same_inputs_same_rank(self):
        created = NOW - timedelta(hours=5)
        assert hot_rank(7, created, NOW) == hot_rank(7, created, NOW)


class TestSortFeed:
    """Tests for sort_feed ordering."""

    def test_hot_favors_recent_items(self):
        """New item with few points ranks above an old item with more."""
        old = make_item("old", score=20, age=timedelta(days=2))
        new = make_item("new", score=3, age=timedelta(minutes=10))

        ranked = sort_feed([old, new], FeedSort.HOT, NOW)

        assert [i.id for i in ranked] == ["new", "old"]

    def test_hot_puts_negative_items_last(self):
        bad = make_item("bad", score=-4, age=timedelta(hours=2))
        meh = make_item("meh", score=0, age=timedelta(hours=30))

        ranked = sort_feed([bad, meh], FeedSort.HOT, NOW)

        assert [i.id for i in ranked] == ["meh", "bad"]

    def test_hot_tie_broken_by_newest(self):
        """Equal hot rank falls back to created_at, newest first."""
        # Both under the one-hour floor: rank == score == 5
        older = make_item("older", score=5, age=timedelta(minutes=50))
        newer = make_item("newer", score=5, age=timedelta(minutes=5))

        ranked = sort_feed([older, newer], FeedSort.HOT, NOW)

        assert [i.id for i in ranked] == ["newer", "older"]

    def test_score_sort_ignores_age(self):
        old = make_item("old", score=9, age=timedelta(days=30))
        new = make_item("new", score=2)

        ranked = sort_feed([new, old], FeedSort.SCORE, NOW)

        assert [i.id for i in ranked] == ["old", "new"]

    def test_score_tie_broken_by_newest(self):
        a = make_item("a", score=4, age=timedelta(hours=3))
        b = make_item("b", score=4, age=timedelta(hours=1))

        ranked = sort_feed([a, b], FeedSort.SCORE, NOW)

        assert [i.id for i in ranked] == ["b", "a"]

    def test_recent_sort(self):
        items = [
            make_item("mid", age=timedelta(hours=2)),
            make_item("newest", age=timedelta(minutes=1)),
            make_item("oldest", age=timedelta(days=1)),
        ]

        ranked = sort_feed(items, FeedSort.RECENT, NOW)

        assert [i.id for i in ranked] == ["newest", "mid", "oldest"]

    def test_order_is_deterministic(self):
        """Same items in any input order give the same feed."""
        items = [make_item(str(n), score=n % 3, age=timedelta(hours=n)) for n in range(8)]

        forward = sort_feed(items, FeedSort.HOT, NOW)
        backward = sort_feed(list(reversed(items)), FeedSort.HOT, NOW)

        assert [i.id for i in forward] == [i.id for i in backward]
