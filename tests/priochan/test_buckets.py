#!/usr/bin/env python3

import pytest
import priochan


class TestBuckets:
    factory = priochan.Buckets

    def test_empty(self):
        buckets = self.factory()

        assert len(buckets) == 0
        assert not buckets
        assert buckets.count() == 0

        with pytest.raises(IndexError):
            buckets.pop_highest()
        with pytest.raises(IndexError):
            buckets.peek_highest()

    def test_fifo_within_priority(self):
        buckets = self.factory()

        for i in range(5):
            buckets.push(priochan.PRIO_NORMAL, i)

        assert [buckets.pop_highest() for _ in range(5)] == [0, 1, 2, 3, 4]

    def test_highest_first(self):
        buckets = self.factory()

        buckets.push(priochan.PRIO_LOW, "low")
        buckets.push(priochan.PRIO_MAX, "max")
        buckets.push(priochan.PRIO_MIN, "min")
        buckets.push(priochan.PRIO_HIGH, "high")

        assert buckets.peek_highest() == "max"
        assert list(buckets) == ["max", "high", "low", "min"]
        assert [buckets.pop_highest() for _ in range(4)] == [
            "max",
            "high",
            "low",
            "min",
        ]
        assert not buckets

    def test_count(self):
        buckets = self.factory()

        buckets.push(priochan.PRIO_LOW, 1)
        buckets.push(priochan.PRIO_NORMAL, 2)
        buckets.push(priochan.PRIO_NORMAL, 3)
        buckets.push(priochan.PRIO_HIGH, 4)

        assert buckets.count() == 4
        assert buckets.count(priochan.PRIO_MIN) == 4
        assert buckets.count(priochan.PRIO_NORMAL) == 3
        assert buckets.count(priochan.PRIO_HIGH) == 1
        assert buckets.count(priochan.PRIO_MAX) == 0

        assert buckets.sizes()[priochan.PRIO_NORMAL] == 2
        assert sum(buckets.sizes().values()) == len(buckets) == 4

    def test_custom_priorities(self):
        buckets = self.factory(priochan.Priorities(1, 3, 2))

        buckets.push(1, "a")
        buckets.push(3, "b")

        assert list(buckets.sizes()) == [1, 2, 3]
        assert buckets.pop_highest() == "b"
        assert buckets.pop_highest() == "a"

    def test_promote(self):
        buckets = self.factory(priochan.Priorities(0, 2, 0))

        buckets.push(0, "a", 5.0)
        buckets.push(0, "b", 15.0)
        buckets.push(0, "c", 5.0)
        buckets.push(1, "d", 5.0)
        buckets.push(2, "e", 5.0)
        buckets.push(0, "f")  # never expires

        assert buckets.promote(10.0, 20.0) == 3

        assert buckets.sizes() == {0: 2, 1: 2, 2: 2}
        # promoted entries keep their order and go to the tail
        assert list(buckets) == ["e", "d", "a", "c", "b", "f"]

    def test_promote_one_level_per_sweep(self):
        buckets = self.factory(priochan.Priorities(0, 3, 0))

        buckets.push(0, "a", 0.0)

        assert buckets.promote(100.0, 110.0) == 1
        assert buckets.sizes() == {0: 0, 1: 1, 2: 0, 3: 0}

        assert buckets.promote(105.0, 115.0) == 0
        assert buckets.promote(110.0, 120.0) == 1
        assert buckets.sizes() == {0: 0, 1: 0, 2: 1, 3: 0}

    def test_clear(self):
        buckets = self.factory()

        buckets.push(priochan.PRIO_LOW, 1)
        buckets.push(priochan.PRIO_HIGH, 2)

        buckets.clear()

        assert len(buckets) == 0
        assert buckets.count() == 0
