#!/usr/bin/env python3

import gc
import logging

import pytest
import priochan


class TestMultiChannel:
    factory = priochan.MultiChannel

    def test_init(self):
        multi = self.factory()

        assert multi.capacity == priochan.UNBOUNDED
        assert multi.aging_interval is None
        assert multi.priorities is priochan.DEFAULT_PRIORITIES
        assert multi.number_of_listeners() == 0

        with pytest.raises(priochan.InvalidCapacity):
            self.factory(capacity=0)
        with pytest.raises(ValueError):
            self.factory(aging_interval=-1)

    def test_listen(self):
        multi = self.factory(capacity=7, aging_interval=3)

        listener = multi.listen()

        assert isinstance(listener, priochan.PriorityChannel)
        assert listener.capacity == 7
        assert listener.aging_interval == 3.0
        assert multi.number_of_listeners() == 1
        assert len(multi) == 1
        assert multi.listeners() == [listener]

    def test_replication(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        multi.put(42, priochan.PRIO_NORMAL)

        assert first.get() == 42
        assert second.get() == 42

        third = multi.listen()

        # no replay for late listeners
        with pytest.raises(priochan.ChannelEmpty):
            third.get(timeout=0.05)

    def test_shared_item(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        item = []
        multi.put(item)

        first.get().append("seen by first")

        assert second.get() is item
        assert item == ["seen by first"]

    def test_priorities(self):
        multi = self.factory()

        listener = multi.listen()

        multi.put("low", priochan.PRIO_LOW)
        multi.put("high", priochan.PRIO_HIGH)

        assert listener.get() == "high"
        assert listener.get() == "low"

    def test_invalid_priority(self):
        multi = self.factory()

        listener = multi.listen()

        with pytest.raises(priochan.InvalidPriority):
            multi.put(1, priochan.PRIO_MAX + 1)

        assert len(listener) == 0

    def test_put_without_listeners(self):
        multi = self.factory()

        multi.put("lost")

        listener = multi.listen()

        assert len(listener) == 0

    def test_listener_gc(self):
        multi = self.factory()

        listener = multi.listen()

        assert multi.number_of_listeners() == 1

        del listener
        gc.collect()

        multi.put("nobody")

        assert multi.number_of_listeners() == 0

    def test_unreferenced_listen(self):
        multi = self.factory()

        multi.listen()
        gc.collect()

        assert multi.number_of_listeners() == 0

    def test_clean(self):
        multi = self.factory()

        listeners = [multi.listen() for _ in range(3)]

        assert multi.clean() == 0

        del listeners[1]
        gc.collect()

        assert multi.clean() == 1
        assert multi.clean() == 0
        assert multi.listeners() == listeners

    def test_clean_logging(self, caplog):
        multi = self.factory()

        multi.listen()
        gc.collect()

        with caplog.at_level(logging.DEBUG, logger="priochan"):
            multi.clean()

        assert "1 listener(s) purged" in caplog.text

    def test_unlisten(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        multi.unlisten(first)
        multi.unlisten(first)

        multi.put(1)

        assert multi.listeners() == [second]
        assert len(first) == 0
        assert second.get() == 1

    def test_shutdown_listener(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        first.shutdown()

        assert multi.number_of_listeners() == 1

        multi.put(1)

        assert first.get() is priochan.CLOSED
        assert second.get() == 1

    def test_shutdown(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        multi.put(1)
        multi.shutdown()

        assert multi.number_of_listeners() == 0

        for listener in (first, second):
            assert listener.is_shutdown
            assert listener.get() == 1
            assert listener.get() is priochan.CLOSED

        third = multi.listen()

        assert not third.is_shutdown
        assert multi.number_of_listeners() == 1

    def test_put_nowait(self):
        multi = self.factory(capacity=1)

        first = multi.listen()
        second = multi.listen()

        second.put(0)

        with pytest.raises(priochan.ChannelFull):
            multi.put_nowait(1)

        # best effort: earlier listeners keep the item
        assert first.get_nowait() == 1
        assert second.get_nowait() == 0

    def test_repr(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        second.put(1)

        assert repr(multi) == "priochan.MultiChannel() [0=0, 1=1]"

    @pytest.mark.asyncio
    async def test_async_put(self):
        multi = self.factory()

        first = multi.listen()
        second = multi.listen()

        await multi.async_put("x", priochan.PRIO_HIGH)

        assert await first.async_get() == "x"
        assert await second.async_get() == "x"

        with pytest.raises(priochan.InvalidPriority):
            await multi.async_put("y", priochan.PRIO_MIN - 1)
