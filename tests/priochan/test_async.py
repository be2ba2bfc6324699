#!/usr/bin/env python3

import pytest
import priochan


class TestAsyncChannel:
    def factory(self, *args, **kwargs):
        return priochan.PriorityChannel(*args, **kwargs).async_q

    def test_getters(self):
        channel = self.factory()

        assert not channel.is_shutdown
        assert channel.capacity == priochan.UNBOUNDED

        with pytest.raises(AttributeError):
            channel.nonexistent_attribute

    def test_setters(self):
        channel = self.factory()

        with pytest.raises(AttributeError):
            channel.is_shutdown = channel.is_shutdown
        with pytest.raises(AttributeError):
            channel.capacity = 1

        with pytest.raises(AttributeError):
            channel.nonexistent_attribute = 42

    @pytest.mark.asyncio
    async def test_put_get(self):
        channel = self.factory(3)

        await channel.put("low", priochan.PRIO_LOW)
        await channel.put("high", priochan.PRIO_HIGH)
        await channel.put("normal")

        assert channel.size(priochan.PRIO_NORMAL) == 2

        assert await channel.get() == "high"
        assert await channel.get() == "normal"
        assert await channel.get() == "low"

        with pytest.raises(priochan.ChannelEmpty):
            channel.get_nowait()

    @pytest.mark.asyncio
    async def test_invalid_priority(self):
        channel = self.factory()

        with pytest.raises(priochan.InvalidPriority):
            await channel.put(1, priochan.PRIO_MAX + 1)

        assert len(channel) == 0

    @pytest.mark.asyncio
    async def test_shutdown(self):
        channel = self.factory()

        await channel.put(1)

        channel.shutdown()

        assert channel.is_shutdown
        assert await channel.get() == 1
        assert await channel.get() is priochan.CLOSED
