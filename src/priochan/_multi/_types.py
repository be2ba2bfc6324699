#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import logging
import sys
import time

from typing import TYPE_CHECKING, Generic, Optional, TypeVar
from weakref import ref

from aiologic.lowlevel import create_thread_rlock

from priochan._channels import (
    DEFAULT_PRIORITIES,
    UNBOUNDED,
    PriorityChannel,
    Priorities,
)
from priochan._channels._types import check_aging_interval, check_capacity

if TYPE_CHECKING:
    from aiologic.lowlevel import ThreadRLock

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable
    else:
        from typing import Callable

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class MultiChannel(Generic[_T]):
    """
    A fan-out registry of priority channels.

    Each :meth:`listen` call creates a new listener channel, and each put call
    is replicated to every listener that is still alive at that moment. There
    is no deep copy: all listeners receive the very same object, so a mutable
    item can be modified by one listener before another one sees it.

    Items put before a listener was created are never replayed to it. The
    registry holds listeners by weak references only, so a consumer loses its
    subscription simply by dropping its channel; :meth:`unlisten` and
    :meth:`PriorityChannel.shutdown` do the same explicitly.

    The keyword arguments configure the listener channels.
    """

    __slots__ = (
        "__weakref__",
        "_aging_interval",
        "_capacity",
        "_clock",
        "_listeners",
        "_mutex",
        "_priorities",
    )

    _listeners: list[ref[PriorityChannel[_T]]]
    _mutex: ThreadRLock

    _capacity: int
    _aging_interval: Optional[float]
    _priorities: Priorities
    _clock: Callable[[], float]

    def __init__(
        self,
        /,
        *,
        capacity: int = UNBOUNDED,
        aging_interval: Optional[float] = None,
        priorities: Priorities = DEFAULT_PRIORITIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        check_capacity(capacity)

        aging_interval = check_aging_interval(aging_interval)

        if not isinstance(priorities, Priorities):
            priorities = Priorities(*priorities)

        self._capacity = capacity
        self._aging_interval = aging_interval
        self._priorities = priorities
        self._clock = clock

        self._listeners = []
        self._mutex = create_thread_rlock()

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        sizes = ", ".join(
            f"{index}={len(channel)}"
            for index, channel in enumerate(self.listeners())
        )

        return f"{cls_repr}() [{sizes}]"

    def __len__(self, /) -> int:
        return self.number_of_listeners()

    def listen(self, /) -> PriorityChannel[_T]:
        """
        Create, register and return a new listener channel.

        The registry keeps only a weak reference, so the caller must hold on
        to the returned channel for as long as it wants to receive items.
        """

        channel = PriorityChannel(
            self._capacity,
            aging_interval=self._aging_interval,
            priorities=self._priorities,
            clock=self._clock,
        )

        with self._mutex:
            self._listeners.append(ref(channel))

            self.clean()

        logger.debug("%r: new listener %r", self, channel)

        return channel

    def unlisten(self, /, channel: PriorityChannel[_T]) -> None:
        """
        Unregister *channel*. Unknown channels are ignored.
        """

        with self._mutex:
            self._listeners = [
                reference
                for reference in self._listeners
                if reference() is not channel
            ]

    def clean(self, /) -> int:
        """
        Remove listeners that have been garbage collected or shut down.

        Shouldn't normally be needed, as put calls and
        :meth:`number_of_listeners` clean the registry themselves.

        Returns the number of removed listeners.
        """

        with self._mutex:
            alive = []

            for reference in self._listeners:
                channel = reference()

                if channel is not None and not channel.is_shutdown:
                    alive.append(reference)

            removed = len(self._listeners) - len(alive)

            if removed:
                self._listeners = alive

        if removed:
            logger.debug("%d listener(s) purged", removed)

        return removed

    def listeners(self, /) -> list[PriorityChannel[_T]]:
        """
        Return the live listeners in registration order.
        """

        with self._mutex:
            self.clean()

            channels = []

            for reference in self._listeners:
                channel = reference()

                if channel is not None:
                    channels.append(channel)

            return channels

    def number_of_listeners(self, /) -> int:
        return len(self.listeners())

    def put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Put *item* into every live listener, in registration order.

        Each listener put may block (see :meth:`PriorityChannel.green_put`),
        so a full listener delays the ones registered after it. The timeout
        applies to each listener separately.

        Raises:
          ChannelFull:
            if a listener is full and the timeout has expired. Listeners
            before it keep the item.
          InvalidPriority:
            if *priority* is outside of the listener range. No listener
            receives the item in that case.
        """

        priority = self._priorities.validate(priority)

        for channel in self.listeners():
            channel.green_put(item, priority, blocking, timeout)

    async def async_put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
    ) -> None:
        """
        Put *item* into every live listener, in registration order.

        Raises:
          InvalidPriority:
            if *priority* is outside of the listener range. No listener
            receives the item in that case.
        """

        priority = self._priorities.validate(priority)

        for channel in self.listeners():
            await channel.async_put(item, priority)

    def put_nowait(self, /, item: _T, priority: Optional[int] = None) -> None:
        priority = self._priorities.validate(priority)

        for channel in self.listeners():
            channel.put_nowait(item, priority)

    def shutdown(self, /) -> None:
        """
        Shut down every live listener.

        Their consumers drain what is left and then receive
        :data:`~priochan.CLOSED`. Shut-down listeners leave the registry, but
        new ones can still be created.
        """

        for channel in self.listeners():
            channel.shutdown()

        self.clean()

    @property
    def capacity(self, /) -> int:
        return self._capacity

    @property
    def aging_interval(self, /) -> Optional[float]:
        return self._aging_interval

    @property
    def priorities(self, /) -> Priorities:
        return self._priorities
