#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import logging
import sys
import time

from enum import Enum
from math import inf, isnan
from typing import TYPE_CHECKING, Optional, TypeVar, Union

from aiologic import Condition
from aiologic.lowlevel import (
    async_checkpoint,
    create_thread_rlock,
    green_checkpoint,
    green_clock,
)

from priochan._utils import normalize_timeout

from ._buckets import Buckets
from ._exceptions import ChannelEmpty, ChannelFull, InvalidCapacity
from ._priorities import DEFAULT_PRIORITIES, UNBOUNDED, Priorities
from ._protocols import MixedChannel
from ._proxies import AsyncChannelProxy, GreenChannelProxy, SyncChannelProxy

if TYPE_CHECKING:
    from aiologic.lowlevel import ThreadRLock

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable
    else:
        from typing import Callable

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ClosedType(Enum):
    CLOSED = "CLOSED"

    def __repr__(self, /) -> str:
        return self.name

    def __bool__(self, /) -> bool:
        return False


def check_capacity(capacity: int, /) -> None:
    if (
        not isinstance(capacity, int)
        or isinstance(capacity, bool)
        or capacity <= 0
    ):
        msg = f"capacity must be a positive integer, got {capacity!r}"
        raise InvalidCapacity(msg)


def check_aging_interval(
    aging_interval: Optional[float],
    /,
) -> Optional[float]:
    if aging_interval is None:
        return None

    if isinstance(aging_interval, bool) or not isinstance(
        aging_interval,
        (int, float),
    ):
        msg = "'aging_interval' must be a number"
        raise ValueError(msg)

    if isinstance(aging_interval, int):
        try:
            aging_interval = float(aging_interval)
        except OverflowError:
            aging_interval = (-1 if aging_interval < 0 else +1) * inf

    if isnan(aging_interval) or aging_interval <= 0:
        msg = "'aging_interval' must be a positive number"
        raise ValueError(msg)

    return float(aging_interval)


#: Returned by get calls once the channel has been shut down and drained.
CLOSED = ClosedType.CLOSED


class PriorityChannel(MixedChannel[_T]):
    """
    A mixed sync-async channel that is:

    * :abbr:`MPMC (multi-producer, multi-consumer)`
    * bounded
    * ordered by priority (highest first), :abbr:`FIFO (first-in, first-out)`
      within each priority

    If *aging_interval* is given, items that have waited at least that many
    seconds are moved one priority level up by the next put call, so that a
    constant stream of urgent items cannot starve the rest forever.
    """

    __slots__ = (
        "__buckets",
        "__weakref__",
        "_aging_interval",
        "_capacity",
        "_clock",
        "_is_shutdown",
        "_next_check",
        "_priorities",
        "mutex",
        "not_empty",
        "not_full",
    )

    __buckets: Buckets[_T]

    _capacity: int
    _priorities: Priorities
    _aging_interval: Optional[float]
    _next_check: Optional[float]
    _clock: Callable[[], float]
    _is_shutdown: bool

    mutex: ThreadRLock

    not_full: Condition[ThreadRLock]
    not_empty: Condition[ThreadRLock]

    def __init__(
        self,
        /,
        capacity: int = UNBOUNDED,
        *,
        aging_interval: Optional[float] = None,
        priorities: Priorities = DEFAULT_PRIORITIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Create a channel object with the given capacity.

        Args:
          capacity:
            The maximum number of buffered items. Must be a positive integer.
            :data:`UNBOUNDED` means "as many as fit in memory".
          aging_interval:
            The number of seconds after which a waiting item is promoted one
            priority level up. Aging is disabled if it is :data:`None`.
          priorities:
            The range of accepted priority levels.
          clock:
            A monotonic clock used for aging.

        Raises:
          InvalidCapacity:
            if *capacity* is not a positive integer.
          ValueError:
            if *aging_interval* is not a positive number.
        """

        check_capacity(capacity)

        aging_interval = check_aging_interval(aging_interval)

        if not isinstance(priorities, Priorities):
            priorities = Priorities(*priorities)

        self._capacity = capacity
        self._priorities = priorities
        self._aging_interval = aging_interval
        self._clock = clock
        self._is_shutdown = False

        if aging_interval is None:
            self._next_check = None
        else:
            self._next_check = clock() + aging_interval

        self.mutex = mutex = create_thread_rlock()

        self.not_full = Condition(mutex)  # putters
        self.not_empty = Condition(mutex)  # getters

        self.__buckets = Buckets(priorities)

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        with self.mutex:
            sizes = {
                priority: size
                for priority, size in self.__buckets.sizes().items()
                if size
            }

        args_repr = f"{self._capacity!r}"

        if self._aging_interval is not None:
            args_repr += f", aging_interval={self._aging_interval!r}"

        if self._priorities != DEFAULT_PRIORITIES:
            args_repr += f", priorities={self._priorities!r}"

        extra = f"sizes={sizes!r}"

        if self._is_shutdown:
            extra += ", shutdown"

        return f"{cls_repr}({args_repr}) [{extra}]"

    def __bool__(self, /) -> bool:
        with self.mutex:
            return bool(self.__buckets)

    def __len__(self, /) -> int:
        with self.mutex:
            return len(self.__buckets)

    def size(self, /, min_priority: Optional[int] = None) -> int:
        if min_priority is not None:
            min_priority = self._priorities.validate(min_priority)

        with self.mutex:
            return self.__buckets.count(min_priority)

    def green_put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        priority = self._priorities.validate(priority)
        timeout = normalize_timeout(timeout)

        if not blocking:
            timeout = 0

        rescheduled = False
        notified = False
        success = False
        deadline = None

        with self.not_full:
            try:
                self._age()

                while self._full():
                    if timeout is None:
                        notified = self.not_full.wait()
                    elif timeout:
                        if deadline is None:
                            deadline = green_clock() + timeout
                        else:
                            timeout = deadline - green_clock()

                            if timeout <= 0:
                                raise ChannelFull

                        notified = self.not_full.wait(timeout)
                    else:
                        raise ChannelFull

                    rescheduled = True

                self._put(item, priority)

                success = True
            finally:
                if notified and not success:
                    self.not_full.notify()

        if not rescheduled and blocking:
            green_checkpoint()

    async def async_put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
    ) -> None:
        priority = self._priorities.validate(priority)

        rescheduled = False
        notified = False
        success = False

        with self.not_full:
            try:
                self._age()

                while self._full():
                    notified = await self.not_full

                    rescheduled = True

                self._put(item, priority)

                success = True
            finally:
                if notified and not success:
                    self.not_full.notify()

        if not rescheduled:
            await async_checkpoint()

    def put_nowait(self, /, item: _T, priority: Optional[int] = None) -> None:
        priority = self._priorities.validate(priority)

        with self.mutex:
            self._age()

            if self._full():
                raise ChannelFull

            self._put(item, priority)

    def green_get(
        self,
        /,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> Union[_T, ClosedType]:
        timeout = normalize_timeout(timeout)

        if not blocking:
            timeout = 0

        rescheduled = False
        notified = False
        success = False
        deadline = None

        with self.not_empty:
            try:
                while not self.__buckets:
                    if self._is_shutdown:
                        return CLOSED

                    if timeout is None:
                        notified = self.not_empty.wait()
                    elif timeout:
                        if deadline is None:
                            deadline = green_clock() + timeout
                        else:
                            timeout = deadline - green_clock()

                            if timeout <= 0:
                                raise ChannelEmpty

                        notified = self.not_empty.wait(timeout)
                    else:
                        raise ChannelEmpty

                    rescheduled = True

                item = self._get()

                success = True
            finally:
                if notified and not success:
                    self.not_empty.notify()

        if not rescheduled and blocking:
            green_checkpoint()

        return item

    async def async_get(self, /) -> Union[_T, ClosedType]:
        rescheduled = False
        notified = False
        success = False

        with self.not_empty:
            try:
                while not self.__buckets:
                    if self._is_shutdown:
                        return CLOSED

                    notified = await self.not_empty

                    rescheduled = True

                item = self._get()

                success = True
            finally:
                if notified and not success:
                    self.not_empty.notify()

        if not rescheduled:
            await async_checkpoint()

        return item

    def get_nowait(self, /) -> Union[_T, ClosedType]:
        with self.mutex:
            if not self.__buckets:
                if self._is_shutdown:
                    return CLOSED

                raise ChannelEmpty

            return self._get()

    put = green_put
    sync_put = green_put

    get = green_get
    sync_get = green_get

    def shutdown(self, /) -> None:
        with self.mutex:
            if not self._is_shutdown:
                self._is_shutdown = True

                self.not_empty.notify_all()

    # These will only be called with the lock held

    def _full(self, /) -> bool:
        return len(self.__buckets) >= self._capacity

    def _age(self, /) -> None:
        interval = self._aging_interval

        if interval is None:
            return

        now = self._clock()

        if now < self._next_check:
            return

        promoted = self.__buckets.promote(now, now + interval)

        self._next_check = now + interval

        if promoted:
            logger.debug("%r: promoted %d stale item(s)", self, promoted)

    def _put(self, /, item: _T, priority: int) -> None:
        if self._aging_interval is None:
            expires_at = None
        else:
            expires_at = self._clock() + self._aging_interval

        self.__buckets.push(priority, item, expires_at)

        self.not_empty.notify()

    def _get(self, /) -> _T:
        item = self.__buckets.pop_highest()

        self.not_full.notify()

        return item

    @property
    def sync_q(self, /) -> SyncChannelProxy[_T]:
        return SyncChannelProxy(self)

    @property
    def green_q(self, /) -> GreenChannelProxy[_T]:
        return GreenChannelProxy(self)

    @property
    def async_q(self, /) -> AsyncChannelProxy[_T]:
        return AsyncChannelProxy(self)

    @property
    def putting(self, /) -> int:
        """
        The current number of threads/tasks waiting to put.
        """

        return self.not_full.waiting

    @property
    def getting(self, /) -> int:
        """
        The current number of threads/tasks waiting to get.
        """

        return self.not_empty.waiting

    @property
    def available(self, /) -> int:
        """
        The number of items ready to be consumed.
        """

        with self.mutex:
            return len(self.__buckets)

    @property
    def free(self, /) -> int:
        """
        The remaining capacity. ``available + free == capacity`` always holds
        outside of the channel lock.
        """

        with self.mutex:
            return self._capacity - len(self.__buckets)

    @property
    def is_shutdown(self, /) -> bool:
        return self._is_shutdown

    @property
    def capacity(self, /) -> int:
        return self._capacity

    @property
    def priorities(self, /) -> Priorities:
        return self._priorities

    @property
    def aging_interval(self, /) -> Optional[float]:
        return self._aging_interval

    @property
    def next_check(self, /) -> Optional[float]:
        """
        The moment from which the next put call runs an aging sweep, or
        :data:`None` if aging is disabled.
        """

        return self._next_check
