#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from collections import deque
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from ._priorities import DEFAULT_PRIORITIES, Priorities

if TYPE_CHECKING:
    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Iterator
    else:
        from typing import Iterator

_T = TypeVar("_T")


class Buckets(Generic[_T]):
    """
    A fixed array of per-priority FIFO buckets.

    Each entry is an ``(item, expires_at)`` pair, where *expires_at* is the
    moment the entry becomes eligible for promotion (or :data:`None` if it
    never does). The store neither blocks nor locks; the owner is expected to
    serialize access.
    """

    __slots__ = (
        "__buckets",
        "__length",
        "priorities",
    )

    __buckets: list[deque[tuple[_T, Optional[float]]]]
    __length: int

    priorities: Priorities

    def __init__(self, /, priorities: Priorities = DEFAULT_PRIORITIES) -> None:
        self.priorities = priorities

        self.__buckets = [deque() for _ in range(priorities.levels)]
        self.__length = 0

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self.sizes()!r})"

    def __len__(self, /) -> int:
        return self.__length

    def __bool__(self, /) -> bool:
        return self.__length > 0

    def __iter__(self, /) -> Iterator[_T]:
        # in delivery order, as long as no sweep intervenes
        for bucket in reversed(self.__buckets):
            for item, _ in bucket:
                yield item

    def push(
        self,
        /,
        priority: int,
        item: _T,
        expires_at: Optional[float] = None,
    ) -> None:
        self.__buckets[priority - self.priorities.minimum].append(
            (item, expires_at)
        )
        self.__length += 1

    def pop_highest(self, /) -> _T:
        """
        Remove and return the front item of the highest non-empty bucket.

        Raises:
          IndexError:
            if every bucket is empty.
        """

        if self.__length:
            for bucket in reversed(self.__buckets):
                if bucket:
                    item, _ = bucket.popleft()

                    self.__length -= 1

                    return item

        msg = "pop from empty buckets"
        raise IndexError(msg)

    def peek_highest(self, /) -> _T:
        if self.__length:
            for bucket in reversed(self.__buckets):
                if bucket:
                    return bucket[0][0]

        msg = "peek from empty buckets"
        raise IndexError(msg)

    def count(self, /, min_priority: Optional[int] = None) -> int:
        """
        Return the number of items at *min_priority* or above.
        """

        if min_priority is None or min_priority <= self.priorities.minimum:
            return self.__length

        start = min_priority - self.priorities.minimum

        return sum(map(len, self.__buckets[start:]))

    def sizes(self, /) -> dict[int, int]:
        minimum = self.priorities.minimum

        return {
            minimum + offset: len(bucket)
            for offset, bucket in enumerate(self.__buckets)
        }

    def promote(self, /, now: float, expires_at: float) -> int:
        """
        Move every entry that expired by *now* one level up.

        Buckets are swept from the lowest level up to, but excluding, the
        highest one. Promoted entries keep their relative order, go to the tail
        of the next bucket and get *expires_at* as a new deadline, so an entry
        climbs at most one level per sweep (assuming ``expires_at > now``).

        Returns the number of promoted entries.
        """

        buckets = self.__buckets
        promoted = 0

        for level in range(len(buckets) - 1):
            bucket = buckets[level]

            if not bucket:
                continue

            expired = []
            pending = deque()

            for entry in bucket:
                deadline = entry[1]

                if deadline is not None and deadline <= now:
                    expired.append(entry[0])
                else:
                    pending.append(entry)

            if expired:
                buckets[level] = pending
                buckets[level + 1].extend(
                    (item, expires_at) for item in expired
                )

                promoted += len(expired)

        return promoted

    def clear(self, /) -> None:
        for bucket in self.__buckets:
            bucket.clear()

        self.__length = 0
