#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, Optional, TypeVar, Union

from priochan._utils import copydoc

if TYPE_CHECKING:
    from ._priorities import Priorities
    from ._types import ClosedType

if sys.version_info >= (3, 13):  # various fixes and improvements
    from typing import Protocol
else:  # typing-extensions>=4.10.0
    from typing_extensions import Protocol

_T = TypeVar("_T")


class BaseChannel(Protocol[_T]):
    """
    A base channel protocol that includes all except blocking methods.

    Can be useful when you need to make sure that none of the methods will
    block (except for the underlying lock).
    """

    __slots__ = ()

    def __bool__(self, /) -> bool:
        """
        Return :data:`True` if the channel is not empty, :data:`False`
        otherwise.
        """
        ...

    def __len__(self, /) -> int:
        """
        Return the number of items in the channel.

        Note, ``len(channel) > 0`` does not guarantee that a subsequent get
        call will not block (such an approach risks a race condition where the
        channel can shrink before the result can be used).
        """
        ...

    def size(self, /, min_priority: Optional[int] = None) -> int:
        """
        Return the number of items with a priority of at least *min_priority*.

        Without *min_priority*, count every item. Never blocks and never
        consumes anything, so a consumer in the middle of low-priority work
        can check whether something more urgent has arrived since.

        Raises:
          InvalidPriority:
            if *min_priority* is outside of the channel range.
        """
        ...

    def put_nowait(self, /, item: _T, priority: Optional[int] = None) -> None:
        """
        Put *item* into the channel without blocking.

        Only put (enqueue) the item if a free slot is immediately available.

        Raises:
          ChannelFull:
            if the channel is full.
          InvalidPriority:
            if *priority* is outside of the channel range.
        """
        ...

    def get_nowait(self, /) -> Union[_T, ClosedType]:
        """
        Remove and return the next item from the channel without blocking.

        Returns :data:`CLOSED` if the channel has been shut down and drained.

        Raises:
          ChannelEmpty:
            if the channel is empty but has not been shut down.
        """
        ...

    def shutdown(self, /) -> None:
        """
        Put the channel into a shutdown mode.

        Currently blocked and future get calls return the buffered items
        first and then :data:`CLOSED` instead of blocking forever. Put calls
        are still accepted, and buffered items are not discarded, so consumers
        must drain the channel to avoid losing data.

        Calling it more than once has no further effect.
        """
        ...

    @property
    def is_shutdown(self, /) -> bool:
        """
        A boolean that is :data:`True` if the channel has been shut down,
        :data:`False` otherwise.
        """
        ...

    @property
    def capacity(self, /) -> int:
        """
        The maximum number of items which the channel can hold.
        """
        ...

    @property
    def priorities(self, /) -> Priorities:
        """
        The range of priority levels accepted by the channel.
        """
        ...


class SyncChannel(BaseChannel[_T], Protocol[_T]):
    """
    A synchronous channel protocol for threads.
    """

    __slots__ = ()

    def put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Put *item* into the channel at the given *priority* (or at the default
        one).

        Stale low-priority items may be promoted before the item is added (if
        aging is enabled).

        Args:
          blocking:
            Unless set to :data:`False`, the method will block if necessary
            until a free slot is available. Otherwise, ``timeout=0`` is
            implied.
          timeout:
            If set to a non-negative number, the method will block at most
            *timeout* seconds and raise the :exc:`ChannelFull` exception if no
            free slot was available within that time.

        Raises:
          ChannelFull:
            if the channel is full and the timeout has expired.
          InvalidPriority:
            if *priority* is outside of the channel range.
        """
        ...

    def get(
        self,
        /,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> Union[_T, ClosedType]:
        """
        Remove and return the front item of the highest non-empty priority.

        Returns :data:`CLOSED` if the channel has been shut down and drained.

        Args:
          blocking:
            Unless set to :data:`False`, the method will block if necessary
            until an item is available. Otherwise, ``timeout=0`` is implied.
          timeout:
            If set to a non-negative number, the method will block at most
            *timeout* seconds and raise the :exc:`ChannelEmpty` exception if
            no item was available within that time.

        Raises:
          ChannelEmpty:
            if the channel is empty and the timeout has expired.
        """
        ...


class GreenChannel(SyncChannel[_T], Protocol[_T]):
    """
    A green channel protocol for green threads (or for threads if no green
    library is in use).
    """

    __slots__ = ()


class AsyncChannel(BaseChannel[_T], Protocol[_T]):
    """
    An asynchronous channel protocol for async tasks.
    """

    __slots__ = ()

    async def put(self, /, item: _T, priority: Optional[int] = None) -> None:
        """
        Put *item* into the channel at the given *priority* (or at the default
        one).

        If the channel is full, wait until a free slot is available.

        Raises:
          InvalidPriority:
            if *priority* is outside of the channel range.
        """
        ...

    async def get(self, /) -> Union[_T, ClosedType]:
        """
        Remove and return the front item of the highest non-empty priority.

        If the channel is empty, wait until an item is available. Returns
        :data:`CLOSED` if the channel has been shut down and drained.
        """
        ...


class MixedChannel(BaseChannel[_T], Protocol[_T]):
    """
    A mixed channel protocol that includes both types of blocking methods via
    prefixes.

    Provides specialized proxies via properties.
    """

    __slots__ = ()

    @copydoc(SyncChannel.put)
    def green_put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> None: ...

    @copydoc(AsyncChannel.put)
    async def async_put(
        self,
        /,
        item: _T,
        priority: Optional[int] = None,
    ) -> None: ...

    @copydoc(SyncChannel.get)
    def green_get(
        self,
        /,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> Union[_T, ClosedType]: ...

    @copydoc(AsyncChannel.get)
    async def async_get(self, /) -> Union[_T, ClosedType]: ...

    @property
    def sync_q(self, /) -> SyncChannel[_T]:
        """
        An interface for threads, similar to the standard queues from the
        :mod:`queue` module.
        """
        ...

    @property
    def green_q(self, /) -> GreenChannel[_T]:
        """
        An interface for green threads, similar to the standard queues from
        the :mod:`queue` module.
        """
        ...

    @property
    def async_q(self, /) -> AsyncChannel[_T]:
        """
        An interface for async tasks, similar to the standard queues from the
        :mod:`asyncio` module.
        """
        ...
