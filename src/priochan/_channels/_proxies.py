#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TypeVar, Union

from ._protocols import (
    AsyncChannel,
    BaseChannel,
    GreenChannel,
    MixedChannel,
    SyncChannel,
)

if TYPE_CHECKING:
    from ._priorities import Priorities
    from ._types import ClosedType

_T = TypeVar("_T")


class BaseChannelProxy(BaseChannel[_T]):
    """
    A proxy that implements the :class:`BaseChannel` protocol by wrapping a
    mixed channel.
    """

    __slots__ = (
        "__weakref__",
        "wrapped",
    )

    wrapped: MixedChannel[_T]

    def __init__(self, /, wrapped: MixedChannel[_T]) -> None:
        self.wrapped = wrapped

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self.wrapped!r})"

    def __bool__(self, /) -> bool:
        return bool(self.wrapped)

    def __len__(self, /) -> int:
        return len(self.wrapped)

    def size(self, /, min_priority: Optional[int] = None) -> int:
        return self.wrapped.size(min_priority)

    def put_nowait(self, /, item: _T, priority: Optional[int] = None) -> None:
        self.wrapped.put_nowait(item, priority)

    def get_nowait(self, /) -> Union[_T, ClosedType]:
        return self.wrapped.get_nowait()

    def shutdown(self, /) -> None:
        self.wrapped.shutdown()

    @property
    def is_shutdown(self, /) -> bool:
        return self.wrapped.is_shutdown

    @property
    def capacity(self, /) -> int:
        return self.wrapped.capacity

    @property
    def priorities(self, /) -> Priorities:
        return self.wrapped.priorities


class SyncChannelProxy(BaseChannelProxy[_T], SyncChannel[_T]):
    """
    A proxy that implements the :class:`SyncChannel` protocol by wrapping a
    mixed channel.
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
        self.wrapped.green_put(item, priority, blocking, timeout)

    def get(
        self,
        /,
        blocking: bool = True,
        timeout: Optional[float] = None,
    ) -> Union[_T, ClosedType]:
        return self.wrapped.green_get(blocking, timeout)


class GreenChannelProxy(SyncChannelProxy[_T], GreenChannel[_T]):
    """
    A proxy that implements the :class:`GreenChannel` protocol by wrapping a
    mixed channel.
    """

    __slots__ = ()


class AsyncChannelProxy(BaseChannelProxy[_T], AsyncChannel[_T]):
    """
    A proxy that implements the :class:`AsyncChannel` protocol by wrapping a
    mixed channel.
    """

    __slots__ = ()

    async def put(self, /, item: _T, priority: Optional[int] = None) -> None:
        await self.wrapped.async_put(item, priority)

    async def get(self, /) -> Union[_T, ClosedType]:
        return await self.wrapped.async_get()
