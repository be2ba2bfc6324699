#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from ._buckets import (
    Buckets as Buckets,
)
from ._exceptions import (
    ChannelEmpty as ChannelEmpty,
    ChannelFull as ChannelFull,
    InvalidCapacity as InvalidCapacity,
    InvalidPriority as InvalidPriority,
)
from ._priorities import (
    DEFAULT_PRIORITIES as DEFAULT_PRIORITIES,
    PRIO_HIGH as PRIO_HIGH,
    PRIO_IDLE as PRIO_IDLE,
    PRIO_LOW as PRIO_LOW,
    PRIO_MAX as PRIO_MAX,
    PRIO_MIN as PRIO_MIN,
    PRIO_NORMAL as PRIO_NORMAL,
    UNBOUNDED as UNBOUNDED,
    Priorities as Priorities,
)
from ._protocols import (
    AsyncChannel as AsyncChannel,
    BaseChannel as BaseChannel,
    GreenChannel as GreenChannel,
    MixedChannel as MixedChannel,
    SyncChannel as SyncChannel,
)
from ._proxies import (
    AsyncChannelProxy as AsyncChannelProxy,
    BaseChannelProxy as BaseChannelProxy,
    GreenChannelProxy as GreenChannelProxy,
    SyncChannelProxy as SyncChannelProxy,
)
from ._types import (
    CLOSED as CLOSED,
    ClosedType as ClosedType,
    PriorityChannel as PriorityChannel,
)
