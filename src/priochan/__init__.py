#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Thread-safe async-aware priority channels for Python

Bounded multi-priority channels with anti-starvation aging, supposed to be
used for communicating between producers and consumers of any kind (threads,
green threads, async tasks) in any combination, plus a fan-out registry that
replicates every message to an arbitrary number of listener channels.
"""

from __future__ import annotations

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"
__version__: str = "0.1.0"

import logging

from ._channels import (
    CLOSED as CLOSED,
    DEFAULT_PRIORITIES as DEFAULT_PRIORITIES,
    PRIO_HIGH as PRIO_HIGH,
    PRIO_IDLE as PRIO_IDLE,
    PRIO_LOW as PRIO_LOW,
    PRIO_MAX as PRIO_MAX,
    PRIO_MIN as PRIO_MIN,
    PRIO_NORMAL as PRIO_NORMAL,
    UNBOUNDED as UNBOUNDED,
    AsyncChannel as AsyncChannel,
    AsyncChannelProxy as AsyncChannelProxy,
    BaseChannel as BaseChannel,
    BaseChannelProxy as BaseChannelProxy,
    Buckets as Buckets,
    ChannelEmpty as ChannelEmpty,
    ChannelFull as ChannelFull,
    ClosedType as ClosedType,
    GreenChannel as GreenChannel,
    GreenChannelProxy as GreenChannelProxy,
    InvalidCapacity as InvalidCapacity,
    InvalidPriority as InvalidPriority,
    MixedChannel as MixedChannel,
    Priorities as Priorities,
    PriorityChannel as PriorityChannel,
    SyncChannel as SyncChannel,
    SyncChannelProxy as SyncChannelProxy,
)
from ._multi import (
    MultiChannel as MultiChannel,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

del logging

# prepare for external use
from aiologic import meta  # isort: skip

meta.export(globals())

del meta
