#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

import asyncio
import queue


class InvalidPriority(ValueError):
    """
    Raised when put/size with a priority outside of the channel range.
    """


class InvalidCapacity(ValueError):
    """
    Raised when creating a channel with a non-positive capacity.
    """


class ChannelEmpty(queue.Empty, asyncio.QueueEmpty):
    """
    Raised when non-blocking get with empty channel.
    """


class ChannelFull(queue.Full, asyncio.QueueFull):
    """
    Raised when non-blocking put with full channel.
    """
