#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import NamedTuple, Optional

from ._exceptions import InvalidPriority

PRIO_MIN = -4
PRIO_IDLE = -3
PRIO_LOW = -1
PRIO_NORMAL = 0
PRIO_HIGH = 1
PRIO_MAX = 3

UNBOUNDED = sys.maxsize


def _is_int(value: object, /) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class _PrioritiesBase(NamedTuple):
    minimum: int
    maximum: int
    default: int


class Priorities(_PrioritiesBase):
    """
    An inclusive range of priority levels plus the level used when a put call
    gives none. Higher levels are served first.

    The default range mirrors the Coro scheduler levels, from
    :data:`PRIO_MIN` to :data:`PRIO_MAX` with :data:`PRIO_NORMAL` as the
    default.
    """

    __slots__ = ()

    def __new__(
        cls,
        /,
        minimum: int = PRIO_MIN,
        maximum: int = PRIO_MAX,
        default: Optional[int] = None,
    ) -> Priorities:
        if not (_is_int(minimum) and _is_int(maximum)):
            msg = "priority bounds must be integers"
            raise ValueError(msg)

        if default is None:
            default = max(minimum, min(PRIO_NORMAL, maximum))
        elif not _is_int(default):
            msg = "priority bounds must be integers"
            raise ValueError(msg)

        if not minimum <= default <= maximum:
            msg = (
                f"expected minimum <= default <= maximum,"
                f" got {minimum} <= {default} <= {maximum}"
            )
            raise ValueError(msg)

        return super().__new__(cls, minimum, maximum, default)

    def __contains__(self, value: object, /) -> bool:
        return _is_int(value) and self.minimum <= value <= self.maximum

    @property
    def levels(self, /) -> int:
        return self.maximum - self.minimum + 1

    def validate(self, /, priority: Optional[int] = None) -> int:
        """
        Return *priority*, or the default level if it is :data:`None`.

        Raises:
          InvalidPriority:
            if *priority* is not an integer within the range.
        """

        if priority is None:
            return self.default

        if priority not in self:
            msg = (
                f"priority must be an integer in [{self.minimum},"
                f" {self.maximum}], got {priority!r}"
            )
            raise InvalidPriority(msg)

        return priority


DEFAULT_PRIORITIES = Priorities(PRIO_MIN, PRIO_MAX, PRIO_NORMAL)
