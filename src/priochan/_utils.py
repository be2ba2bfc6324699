#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

from math import inf, isinf, isnan
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import sys

    from typing import Any, TypeVar

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable
    else:
        from typing import Callable

    _CallableT = TypeVar("_CallableT", bound=Callable[..., Any])


def copydoc(wrapped: Callable[..., Any]) -> Callable[[_CallableT], _CallableT]:
    def decorator(function: _CallableT, /) -> _CallableT:
        function.__doc__ = wrapped.__doc__

        return function

    return decorator


def normalize_timeout(timeout: float | None, /) -> float | None:
    if timeout is None:
        return None

    if isinstance(timeout, int):
        try:
            timeout = float(timeout)
        except OverflowError:
            timeout = (-1 if timeout < 0 else +1) * inf

    if isnan(timeout):
        msg = "'timeout' must be a number (non-NaN)"
        raise ValueError(msg)

    if timeout < 0:
        msg = "'timeout' must be a non-negative number"
        raise ValueError(msg)

    if isinf(timeout):
        return None

    return timeout
