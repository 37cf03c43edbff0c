"""Wall clock protocol.

The cache only needs "now" in epoch milliseconds. Tests pass a manual
clock so TTL behaviour can be checked without sleeping.
"""

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Any zero-argument callable returning epoch milliseconds."""

    def __call__(self) -> float: ...


def system_clock() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000
