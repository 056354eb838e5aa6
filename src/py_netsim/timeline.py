"""Replay a request timeline through a DNS cache.

The page-load simulator walks its requests in start-time order and asks
the cache, for each one, how long DNS adds before the connection can
open.  ``replay`` is that walk in its smallest form: it orders the
requests, records every lookup authoritatively, and reports what each
request waited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from py_netsim.dns_cache import DnsCache
    from py_netsim.request import NetworkRequest


@dataclass(frozen=True)
class DnsTiming:
    """What one request paid for DNS during a replay."""

    request: NetworkRequest
    started_at: float
    dns_time: float

    @property
    def resolved_at(self) -> float:
        """Return the instant the request's domain was resolved."""
        return self.started_at + self.dns_time


def replay(cache: DnsCache, requests: Iterable[NetworkRequest]) -> list[DnsTiming]:
    """Record every request's lookup in start-time order.

    Requests that start at the same instant keep their input order.

    Args:
        cache: The run's cache.  Mutated.
        requests: The requests to walk.

    Returns:
        One ``DnsTiming`` per request, in the order they were replayed.

    """
    timings: list[DnsTiming] = []
    for request in sorted(requests, key=lambda r: r.start_time):
        dns_time = cache.estimate_and_record(request, request.start_time)
        timings.append(DnsTiming(request=request, started_at=request.start_time, dns_time=dns_time))
    return timings


def total_dns_time(timings: Iterable[DnsTiming]) -> float:
    """Return the summed DNS wait over a replay."""
    return sum(t.dns_time for t in timings)
