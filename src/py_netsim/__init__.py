"""DNS resolution timing for a network-performance simulator.

Re-exports public symbols so callers can write::

    from py_netsim import DnsCache, NetworkRequest
"""

from py_netsim.config import DnsCacheOptions
from py_netsim.dns_cache import (
    DNS_RESOLUTION_RTT_MULTIPLIER,
    DnsCache,
    DnsCacheEntry,
    InvalidConfigurationError,
)
from py_netsim.logging import LogEntry, Logger, LogLevel
from py_netsim.request import NetworkRequest, RequestError
from py_netsim.timeline import DnsTiming, replay, total_dns_time

__all__ = [
    "DNS_RESOLUTION_RTT_MULTIPLIER",
    "DnsCache",
    "DnsCacheEntry",
    "DnsCacheOptions",
    "DnsTiming",
    "InvalidConfigurationError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "NetworkRequest",
    "RequestError",
    "replay",
    "total_dns_time",
]
