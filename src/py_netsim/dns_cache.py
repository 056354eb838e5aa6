"""DNS resolution cache — how long until a request's domain resolves.

Before a browser can open a connection it must turn the hostname into
an address.  The first lookup for a name is a cold DNS query that costs
a few network round trips; once the answer is in, every later request
to the same name gets it for free.

The simulator does not model DNS packets.  It only needs to know, for a
request starting at simulated instant *t*, how much extra time passes
before its domain is resolved:

    1. **Cold lookup** — the domain has never been resolved: it costs
       ``rtt * RTT_MULTIPLIER``.
    2. **Cached** — the domain resolves (or resolved) at instant *R*:
       the wait is ``max(R - t, 0)``, but never longer than a cold
       lookup would take.

Recording an estimate only ever moves a domain's resolved-at instant
*earlier*.  A simulation that revisits requests out of order cannot
make a name resolve later than it already did.

Two ways to ask:
    - ``estimate_and_record`` — the authoritative path.  Commits the
      result to the cache.
    - ``peek`` — a what-if query from an alternate branch of the
      simulation.  Never touches the cache.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING, Any

from py_netsim.config import DnsCacheOptions
from py_netsim.logging import Logger, LogLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from py_netsim.request import HasHost

DNS_RESOLUTION_RTT_MULTIPLIER = 1.5
LOG_SOURCE = "dns"


class InvalidConfigurationError(ValueError):
    """Raise when the cache is constructed with an unusable RTT."""


@dataclass(frozen=True)
class DnsCacheEntry:
    """One resolved domain and the instant it resolved at."""

    domain: str
    resolved_at: float


class DnsCache:
    """Per-simulation record of when each domain name becomes resolvable.

    A cache belongs to exactly one simulation run.  Runs that execute
    side by side must each construct their own.
    """

    RTT_MULTIPLIER = DNS_RESOLUTION_RTT_MULTIPLIER

    def __init__(self, *, rtt: float | None = None, logger: Logger | None = None) -> None:
        """Create an empty cache.

        Args:
            rtt: Round-trip time of the simulated network.  Required.
            logger: Optional event log for cache mutations.

        Raises:
            InvalidConfigurationError: If *rtt* is missing, zero, not a number,
                or not a positive finite value.

        """
        if not rtt:
            msg = f"Cannot create DNS cache with no rtt (got {rtt!r})"
            raise InvalidConfigurationError(msg)
        if isinstance(rtt, bool) or not isinstance(rtt, (int, float)):
            msg = f"DNS cache rtt must be a number (got {rtt!r})"
            raise InvalidConfigurationError(msg)
        # NaN fails both comparisons
        if not (rtt > 0 and math.isfinite(rtt)):
            msg = f"DNS cache rtt must be positive and finite (got {rtt!r})"
            raise InvalidConfigurationError(msg)
        self._rtt = rtt
        self._logger = logger
        self._resolved_at: dict[str, float] = {}
        self._lock = Lock()

    @classmethod
    def from_options(
        cls,
        options: DnsCacheOptions | Mapping[str, Any] | None,
        *,
        logger: Logger | None = None,
    ) -> DnsCache:
        """Create a cache from simulator options.

        Args:
            options: A ``DnsCacheOptions`` or a plain mapping with an ``rtt`` key.
            logger: Optional event log for cache mutations.

        Raises:
            InvalidConfigurationError: If the options carry no usable RTT.

        """
        if not isinstance(options, DnsCacheOptions):
            options = DnsCacheOptions.from_mapping(options)
        return cls(rtt=options.rtt, logger=logger)

    @property
    def rtt(self) -> float:
        """Return the round-trip time baseline."""
        return self._rtt

    @property
    def baseline(self) -> float:
        """Return the cost of a cold lookup (``rtt * RTT_MULTIPLIER``)."""
        return self._rtt * self.RTT_MULTIPLIER

    # -- Estimation ---------------------------------------------------------

    def estimate_and_record(self, request: HasHost, requested_at: float = 0.0) -> float:
        """Return the time until *request*'s domain resolves, and remember it.

        The domain's resolved-at instant is updated to the earlier of
        its stored value and ``requested_at + result``.

        Args:
            request: The request whose ``host`` is looked up.
            requested_at: Simulated instant the lookup starts.

        Returns:
            Non-negative duration until the domain is resolved.

        """
        domain = request.host
        with self._lock:
            time_until_resolved = self._time_until_resolved(domain, requested_at)
            self._record(domain, requested_at + time_until_resolved, requested_at=requested_at)
        return time_until_resolved

    def peek(self, request: HasHost, requested_at: float) -> float:
        """Return the time until *request*'s domain resolves, without recording it.

        Asking the same question twice gives the same answer: the cache
        is never modified.
        """
        with self._lock:
            return self._time_until_resolved(request.host, requested_at)

    def force_set(self, domain: str, resolved_at: float) -> None:
        """Overwrite *domain*'s resolved-at instant, ignoring the earlier-only rule.

        Useful for seeding tests and alternate execution simulations.
        """
        with self._lock:
            self._resolved_at[domain] = resolved_at
        self._log(f"force-set {domain} resolved at {resolved_at:g}", timestamp=resolved_at)

    def _time_until_resolved(self, domain: str, requested_at: float) -> float:
        time_until_resolved = self.baseline
        cached = self._resolved_at.get(domain)
        if cached is not None:
            time_until_cached_is_resolved = max(cached - requested_at, 0)
            time_until_resolved = min(time_until_cached_is_resolved, time_until_resolved)
        return time_until_resolved

    def _record(self, domain: str, resolved_at: float, *, requested_at: float) -> None:
        previous = self._resolved_at.get(domain)
        if previous is None:
            self._resolved_at[domain] = resolved_at
            self._log(f"resolved {domain} at {resolved_at:g}", timestamp=requested_at)
        elif resolved_at < previous:
            self._resolved_at[domain] = resolved_at
            self._log(
                f"tightened {domain} from {previous:g} to {resolved_at:g}",
                timestamp=requested_at,
            )

    def _log(self, message: str, *, timestamp: float) -> None:
        if self._logger is not None:
            self._logger.log(LogLevel.DEBUG, message, source=LOG_SOURCE, timestamp=timestamp)

    # -- Introspection ------------------------------------------------------

    def resolved_at(self, domain: str) -> float | None:
        """Return the stored resolved-at instant for *domain*, or None."""
        with self._lock:
            return self._resolved_at.get(domain)

    def entries(self) -> list[DnsCacheEntry]:
        """Return all entries sorted by domain."""
        with self._lock:
            items = sorted(self._resolved_at.items())
        return [
            DnsCacheEntry(domain=domain, resolved_at=resolved_at) for domain, resolved_at in items
        ]

    def __contains__(self, domain: object) -> bool:
        """Return True if *domain* has a cache entry."""
        with self._lock:
            return domain in self._resolved_at

    def __len__(self) -> int:
        """Return the number of cached domains."""
        with self._lock:
            return len(self._resolved_at)
