"""Construction options for the DNS resolution cache.

A simulation run hands the cache a loose options object — often the
same dict that configures the rest of the simulator.  Only ``rtt`` is
recognized here; every other key belongs to some other component and
is ignored rather than rejected.

Validation happens in ``DnsCache``.  An invalid ``rtt`` passes through
the options unchanged and fails when the cache is constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

RTT_OPTION = "rtt"


@dataclass(frozen=True)
class DnsCacheOptions:
    """Options recognized by ``DnsCache``."""

    rtt: float | None = None
    """Round-trip time baseline of the simulated network (same unit as the timeline)."""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> DnsCacheOptions:
        """Build options from a plain mapping, keeping only known keys.

        Args:
            mapping: Loose simulator options, or None for all defaults.

        Returns:
            The parsed options.

        """
        if not mapping:
            return cls()
        return cls(rtt=mapping.get(RTT_OPTION))

    def as_dict(self) -> dict[str, float | None]:
        """Return the options as a plain dict."""
        return {RTT_OPTION: self.rtt}
