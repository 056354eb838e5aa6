"""Simulated network requests.

The cache does not care about most of what a network request carries —
method, headers, sizes — only *where* it goes.  ``NetworkRequest`` keeps
the URL and the simulated instant the request starts, and derives the
host the same way a browser does when it decides which name to look up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlsplit

# Schemes that always name a server; data:, blob: and friends do not.
HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class RequestError(ValueError):
    """Raise when a simulated request cannot be built."""


class HasHost(Protocol):
    """Anything the cache can key on — it only reads ``host``."""

    @property
    def host(self) -> str:
        """The domain name to resolve."""
        ...


@dataclass(frozen=True)
class NetworkRequest:
    """One request on the simulated timeline."""

    url: str
    start_time: float = 0.0
    host: str = field(init=False)

    def __post_init__(self) -> None:
        """Validate the request and parse its host."""
        if not self.url:
            msg = "Request URL must not be empty"
            raise RequestError(msg)
        if self.start_time < 0:
            msg = f"Request start time must be non-negative, got {self.start_time}"
            raise RequestError(msg)
        try:
            parts = urlsplit(self.url)
        except ValueError as exc:
            msg = f"Malformed request URL {self.url!r}: {exc}"
            raise RequestError(msg) from exc
        if not parts.scheme:
            msg = f"Request URL {self.url!r} has no scheme"
            raise RequestError(msg)
        host = parts.hostname or ""
        if not host and parts.scheme in HOST_SCHEMES:
            msg = f"Request URL {self.url!r} has no host"
            raise RequestError(msg)
        # Frozen, so set the derived field through object.__setattr__
        object.__setattr__(self, "host", host)
