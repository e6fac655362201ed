"""Local host name resolution."""

from __future__ import annotations

import socket

from hello_metrics.lib.logger import get_logger


class HostResolutionError(RuntimeError):
    """Raised when the local host name cannot be resolved to an address."""

    def __init__(self, hostname: str) -> None:
        super().__init__(f"Unable to resolve local hostname {hostname!r}")
        self.hostname = hostname


logger = get_logger(__name__)


def resolve_local_hostname() -> str:
    """Return the canonical name of the local host.

    The host name is first resolved to an address of any family, which must
    succeed. The address is then reverse-resolved; when that lookup fails the
    textual address is returned instead.
    """

    hostname = socket.gethostname()
    try:
        addresses = socket.getaddrinfo(hostname, None)
    except OSError as exc:
        raise HostResolutionError(hostname) from exc
    if not addresses:
        raise HostResolutionError(hostname)
    address = addresses[0][4][0]

    try:
        canonical, _aliases, _addresses = socket.gethostbyaddr(address)
    except OSError:
        logger.debug("hostname.reverse_lookup.skip", extra={"hostname": hostname, "address": address})
        return address
    return canonical
