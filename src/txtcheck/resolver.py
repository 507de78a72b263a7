from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

import dns.asyncresolver

from .matcher import TxtRecordSet

logger = logging.getLogger(__name__)


class TXTResolver(Protocol):
    """
    The one capability the checker needs from DNS.

    lookup_txt() returns one tuple of character-strings per TXT record and
    raises dns.exception.DNSException (or OSError) when the query fails.
    Implementations must be safe to share between concurrent checks.
    """

    async def lookup_txt(self, domain: str) -> TxtRecordSet:
        ...


class DNSPythonTXTResolver:
    """
    TXT lookups through dnspython's asyncio resolver.

    Build it once and pass it to every check. With no nameservers given the
    system configuration (/etc/resolv.conf) is used, which raises
    dns.resolver.NoResolverConfiguration when it is missing.
    """

    def __init__(
        self,
        nameservers: Optional[Sequence[str]] = None,
        port: int = 53,
        timeout: float = 2.0,
        lifetime: float = 5.0,
        use_tcp: bool = False,
    ) -> None:
        self.use_tcp = bool(use_tcp)

        self._resolver = dns.asyncresolver.Resolver(configure=not nameservers)
        self._resolver.timeout = float(timeout)
        self._resolver.lifetime = float(lifetime)

        # dnspython binds the port when nameservers are assigned, so set it first
        self._resolver.port = int(port)
        self._resolver.nameservers = list(nameservers) if nameservers else self.nameservers

    @property
    def nameservers(self) -> List[str]:
        return [getattr(ns, "address", str(ns)) for ns in self._resolver.nameservers]

    async def lookup_txt(self, domain: str) -> List[Tuple[bytes, ...]]:
        logger.debug("TXT lookup %s via %s (tcp=%s)", domain, self.nameservers, self.use_tcp)

        # search=False: the name is always absolute, never expanded with search domains
        answer = await self._resolver.resolve(domain, "TXT", tcp=self.use_tcp, search=False)
        records = [tuple(rdata.strings) for rdata in answer]

        logger.debug("TXT lookup %s returned %d record(s)", domain, len(records))
        return records
