from __future__ import annotations

from typing import List

import dns.exception

from .errors import DnsResolutionError, TxtRecordError
from .matcher import TxtRecordSet, decode_txt_strings, matches
from .models import TXTCheckResult
from .resolver import TXTResolver
from .targets import extract_domain


async def _lookup(resolver: TXTResolver, domain: str) -> TxtRecordSet:
    try:
        return await resolver.lookup_txt(domain)
    except (dns.exception.DNSException, OSError) as e:
        raise DnsResolutionError(str(e) or type(e).__name__, cause=e) from e


async def check_txt_record(
    resolver: TXTResolver,
    domain_or_url: str,
    expected_record: str,
    *,
    allow_bare_domain: bool = False,
) -> bool:
    """
    Check whether `expected_record` is published as a TXT value for a domain.

    Args:
        resolver: Long-lived resolver owned by the caller; only lookup_txt() is used.
        domain_or_url: URL (or bare domain when allow_bare_domain=True).
        expected_record: Exact TXT value to look for.

    Returns:
        True when found, False when the lookup succeeded but nothing matched.

    Raises:
        UrlParseError / NoDomainInUrl / InvalidDomain: bad input; no query is sent.
        DnsResolutionError: the query failed (NXDOMAIN, no TXT records, timeout, ...).
    """
    domain = extract_domain(domain_or_url, allow_bare=allow_bare_domain)
    records = await _lookup(resolver, domain)
    return matches(records, expected_record)


class TXTRecordChecker:
    """
    Tri-state wrapper around check_txt_record().

    check() never raises TxtRecordError: the error is returned inside the
    TXTCheckResult with status="error". Cancellation still propagates.
    """

    def __init__(self, resolver: TXTResolver, *, allow_bare_domain: bool = False) -> None:
        self.resolver = resolver
        self.allow_bare_domain = bool(allow_bare_domain)

    async def check(self, domain_or_url: str, expected_record: str) -> TXTCheckResult:
        out = TXTCheckResult(target=domain_or_url, expected=expected_record)

        try:
            out.domain = extract_domain(domain_or_url, allow_bare=self.allow_bare_domain)
            records = await _lookup(self.resolver, out.domain)
        except TxtRecordError as e:
            out.error = e
            return out

        values: List[str] = list(decode_txt_strings(records))
        out.txt_values = values
        out.status = "found" if expected_record in values else "not_found"
        return out
