from __future__ import annotations

from typing import Optional

import dns.exception
import dns.resolver


class TxtRecordError(Exception):
    """
    Base error for TXT record checks.

    Every error carries:
      - kind: stable tag for the error variant (used in JSON output)
      - cause: the underlying exception, when there is one
    """

    kind = "error"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    def describe(self) -> str:
        return f"Error checking TXT record: {self}"


# Invalid user input base error
class InvalidTarget(TxtRecordError, ValueError):
    """Raised when the caller input cannot be turned into a domain to query."""

    kind = "invalid_input"


class UrlParseError(InvalidTarget):
    """The input is not a parseable absolute URL."""

    kind = "url_parse_error"

    def describe(self) -> str:
        return f"URL parse error: {self}"


class NoDomainInUrl(InvalidTarget):
    """The URL parsed, but it has no domain host (no host at all, or an IP literal)."""

    kind = "no_domain_in_url"

    def __init__(self, message: str = "No domain found in URL", cause: Optional[BaseException] = None) -> None:
        super().__init__(message, cause)

    def describe(self) -> str:
        return "No domain found in URL"


class InvalidDomain(InvalidTarget):
    """Raised when a bare target is not a valid domain name."""

    kind = "invalid_domain"

    def describe(self) -> str:
        return f"Invalid domain: {self}"


class DnsResolutionError(TxtRecordError):
    """
    The TXT query failed.

    NXDOMAIN, "no TXT records", timeouts and network failures all collapse into
    this one error. `reason` looks at the wrapped cause for the finer detail.
    """

    kind = "dns_resolution_error"

    def describe(self) -> str:
        return f"DNS resolution error: {self}"

    @property
    def reason(self) -> str:
        c = self.cause
        if isinstance(c, dns.resolver.NXDOMAIN):
            return "nxdomain"
        if isinstance(c, dns.resolver.NoAnswer):
            return "no_answer"
        if isinstance(c, (dns.exception.Timeout, TimeoutError)):
            return "timeout"
        if isinstance(c, dns.resolver.NoNameservers):
            return "no_nameservers"
        if isinstance(c, OSError):
            return "network"
        return "error"
