"""
DNS TXT record verification.

Checks whether a domain publishes an exact TXT value, the way providers
verify domain ownership (e.g. "protonmail-verification=...").

Public entrypoints: check_txt_record, TXTRecordChecker
"""

from .errors import (
    DnsResolutionError,
    InvalidDomain,
    InvalidTarget,
    NoDomainInUrl,
    TxtRecordError,
    UrlParseError,
)
from .models import TXTCheckResult
from .resolver import DNSPythonTXTResolver, TXTResolver
from .tool import TXTRecordChecker, check_txt_record

__all__ = [
    "DNSPythonTXTResolver",
    "DnsResolutionError",
    "InvalidDomain",
    "InvalidTarget",
    "NoDomainInUrl",
    "TXTCheckResult",
    "TXTRecordChecker",
    "TXTResolver",
    "TxtRecordError",
    "UrlParseError",
    "check_txt_record",
]

__version__ = "0.1.0"
