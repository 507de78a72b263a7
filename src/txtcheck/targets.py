import ipaddress
import re
from typing import Optional
from urllib.parse import unquote, urlsplit

import idna

from .errors import InvalidDomain, NoDomainInUrl, UrlParseError

# Schemes whose URLs must carry a host (an empty host is a parse error, not "no domain")
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

# Characters that can never appear in a URL host
_FORBIDDEN_HOST_CHARS = set(" \t\n\r#/:<>?@[\\]^|%")


# Normalize the user input by trimming white space, removing trailing dots and turning it into lower case.
def normalize_target(raw: str) -> str:
    return (raw or "").strip().rstrip(".").lower()


# Check to ensure the provided domain is a valid domain. Checks only format not existence
_LABEL = re.compile(r"^_?[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")
def is_domain(s: str) -> bool:
    if not s or len(s) > 253 or any(c.isspace() for c in s):
        return False

    labels = s.split(".")
    if any(label == "" or len(label) > 63 for label in labels):
        return False

    return all(_LABEL.match(label) for label in labels)


# normalizes text and checks to see if it is a domain
def require_domain(raw: str) -> str:
    s = normalize_target(raw)
    if s and not s.isascii():
        s = _to_ascii(s, InvalidDomain)
    if not is_domain(s):
        raise InvalidDomain("Invalid domain format")
    return s


def _to_ascii(host: str, error_cls=UrlParseError) -> str:
    try:
        return idna.encode(host, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        raise error_cls(f"invalid international domain name: {e}", cause=e) from e


def _is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def _ipv4_number(part: str) -> Optional[int]:
    # decimal, 0x-prefixed hex, or leading-zero octal; None when not a number
    base = 10
    if part[:2] in ("0x", "0X"):
        part, base = part[2:], 16
    elif len(part) > 1 and part.startswith("0"):
        part, base = part[1:], 8
    if part == "":
        return 0
    try:
        return int(part, base) if part.isascii() and part.isalnum() else None
    except ValueError:
        return None


def _ends_in_number(host: str) -> bool:
    parts = host.split(".")
    if parts[-1] == "" and len(parts) > 1:
        parts.pop()
    last = parts[-1]
    if last.isascii() and last.isdigit():
        return True
    return last != "" and _ipv4_number(last) is not None


def _parse_ipv4(host: str) -> Optional[int]:
    """Address for a host the URL parser reads as IPv4 ("127.1", "0x7f000001"), None if invalid."""
    parts = host.split(".")
    if parts[-1] == "" and len(parts) > 1:
        parts.pop()
    if len(parts) > 4 or any(p == "" for p in parts):
        return None

    numbers = [_ipv4_number(p) for p in parts]
    if any(n is None for n in numbers):
        return None
    if any(n > 255 for n in numbers[:-1]) or numbers[-1] >= 256 ** (5 - len(numbers)):
        return None

    address = numbers[-1]
    for i, n in enumerate(numbers[:-1]):
        address += n * 256 ** (3 - i)
    return address


def _special_authority(text: str, scheme: str) -> str:
    # Special URLs treat "\" as "/" and ignore any run of slashes after the scheme
    rest = text[len(scheme) + 1:].replace("\\", "/").lstrip("/")
    return f"{scheme}://{rest}"


def extract_domain(raw: str, *, allow_bare: bool = False) -> str:
    """
    Extract the domain to query from a URL.

    Args:
        raw: URL such as "https://user@example.com:8443/path".
        allow_bare: Accept input without a scheme as a bare domain name.
                    Off by default; "example.com" is then a parse error.

    Returns:
        The host only (no scheme, port, path or credentials), lowercased,
        IDNA-encoded when international. A trailing dot is kept.

    Raises:
        UrlParseError: input is not an absolute URL or is malformed.
        NoDomainInUrl: URL has no host, or the host is an IP address.
        InvalidDomain: bare input (allow_bare=True) is not a valid domain.
    """
    text = (raw or "").strip()

    if not _SCHEME.match(text):
        if allow_bare:
            return require_domain(text)
        raise UrlParseError("relative URL without a base")

    scheme = text.split(":", 1)[0].lower()
    special = scheme in SPECIAL_SCHEMES
    if special:
        text = _special_authority(text, scheme)

    try:
        parts = urlsplit(text)
        # .port validates the port number and raises ValueError when it is bad
        parts.port
        host = parts.hostname
    except ValueError as e:
        raise UrlParseError(str(e), cause=e) from e

    if not host:
        if special:
            raise UrlParseError("empty host")
        raise NoDomainInUrl()

    # IPv6 literals come back from urlsplit without their brackets
    if parts.netloc.rsplit("@", 1)[-1].startswith("[") or _is_ip_literal(host.rstrip(".")):
        raise NoDomainInUrl()

    if special:
        host = unquote(host)

    if any(c in _FORBIDDEN_HOST_CHARS for c in host):
        raise UrlParseError("invalid domain character")

    if not host.isascii():
        host = _to_ascii(host)

    if not host.strip("."):
        raise UrlParseError("empty host")

    # A special host whose last label is a number is an IPv4 address ("127.1"), never a domain
    if special and _ends_in_number(host):
        if _parse_ipv4(host) is None:
            raise UrlParseError("invalid IPv4 address")
        raise NoDomainInUrl()

    return host
