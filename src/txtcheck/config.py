from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .resolver import DNSPythonTXTResolver

_TRUE = {"1", "true", "yes", "on"}


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE


@dataclass
class ResolverSettings:
    """
    Resolver/checker settings.

    Environment variables:
      TXTCHECK_NAMESERVERS        comma separated IPs (default: system resolv.conf)
      TXTCHECK_DNS_PORT           default 53
      TXTCHECK_DNS_TIMEOUT        per-server timeout in seconds, default 2.0
      TXTCHECK_DNS_LIFETIME       total time budget in seconds, default 5.0
      TXTCHECK_DNS_TCP            1 to query over TCP
      TXTCHECK_ALLOW_BARE_DOMAIN  1 to accept "example.com" without a scheme
    """
    nameservers: List[str] = field(default_factory=list)
    port: int = 53
    timeout: float = 2.0
    lifetime: float = 5.0
    use_tcp: bool = False
    allow_bare_domain: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ResolverSettings":
        env = os.environ if env is None else env
        raw_ns = env.get("TXTCHECK_NAMESERVERS", "")
        return cls(
            nameservers=[ns.strip() for ns in raw_ns.split(",") if ns.strip()],
            port=_env_int(env, "TXTCHECK_DNS_PORT", 53),
            timeout=_env_float(env, "TXTCHECK_DNS_TIMEOUT", 2.0),
            lifetime=_env_float(env, "TXTCHECK_DNS_LIFETIME", 5.0),
            use_tcp=_env_bool(env, "TXTCHECK_DNS_TCP", False),
            allow_bare_domain=_env_bool(env, "TXTCHECK_ALLOW_BARE_DOMAIN", False),
        )

    def build_resolver(self) -> DNSPythonTXTResolver:
        return DNSPythonTXTResolver(
            nameservers=self.nameservers or None,
            port=self.port,
            timeout=self.timeout,
            lifetime=self.lifetime,
            use_tcp=self.use_tcp,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nameservers": list(self.nameservers),
            "port": self.port,
            "timeout": self.timeout,
            "lifetime": self.lifetime,
            "use_tcp": self.use_tcp,
            "allow_bare_domain": self.allow_bare_domain,
        }
