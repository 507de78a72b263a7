from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from .errors import DnsResolutionError, TxtRecordError

Status = Literal["found", "not_found", "error"]


@dataclass
class TXTCheckResult:
    """
    Outcome of one TXT check.

    status is one of:
      - found: a character-string equal to `expected` was published
      - not_found: the lookup succeeded but nothing matched (not an error)
      - error: input was invalid or the lookup failed; see `error`
    """
    target: str
    expected: str
    status: Status = "error"
    domain: Optional[str] = None
    txt_values: List[str] = field(default_factory=list)
    error: Optional[TxtRecordError] = None

    @property
    def found(self) -> bool:
        return self.status == "found"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "target": self.target,
            "domain": self.domain,
            "expected": self.expected,
            "status": self.status,
            "txt_values": list(self.txt_values),
            "error": None,
        }
        if self.error is not None:
            err: Dict[str, Any] = {
                "kind": self.error.kind,
                "message": self.error.describe(),
            }
            if isinstance(self.error, DnsResolutionError):
                err["reason"] = self.error.reason
            if self.error.cause is not None:
                err["cause"] = f"{type(self.error.cause).__name__}: {self.error.cause}"
            out["error"] = err
        return out
