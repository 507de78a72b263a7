# conftest.py
from __future__ import annotations

from typing import List, Optional, Sequence

import pytest


class FakeResolver:
    """
    Stands in for DNS: returns canned TXT records (tuples of bytes) or raises
    the configured error. Every queried name is recorded in `calls`.
    """
    def __init__(
        self,
        records: Optional[Sequence[Sequence[bytes]]] = None,
        error: Optional[BaseException] = None,
        one_shot: bool = False,
    ):
        self.records = list(records or [])
        self.error = error
        self.one_shot = one_shot
        self.calls: List[str] = []

    async def lookup_txt(self, domain: str):
        self.calls.append(domain)
        if self.error is not None:
            raise self.error
        if self.one_shot:
            return (record for record in self.records)
        return self.records


@pytest.fixture
def fake_resolver():
    """Factory for FakeResolver: fake_resolver(records=[(b"token",)]) or fake_resolver(error=...)."""
    return FakeResolver
