from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union

# One TXT resource record = one or more character-strings
TxtRecord = Sequence[Union[bytes, str]]
TxtRecordSet = Sequence[TxtRecord]


def decode_txt_strings(records: Iterable[TxtRecord]) -> Iterator[str]:
    """
    Yield every character-string of every record, in resolver order.

    TXT data is binary-safe, so bytes are decoded as UTF-8 with replacement
    characters instead of failing on a malformed record.
    """
    for record in records:
        for chunk in record:
            if isinstance(chunk, (bytes, bytearray)):
                yield bytes(chunk).decode("utf-8", errors="replace")
            else:
                yield str(chunk)


def matches(records: Iterable[TxtRecord], expected: str) -> bool:
    """True when any single character-string equals `expected` exactly (case-sensitive)."""
    return any(value == expected for value in decode_txt_strings(records))
