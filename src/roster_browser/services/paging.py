import math
from collections.abc import Sequence
from dataclasses import dataclass

from roster_browser.domain.numbers import to_number
from roster_browser.domain.player_table import PlayerRecord


@dataclass(frozen=True)
class Page:
    records: tuple[PlayerRecord, ...]
    number: int
    size: int
    total_records: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_records / self.size))


def sort_records(
    records: Sequence[PlayerRecord],
    field: str,
    *,
    numeric: bool = False,
    descending: bool = False,
) -> list[PlayerRecord]:
    """Stable sort on one field.

    Records missing the field, holding a blank value, or (when numeric) a
    non-numeric value always sort last, in their original order.
    """
    present: list[PlayerRecord] = []
    absent: list[PlayerRecord] = []
    for record in records:
        value = record.get(field)
        if value is None or not value.strip() or (numeric and math.isnan(to_number(value))):
            absent.append(record)
        else:
            present.append(record)
    if numeric:
        present.sort(key=lambda r: to_number(r[field]), reverse=descending)
    else:
        present.sort(key=lambda r: r[field], reverse=descending)
    return present + absent


def paginate(records: Sequence[PlayerRecord], page: int, page_size: int) -> Page:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = (page - 1) * page_size
    return Page(
        records=tuple(records[start : start + page_size]),
        number=page,
        size=page_size,
        total_records=len(records),
    )
