from collections.abc import Iterable, Sequence

from roster_browser.domain.player_table import PlayerRecord


def get_filter_options(records: Iterable[PlayerRecord], select_fields: Sequence[str]) -> dict[str, list[str]]:
    """Collect the distinct, trimmed, non-blank values of each select field, sorted ascending."""
    rows = list(records)
    options: dict[str, list[str]] = {}
    for field in select_fields:
        seen: set[str] = set()
        for record in rows:
            value = record.get(field)
            if value is None:
                continue
            trimmed = value.strip()
            if trimmed:
                seen.add(trimmed)
        options[field] = sorted(seen)
    return options
