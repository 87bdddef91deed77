from collections.abc import Collection, Iterable, Mapping

from roster_browser.domain.player_table import PlayerRecord
from roster_browser.domain.numbers import to_number

type Criteria = Mapping[str, str | None]


def _matches(
    record: PlayerRecord,
    field: str,
    selected: str | None,
    input_fields: Collection[str],
    rarity_field: str,
) -> bool:
    if not selected:
        return True
    value = record.get(field)
    if field == rarity_field:
        return to_number(value) == to_number(selected)
    if field in input_fields:
        if value is None:
            return False
        return selected.lower() in value.lower()
    return value == selected


def apply_filters(
    records: Iterable[PlayerRecord],
    criteria: Criteria,
    input_fields: Collection[str],
    select_fields: Collection[str],
    rarity_field: str,
) -> list[PlayerRecord]:
    """Return the records that satisfy every non-empty criterion, in input order.

    The rarity field compares numerically, input fields by case-insensitive
    substring, and every other field by exact string equality. ``select_fields``
    does not change matching; it is accepted so callers can pass the same field
    groups they hand to :func:`get_filter_options`.
    """
    active = [(field, selected) for field, selected in criteria.items() if selected]
    if not active:
        return list(records)
    return [
        record
        for record in records
        if all(_matches(record, field, selected, input_fields, rarity_field) for field, selected in active)
    ]
