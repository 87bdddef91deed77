from dataclasses import dataclass

from roster_browser.domain.dataset import Dataset


@dataclass(frozen=True)
class FilterFields:
    """How each filterable field of a dataset is compared and presented."""

    input_fields: tuple[str, ...]
    select_fields: tuple[str, ...]
    rarity_field: str


DEFAULT_FILTER_FIELDS: dict[Dataset, FilterFields] = {
    Dataset.BATTERS: FilterFields(
        input_fields=("Name",),
        select_fields=("Team", "Position", "Year", "Bats", "Rarity"),
        rarity_field="Rarity",
    ),
    Dataset.PITCHERS: FilterFields(
        input_fields=("Name",),
        select_fields=("Team", "Position", "Year", "Throws", "Rarity"),
        rarity_field="Rarity",
    ),
}
