from dataclasses import dataclass
from enum import StrEnum


class Dataset(StrEnum):
    BATTERS = "Batters"
    PITCHERS = "Pitchers"


class FieldType(StrEnum):
    TEXT = "text"
    NUMERIC = "numeric"


RESOURCE_PATHS: dict[Dataset, str] = {
    Dataset.BATTERS: "/DB/9UP_ProBaseball_PlayerDB_202507_Batters.csv",
    Dataset.PITCHERS: "/DB/9UP_ProBaseball_PlayerDB_202507_Pitchers.csv",
}


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType = FieldType.TEXT
    required: bool = True


@dataclass(frozen=True)
class DatasetSchema:
    dataset: Dataset
    fields: tuple[FieldSpec, ...]

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    @property
    def numeric_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.type is FieldType.NUMERIC)

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


_COMMON_FIELDS = (
    FieldSpec("Name"),
    FieldSpec("Team"),
    FieldSpec("Position"),
    FieldSpec("Rarity", FieldType.NUMERIC),
    FieldSpec("Year", FieldType.NUMERIC, required=False),
)

SCHEMAS: dict[Dataset, DatasetSchema] = {
    Dataset.BATTERS: DatasetSchema(Dataset.BATTERS, (*_COMMON_FIELDS, FieldSpec("Bats", required=False))),
    Dataset.PITCHERS: DatasetSchema(Dataset.PITCHERS, (*_COMMON_FIELDS, FieldSpec("Throws", required=False))),
}
