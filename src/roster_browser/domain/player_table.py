from collections.abc import Mapping
from dataclasses import dataclass

from roster_browser.domain.dataset import Dataset, DatasetSchema

type PlayerRecord = Mapping[str, str]


@dataclass(frozen=True)
class PlayerTable:
    dataset: Dataset
    schema: DatasetSchema
    columns: tuple[str, ...]
    records: tuple[PlayerRecord, ...]
    source_detail: str

    def __len__(self) -> int:
        return len(self.records)
