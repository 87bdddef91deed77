import logging
from collections.abc import Mapping

from roster_browser.domain.dataset import Dataset
from roster_browser.domain.errors import LoadCancelled, LoadError
from roster_browser.domain.player_table import PlayerRecord, PlayerTable
from roster_browser.domain.result import Err, Ok, Result
from roster_browser.filters.engine import apply_filters
from roster_browser.filters.fields import DEFAULT_FILTER_FIELDS, FilterFields
from roster_browser.filters.options import get_filter_options
from roster_browser.ingest.cancel import CancelToken
from roster_browser.ingest.loader import PlayerLoader

logger = logging.getLogger(__name__)


class PlayerBrowser:
    """Holds the player list a view is showing and the filters applied to it.

    Only the most recent ``open`` may commit its records: opening another
    dataset cancels the token of any load still in flight, and a load whose
    token is no longer current is discarded.
    """

    def __init__(
        self,
        loader: PlayerLoader,
        filter_fields: Mapping[Dataset, FilterFields] = DEFAULT_FILTER_FIELDS,
    ) -> None:
        self._loader = loader
        self._filter_fields = filter_fields
        self._token: CancelToken | None = None
        self._dataset: Dataset | None = None
        self._table: PlayerTable | None = None
        self._error: LoadError | None = None
        self._criteria: dict[str, str] = {}
        self._options: dict[str, list[str]] = {}

    @property
    def dataset(self) -> Dataset | None:
        return self._dataset

    @property
    def table(self) -> PlayerTable | None:
        return self._table

    @property
    def error(self) -> LoadError | None:
        return self._error

    @property
    def records(self) -> tuple[PlayerRecord, ...]:
        return self._table.records if self._table is not None else ()

    @property
    def fields(self) -> FilterFields | None:
        if self._dataset is None:
            return None
        return self._filter_fields[self._dataset]

    @property
    def criteria(self) -> dict[str, str]:
        return dict(self._criteria)

    @property
    def options(self) -> dict[str, list[str]]:
        return {field: list(values) for field, values in self._options.items()}

    def open(self, dataset: Dataset) -> Result[PlayerTable, LoadError]:
        if self._token is not None:
            self._token.cancel()
        token = CancelToken()
        self._token = token

        result = self._loader.load(dataset, cancel=token)
        if token is not self._token:
            logger.debug("Discarding superseded load of %s", dataset)
            return Err(
                LoadCancelled(
                    message=f"Load of {dataset} was superseded",
                    dataset=dataset,
                    source_detail=self._loader.source.locate(self._loader.path_for(dataset)),
                )
            )
        self._token = None
        if isinstance(result, Err) and isinstance(result.error, LoadCancelled):
            return result

        self._dataset = dataset
        self._criteria = {}
        match result:
            case Ok(table):
                self._table = table
                self._error = None
                self._options = get_filter_options(table.records, self._filter_fields[dataset].select_fields)
            case Err(error):
                self._table = None
                self._error = error
                self._options = {field: [] for field in self._filter_fields[dataset].select_fields}
        return result

    def close(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._token = None

    def set_filter(self, field: str, value: str | None) -> None:
        if value:
            self._criteria[field] = value
        else:
            self._criteria.pop(field, None)

    def clear_filters(self) -> None:
        self._criteria = {}

    def visible(self) -> list[PlayerRecord]:
        fields = self.fields
        if fields is None:
            return []
        return apply_filters(
            self.records,
            self._criteria,
            fields.input_fields,
            fields.select_fields,
            fields.rarity_field,
        )
