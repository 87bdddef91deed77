import logging
import time
from collections.abc import Mapping

import httpx

from roster_browser.domain.dataset import RESOURCE_PATHS, SCHEMAS, Dataset, DatasetSchema
from roster_browser.domain.errors import FetchError, LoadCancelled, LoadError, ParseError, SchemaError
from roster_browser.domain.player_table import PlayerTable
from roster_browser.domain.result import Err, Ok, Result
from roster_browser.ingest.cancel import CancelToken
from roster_browser.ingest.csv_parser import CsvFormatError, parse_csv
from roster_browser.ingest.protocols import CsvResourceSource
from roster_browser.ingest.schema_check import SchemaViolation, check_schema

logger = logging.getLogger(__name__)


class PlayerLoader:
    def __init__(
        self,
        source: CsvResourceSource,
        *,
        paths: Mapping[Dataset, str] = RESOURCE_PATHS,
        schemas: Mapping[Dataset, DatasetSchema] = SCHEMAS,
    ) -> None:
        self._source = source
        self._paths = paths
        self._schemas = schemas

    @property
    def source(self) -> CsvResourceSource:
        return self._source

    def path_for(self, dataset: Dataset) -> str:
        return self._paths[dataset]

    def load(self, dataset: Dataset, *, cancel: CancelToken | None = None) -> Result[PlayerTable, LoadError]:
        path = self._paths[dataset]
        detail = self._source.locate(path)
        t0 = time.perf_counter()
        logger.info("Loading %s from %s", dataset, detail)

        if cancel is not None and cancel.cancelled:
            return self._cancelled(dataset, detail)

        try:
            data = self._source.fetch(path)
        except httpx.HTTPStatusError as exc:
            logger.error("Fetch failed for %s: HTTP %d", dataset, exc.response.status_code)
            return Err(
                FetchError(
                    message=f"{detail} responded {exc.response.status_code}",
                    dataset=dataset,
                    source_detail=detail,
                    status_code=exc.response.status_code,
                )
            )
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            logger.error("Fetch failed for %s: %s", dataset, exc)
            return Err(FetchError(message=str(exc) or type(exc).__name__, dataset=dataset, source_detail=detail))

        try:
            parsed = parse_csv(data)
        except CsvFormatError as exc:
            logger.error("Parse failed for %s at line %s: %s", dataset, exc.line, exc)
            return Err(ParseError(message=str(exc), dataset=dataset, source_detail=detail, line=exc.line))

        schema = self._schemas[dataset]
        try:
            check_schema(schema, parsed)
        except SchemaViolation as exc:
            logger.error("Schema check failed for %s: %s", dataset, exc)
            return Err(
                SchemaError(message=str(exc), dataset=dataset, source_detail=detail, field=exc.field, row=exc.row)
            )

        if cancel is not None and cancel.cancelled:
            return self._cancelled(dataset, detail)

        table = PlayerTable(
            dataset=dataset,
            schema=schema,
            columns=parsed.header,
            records=tuple(row.values for row in parsed.rows),
            source_detail=detail,
        )
        logger.info("Loaded %d %s rows in %.1fs", len(table), dataset, time.perf_counter() - t0)
        return Ok(table)

    def _cancelled(self, dataset: Dataset, detail: str) -> Result[PlayerTable, LoadError]:
        logger.info("Load of %s cancelled", dataset)
        return Err(LoadCancelled(message=f"Load of {dataset} was cancelled", dataset=dataset, source_detail=detail))
