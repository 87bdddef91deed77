import math

from roster_browser.domain.dataset import DatasetSchema
from roster_browser.domain.numbers import to_number
from roster_browser.ingest.csv_parser import ParsedCsv


class SchemaViolation(ValueError):
    def __init__(self, message: str, field: str | None = None, row: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.row = row


def check_schema(schema: DatasetSchema, parsed: ParsedCsv) -> None:
    """Raise SchemaViolation if the parsed rows do not fit the dataset's declared fields."""
    missing = [name for name in schema.required_fields if name not in parsed.header]
    if missing:
        raise SchemaViolation(f"{schema.dataset} is missing required column(s): {', '.join(missing)}", missing[0])

    numeric = [name for name in schema.numeric_fields if name in parsed.header]
    for row in parsed.rows:
        for name in numeric:
            value = row.values.get(name)
            if value is None or not value.strip():
                continue
            if math.isnan(to_number(value)):
                raise SchemaViolation(f"{name} must be numeric, got {value!r} on line {row.line}", name, row.line)
