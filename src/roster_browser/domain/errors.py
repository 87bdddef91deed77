from dataclasses import dataclass


@dataclass(frozen=True)
class RosterError:
    message: str


@dataclass(frozen=True)
class LoadError(RosterError):
    dataset: str
    source_detail: str


@dataclass(frozen=True)
class FetchError(LoadError):
    status_code: int | None = None


@dataclass(frozen=True)
class ParseError(LoadError):
    line: int | None = None


@dataclass(frozen=True)
class SchemaError(LoadError):
    field: str | None = None
    row: int | None = None


@dataclass(frozen=True)
class LoadCancelled(LoadError):
    pass


@dataclass(frozen=True)
class ConfigError(RosterError):
    unrecognized_keys: tuple[str, ...] = ()
