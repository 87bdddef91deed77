from typing import Protocol, runtime_checkable


@runtime_checkable
class CsvResourceSource(Protocol):
    @property
    def source_type(self) -> str: ...

    @property
    def source_detail(self) -> str: ...

    def locate(self, path: str) -> str: ...

    def fetch(self, path: str) -> bytes: ...
