import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StaticDirSource:
    """Serves CSV resources from a local directory laid out like the static host."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def source_type(self) -> str:
        return "static"

    @property
    def source_detail(self) -> str:
        return str(self._root)

    def locate(self, path: str) -> str:
        return str(self._root / path.lstrip("/"))

    def fetch(self, path: str) -> bytes:
        file_path = self._root / path.lstrip("/")
        logger.debug("Reading %s", file_path)
        data = file_path.read_bytes()
        logger.debug("Read %d bytes from %s", len(data), file_path)
        return data
