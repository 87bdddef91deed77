import threading


class CancelToken:
    """One-shot flag a caller sets to abandon a load it no longer wants."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
