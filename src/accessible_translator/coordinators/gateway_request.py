"""Gateway Request - binds one background gateway call to the coordinator that issued it."""

from typing import Any, Callable

from PySide6.QtCore import QObject, QThreadPool, Slot

from accessible_translator.services.api_workers import GatewayWorker


class GatewayRequest(QObject):
    """
    Helper object holding request context and relaying worker results safely.

    The worker's signals are connected to this QObject, which lives on the
    GUI thread, so the callbacks always run there. The request id travels
    with the result; the coordinator compares it with its active id to drop
    stale completions.
    """

    def __init__(
        self,
        request_id: int,
        on_result: Callable[[int, Any], None],
        on_error: Callable[[int, Exception], None],
    ):
        super().__init__()
        self.request_id = request_id
        self._on_result = on_result
        self._on_error = on_error

    def start(self, thread_pool: QThreadPool, operation: Callable[..., str], *args: Any) -> None:
        """Run ``operation(*args)`` on the pool and route its outcome to the callbacks."""
        worker = GatewayWorker(operation, *args)
        worker.signals.result.connect(self.on_result)
        worker.signals.error.connect(self.on_error)
        thread_pool.start(worker)

    @Slot(object)
    def on_result(self, value):
        try:
            self._on_result(self.request_id, value)
        except RuntimeError:
            # Coordinator might be destroyed, ignore
            pass

    @Slot(object)
    def on_error(self, error):
        try:
            self._on_error(self.request_id, error)
        except RuntimeError:
            pass
