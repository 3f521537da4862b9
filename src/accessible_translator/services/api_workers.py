"""Async workers for non-blocking gateway calls using Qt threading."""

import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from accessible_translator.services.errors import GatewayError, TranslatorError

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    result = Signal(object)  # str returned by the gateway operation
    error = Signal(object)  # TranslatorError


class GatewayWorker(QRunnable):
    """
    Worker that runs one gateway operation in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when the call completes or fails.
    """

    def __init__(self, operation: Callable[..., str], *args: Any, **kwargs: Any):
        super().__init__()
        self.operation = operation
        self.args = args
        self.kwargs = kwargs
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the gateway call in background thread."""
        try:
            value = self.operation(*self.args, **self.kwargs)
        except TranslatorError as exc:
            self.signals.error.emit(exc)
        except Exception:
            # Anything the gateway did not classify still reaches the user as a gateway failure
            logger.exception("Unexpected error in gateway worker")
            self.signals.error.emit(GatewayError())
        else:
            self.signals.result.emit(value)
        finally:
            self.signals.finished.emit()
