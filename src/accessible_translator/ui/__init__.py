"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .output_view import OutputView
from .speech import SpeechReader

__all__ = ["MainWindow", "OutputView", "SpeechReader"]
