"""Shared fixtures: a headless Qt application and thread pool stand-ins."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QDeadlineTimer
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from accessible_translator.core import Session
from accessible_translator.services import AIGateway


class ImmediateThreadPool:
    """Runs each worker synchronously inside start()."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)
        runnable.run()


class DeferredThreadPool:
    """Queues workers until run_all() is called, to simulate in-flight requests."""

    def __init__(self):
        self.pending = []

    def start(self, runnable):
        self.pending.append(runnable)

    def run_all(self):
        pending, self.pending = self.pending, []
        for runnable in pending:
            runnable.run()


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Timers and widgets need an application instance."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def wait_until(qt_app):
    """Process Qt events until the predicate holds or the timeout expires."""

    def _wait(predicate, timeout_ms=2000):
        deadline = QDeadlineTimer(timeout_ms)
        while not predicate():
            if deadline.hasExpired():
                return False
            QTest.qWait(10)
        return True

    return _wait


@pytest.fixture
def immediate_pool():
    return ImmediateThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()


@pytest.fixture
def mock_gateway():
    """Provide a mocked AIGateway."""
    gateway = MagicMock(spec=AIGateway)
    gateway.translate.return_value = "Ciao"
    gateway.simplify.return_value = "Simple text."
    gateway.convert_to_aac.return_value = "I - want - water"
    gateway.detect_language.return_value = "fr"
    gateway.extract_text.return_value = "Text from image"
    return gateway


@pytest.fixture
def session():
    return Session()
