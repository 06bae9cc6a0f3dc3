"""pytest configuration and fixtures for pyqt-gridgen tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_gridgen.services import CollectingDiagnosticSink, ListenerRegistry


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def registry():
    """Fresh listener registry, so tests never see each other's listeners."""
    return ListenerRegistry()


@pytest.fixture
def sink():
    """Diagnostic sink that keeps what it receives."""
    return CollectingDiagnosticSink()


@pytest.fixture
def builder(qapp, registry, sink):
    """GridBuilder wired to the test registry and sink."""
    from pyqt_gridgen.forms import GridBuilder
    return GridBuilder(registry=registry, diagnostics=sink)
