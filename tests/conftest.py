import os

# Headless Qt for CI and pytest-qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings, QStandardPaths

from core.config import AppConfig

# Keep config/data dirs away from the real user profile
QStandardPaths.setTestModeEnabled(True)

@pytest.fixture
def config():
    """AppConfig backed by a throwaway QSettings scope."""
    settings = QSettings("Zahlschein2QR", "TestConfig")
    settings.clear()

    app_config = AppConfig()
    app_config.settings = settings
    yield app_config
    settings.clear()

def pytest_configure(config):
    config.addinivalue_line("markers", "gui: tests that need a QApplication (pytest-qt)")
