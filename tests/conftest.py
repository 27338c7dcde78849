# Shared fixtures: headless Qt application and a fresh store per test.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session, rendered offscreen."""
    from sumcalculator.app.application import create_app

    return create_app(["pytest"])


@pytest.fixture
def store(qapp):
    from sumcalculator.app.store import CalculatorStore

    return CalculatorStore()
