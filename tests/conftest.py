import os

import pytest

from forbrowsers.testing import Harness


@pytest.fixture
def harness():
    return Harness()


@pytest.fixture
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith('FORBROWSERS_'):
            monkeypatch.delenv(name)
    return monkeypatch
