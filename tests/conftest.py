import os

import click
import pytest

from exprlib.utils import _conf
from exprlib.utils._version import display_version
from exprlib.utils.log import reset_console_logging


def pytest_report_header(config):
    return "exprlib %s  --  click %s" % (display_version, click.__version__)


class RecordingResolver:
    """deterministic resolver remembering which names it was asked for

    A list value hands out its items one per request.
    """

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.calls = []

    def value_of(self, name):
        self.calls.append(name)
        value = self.values[name]
        if isinstance(value, list):
            return value.pop(0)
        return value


@pytest.fixture
def resolver():
    return RecordingResolver


@pytest.fixture(autouse=True)
def isolated_conf(monkeypatch):
    """no user/system config files and no EXPRLIB_* environment"""
    monkeypatch.setattr(_conf, "CONFIG_FILES", [])
    for key in list(os.environ):
        if key.startswith(_conf.ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
    reset_console_logging()
