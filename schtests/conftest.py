#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

import logging

import pytest

from schlib.constants import CONFDIR_ENV
from schlib.store import MemoryStore
from schplatform.osinfo import osinfo
from schplatform.tasks import tasks


MARKERS = [
    'tier0: basic unit tests and critical functionality',
    'tier1: functional tests of the command-line tools',
    ('skip_if_platform(platform, reason): Skip test on platform '
     '(sys.platform)'),
]


INIVALUES = {
    'python_classes': ['test_', 'Test'],
    'python_files': ['test_*.py'],
    'python_functions': ['test_*'],
}


def pytest_configure(config):
    # add pytest markers
    for marker in MARKERS:
        config.addinivalue_line('markers', marker)

    # addinivalue_line() adds duplicated entries and does not remove existing.
    for name, values in INIVALUES.items():
        current = config.getini(name)
        current[:] = values


def pytest_runtest_setup(item):
    for mark in item.iter_markers(name="skip_if_platform"):
        platform = mark.kwargs.get("platform")
        if platform is None:
            platform = mark.args[0]
        reason = mark.kwargs["reason"]
        if platform == osinfo.id:
            pytest.skip(f"Skip test on platform {platform}: {reason}")


@pytest.fixture(autouse=True)
def confdir(tmp_path, monkeypatch):
    """Point the tools at an empty configuration directory"""
    monkeypatch.setenv(CONFDIR_ENV, str(tmp_path))
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The admin tools add handlers to the root logger, drop them"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def store():
    return MemoryStore()


class RebootRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, delay=0):
        self.calls.append(delay)


@pytest.fixture
def reboot(monkeypatch):
    """Record restart requests instead of restarting the computer"""
    recorder = RebootRecorder()
    monkeypatch.setattr(tasks, 'reboot', recorder)
    return recorder


@pytest.fixture
def platform_store(store, monkeypatch):
    """Make the platform hand out the in-memory store"""
    monkeypatch.setattr(tasks, 'get_config_store', lambda: store)
    monkeypatch.setattr(tasks, 'is_admin', lambda: True)
    return store
