#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#
"""
Test the `RegistryStore` against a scratch key of HKEY_CURRENT_USER.
"""

import uuid

import pytest

from schlib import errors

winreg = pytest.importorskip("winreg")

from schplatform.win32.registry import RegistryStore  # noqa: E402

pytestmark = pytest.mark.tier1


@pytest.fixture
def registry():
    root = 'Software\\schtests-%s' % uuid.uuid4().hex
    store = RegistryStore(hive=winreg.HKEY_CURRENT_USER)
    yield store, root
    # children first, DeleteKeyEx does not recurse
    for path in ('%s\\TLS 1.2\\Server' % root, '%s\\TLS 1.2' % root, root):
        try:
            winreg.DeleteKeyEx(winreg.HKEY_CURRENT_USER, path,
                               winreg.KEY_WOW64_64KEY, 0)
        except FileNotFoundError:
            pass


def test_round_trip(registry):
    store, root = registry
    path = '%s\\TLS 1.2\\Server' % root
    store.set_value(path, 'Enabled', 0)
    assert store.get_value(path, 'Enabled') == 0
    store.set_value(path, 'Enabled', 1)
    assert store.get_value(path, 'Enabled') == 1
    store.delete_key(path)
    with pytest.raises(errors.EntryNotFound):
        store.get_value(path, 'Enabled')


def test_missing(registry):
    store, root = registry
    with pytest.raises(errors.EntryNotFound):
        store.get_value(root, 'Enabled')
    with pytest.raises(errors.EntryNotFound):
        store.delete_key(root)
