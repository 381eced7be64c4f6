#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
`ConfigStore` on top of the Windows registry.
"""

import contextlib
import logging
import winreg

from schlib import errors
from schlib.constants import PATH_SEPARATOR
from schlib.store import ConfigStore

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _translate_errors(path):
    try:
        yield
    except FileNotFoundError:
        raise errors.EntryNotFound(path=path)
    except OSError as e:
        raise errors.StoreAccessError(path=path, reason=e.strerror or str(e))


class RegistryStore(ConfigStore):
    """Keys below ``hive``, by default HKEY_LOCAL_MACHINE

    Keys are always opened in the 64-bit view so a 32-bit interpreter sees
    the same SCHANNEL settings as the system.
    """

    def __init__(self, hive=winreg.HKEY_LOCAL_MACHINE,
                 view=winreg.KEY_WOW64_64KEY):
        self.hive = hive
        self.view = view

    def get_value(self, path, name):
        with _translate_errors(PATH_SEPARATOR.join((path, name))):
            with winreg.OpenKey(self.hive, path, 0,
                                winreg.KEY_READ | self.view) as key:
                value, value_type = winreg.QueryValueEx(key, name)
        logger.debug('Read %s\\%s = %r (type %d)', path, name, value,
                     value_type)
        return value

    def set_value(self, path, name, value):
        with _translate_errors(path):
            with winreg.CreateKeyEx(self.hive, path, 0,
                                    winreg.KEY_WRITE | self.view) as key:
                winreg.SetValueEx(key, name, 0, winreg.REG_DWORD, value)
        logger.debug('Set %s\\%s = %r', path, name, value)

    def delete_key(self, path):
        with _translate_errors(path):
            winreg.DeleteKeyEx(self.hive, path, self.view, 0)
        logger.debug('Deleted %s', path)
