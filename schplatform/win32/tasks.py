#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

'''
This module contains Windows specific implementations of system tasks.
'''

import ctypes
import logging

from schplatform.base.tasks import BaseTaskNamespace
from schplatform.win32.paths import paths
from schpython import util

logger = logging.getLogger(__name__)


class Win32TaskNamespace(BaseTaskNamespace):

    def get_config_store(self):
        # winreg only exists on Windows
        from schplatform.win32.registry import RegistryStore
        return RegistryStore()

    def reboot(self, delay=0):
        logger.debug('Requesting a restart in %d seconds', delay)
        util.run([paths.SHUTDOWN, '/r', '/t', str(delay)])

    def is_admin(self):
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except OSError as e:
            logger.debug('Cannot query administrative rights: %s', e)
            return False


tasks = Win32TaskNamespace()
