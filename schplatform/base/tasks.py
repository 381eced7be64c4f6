#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

'''
This module contains default platform-specific implementations of system tasks.
'''

import logging
import os

logger = logging.getLogger(__name__)


class BaseTaskNamespace:

    def get_config_store(self):
        """Return the `ConfigStore` holding the protocol settings

        Platforms without such a store raise NotImplementedError.
        """
        raise NotImplementedError()

    def reboot(self, delay=0):
        """Restart the computer after ``delay`` seconds.

        No return value expected.
        """
        raise NotImplementedError()

    def is_admin(self):
        """Return True if the process runs with administrative rights"""
        return os.geteuid() == 0


tasks = BaseTaskNamespace()
