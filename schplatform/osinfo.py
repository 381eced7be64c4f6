#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""Operating system detection

Only Windows keeps SCHANNEL settings, so the platform package is
``schplatform.<sys.platform>`` when one exists and ``base`` otherwise.
"""

import importlib
import sys

FALLBACK_PLATFORM = 'base'

_os_names = {
    'win32': 'Windows',
    'linux': 'Linux',
    'darwin': 'macOS',
}


class OSInfo:
    __slots__ = ('id', '_platform')

    def __init__(self, platform_id=None):
        if platform_id is None:
            platform_id = sys.platform
        self.id = platform_id
        self._platform = None

    @property
    def name(self):
        """OS name shown to the operator"""
        return _os_names.get(self.id, self.id)

    @property
    def platform(self):
        """Name of the schplatform package serving this OS"""
        if self._platform is None:
            try:
                importlib.import_module('schplatform.{}'.format(self.id))
            except ImportError:
                self._platform = FALLBACK_PLATFORM
            else:
                self._platform = self.id
        return self._platform


osinfo = OSInfo()
