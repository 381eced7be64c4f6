#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

'''
This Windows platform module exports default filesystem paths.
'''

import os

from schplatform.base.paths import BasePathNamespace

_system_root = os.environ.get('SystemRoot', 'C:\\Windows')
_program_data = os.environ.get('ProgramData', 'C:\\ProgramData')


class Win32PathNamespace(BasePathNamespace):
    ETC_SCH = os.path.join(_program_data, 'schannel-admin')
    SHUTDOWN = os.path.join(_system_root, 'System32', 'shutdown.exe')


paths = Win32PathNamespace()
