#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
System tasks of the detected platform.
"""

import importlib

from schplatform.osinfo import osinfo

tasks = importlib.import_module(
    'schplatform.{}.tasks'.format(osinfo.platform)).tasks
