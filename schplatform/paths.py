#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Filesystem paths of the detected platform.
"""

import importlib

from schplatform.osinfo import osinfo

paths = importlib.import_module(
    'schplatform.{}.paths'.format(osinfo.platform)).paths
