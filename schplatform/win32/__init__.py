#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
This module contains Windows specific platform files.
"""
