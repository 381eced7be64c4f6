#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Server-side administration tools.
"""
