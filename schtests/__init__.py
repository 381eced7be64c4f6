#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Package containing the schannel-admin unit tests.
"""
