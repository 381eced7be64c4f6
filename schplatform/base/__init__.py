#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Default platform-specific implementations, used as is on platforms that
have no store of their own.
"""
