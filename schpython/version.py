#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

# The full version including strings
VERSION = "1.0.0"
