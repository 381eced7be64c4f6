#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

'''
This base platform module exports default filesystem paths.
'''


class BasePathNamespace:
    ETC_SCH = "/etc/sch"


paths = BasePathNamespace()
