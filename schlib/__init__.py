#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Server-side SCHANNEL protocol administration.

The `schlib` package holds the pieces that do not depend on the command line:

    * `schlib.protocols` - the fixed table of protocols and their store paths
    * `schlib.store` - the key-path configuration store interface
    * `schlib.state` - reading, writing and the restart step
    * `schlib.config` - the process-wide environment
"""

from schpython.version import VERSION as __version__  # noqa: F401
