#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
All constants centralised in one file.
"""

from schpython.version import VERSION

# Root of the per-protocol keys, relative to HKEY_LOCAL_MACHINE
PROTOCOLS_ROOT = (
    'SYSTEM\\CurrentControlSet\\Control\\SecurityProviders\\SCHANNEL\\'
    'Protocols'
)

# Registry path separator
PATH_SEPARATOR = '\\'

# Leaf key holding the server-side settings of a protocol
SERVER_LEAF = 'Server'

# Name of the value holding the enablement flag
ENABLED_VALUE = 'Enabled'

# Flag written for each explicit state; anything else read back means enabled
FLAG_DISABLED = 0
FLAG_ENABLED = 1

RESTART_NOTICE = 'A restart is required for the changes to take effect.'
RESTART_PROMPT = 'Restart the computer now?'

# regular expression Env member names must match:
NAME_REGEX = r'^[a-z][_a-z0-9]*[a-z0-9]$|^[a-z]$'

# Format for ValueError raised when name does not match above regex:
NAME_ERROR = "name must match '%s'; got '%s'"

# Standard format for Exception message when overriding an attribute:
OVERRIDE_ERROR = 'cannot override %s.%s value %r with %r'

# Standard format for AttributeError message when a read-only attribute is
# already locked:
SET_ERROR = 'locked: cannot set %s.%s to %r'
DEL_ERROR = 'locked: cannot delete %s.%s'

# The section to read in the config files, i.e. [global]
CONFIG_SECTION = 'global'

# Environment variable pointing at an alternative configuration directory
CONFDIR_ENV = 'SCH_CONFDIR'

# The default configuration for the environment.
# This is a tuple instead of a dict so that it is immutable.
DEFAULT_CONFIG = (
    ('version', VERSION),
    ('protocols_root', PROTOCOLS_ROOT),
    ('restart_delay', 0),
    ('confirm_default', False),
    ('log_file', None),
)
