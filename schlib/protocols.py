#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Secure-transport protocols whose server-side use can be toggled.

The table below is the only place that knows the store path segment of each
protocol.  It is built once at import time and cannot be modified.
"""

import enum
from collections import namedtuple
from types import MappingProxyType

from schlib.constants import PATH_SEPARATOR, PROTOCOLS_ROOT, SERVER_LEAF


class Protocol(enum.Enum):
    SSL20 = 'SSL20'
    SSL30 = 'SSL30'
    TLS10 = 'TLS10'
    TLS11 = 'TLS11'
    TLS12 = 'TLS12'

    @classmethod
    def from_name(cls, name):
        """Parse a protocol given on the command line, e.g. ``tls12``"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError('unknown protocol "%s", choose from %s' % (
                name, ', '.join(p.name for p in cls)))

    @property
    def display_name(self):
        return PROTOCOL_NAMES[self]


class ProtocolState(enum.Enum):
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'
    DEFAULT = 'Default'

    @classmethod
    def from_name(cls, name):
        """Parse a state given on the command line, e.g. ``disabled``"""
        for state in cls:
            if state.value.lower() == name.strip().lower():
                return state
        raise ValueError('unknown status "%s", choose from %s' % (
            name, ', '.join(s.value for s in cls)))

    def __str__(self):
        return self.value


QueryResult = namedtuple('QueryResult', ['protocol', 'state'])


PROTOCOL_NAMES = MappingProxyType({
    Protocol.SSL20: 'SSL 2.0',
    Protocol.SSL30: 'SSL 3.0',
    Protocol.TLS10: 'TLS 1.0',
    Protocol.TLS11: 'TLS 1.1',
    Protocol.TLS12: 'TLS 1.2',
})

ALL_PROTOCOLS = tuple(Protocol)


def path_for(protocol, root=PROTOCOLS_ROOT):
    """
    Return the store path of the server-side settings of ``protocol``

    Trailing separators of ``root`` are dropped.

    >>> path_for(Protocol.TLS12, root='Protocols')
    'Protocols\\\\TLS 1.2\\\\Server'
    """
    return PATH_SEPARATOR.join((root.rstrip(PATH_SEPARATOR),
                                PROTOCOL_NAMES[protocol], SERVER_LEAF))
