#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Custom exception classes (some which are RPC transparent).

Every error raised while talking to the configuration store derives from
`StoreError`.  The message is built from the class ``format`` and the keyword
arguments, which are also copied to attributes of the same name:

>>> e = StoreAccessError(path='SYSTEM\\\\Foo', reason='Access is denied')
>>> e.path
'SYSTEM\\\\Foo'
>>> str(e)
'cannot access SYSTEM\\\\Foo: Access is denied'
"""


class StoreError(Exception):
    """
    Base class for configuration store errors.
    """

    format = ''

    def __init__(self, **kw):
        self.msg = self.format % kw
        self.kw = kw
        for (key, value) in kw.items():
            assert not hasattr(self, key), 'conflicting kwarg %s.%s = %r' % (
                self.__class__.__name__, key, value,
            )
            setattr(self, key, value)
        Exception.__init__(self, self.msg)

    @property
    def message(self):
        return str(self)


class StoreAccessError(StoreError):
    """
    Raised when the store cannot be read or written, e.g. permission denied.
    """

    format = 'cannot access %(path)s: %(reason)s'


class EntryNotFound(StoreError):
    """
    Raised when a key or a value does not exist in the store.

    Reading an absent entry is the expected Default case, callers of
    `ConfigStore.get_value` catch this one.
    """

    format = '%(path)s not found'


class DeleteNonexistentEntry(EntryNotFound):
    """
    Raised when a protocol is reset to Default but has no entry to delete.

    The protocol is then already in the Default state.
    """

    format = '%(protocol)s has no entry at %(path)s'


class ConfigurationError(Exception):
    """
    Raised when the environment cannot be set up, e.g. a bad config directory.
    """
