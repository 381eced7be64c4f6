#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Key-path configuration store.

The reader and the writer only talk to a `ConfigStore`; the platform layer
provides the real one (the Windows registry) and `MemoryStore` stands in for
it everywhere else.
"""

import logging

from schlib import errors
from schlib.constants import PATH_SEPARATOR

logger = logging.getLogger(__name__)


class ConfigStore:
    """Hierarchical store addressed by ``\\``-separated key paths

    Each key holds named integer values.
    """

    def get_value(self, path, name):
        """Return the value ``name`` of the key at ``path``

        :raises EntryNotFound: the key or the value does not exist
        :raises StoreAccessError: the store could not be read
        """
        raise NotImplementedError()

    def set_value(self, path, name, value):
        """Create the key at ``path`` if needed and set ``name`` to ``value``

        :raises StoreAccessError: the store could not be written
        """
        raise NotImplementedError()

    def delete_key(self, path):
        """Delete the key at ``path`` with all its values

        :raises EntryNotFound: the key does not exist
        :raises StoreAccessError: the key could not be deleted
        """
        raise NotImplementedError()


def _normalize(path):
    parts = [p for p in path.split(PATH_SEPARATOR) if p]
    return PATH_SEPARATOR.join(parts).lower()


class MemoryStore(ConfigStore):
    """In-memory store, case insensitive like the registry

    >>> store = MemoryStore()
    >>> store.set_value('A\\\\B', 'Enabled', 1)
    >>> store.get_value('a\\\\b', 'enabled')
    1
    >>> store.keys()
    ['A', 'A\\\\B']
    """

    def __init__(self):
        # normalized path -> (path as created, {lower name: (name, value)})
        self._keys = {}
        self._denied = set()

    def deny(self, path):
        """Make every access to ``path`` and below fail"""
        self._denied.add(_normalize(path))

    def keys(self):
        return sorted(path for path, _values in self._keys.values())

    def _check_access(self, path):
        normalized = _normalize(path)
        for denied in self._denied:
            if (normalized == denied or
                    normalized.startswith(denied + PATH_SEPARATOR)):
                raise errors.StoreAccessError(
                    path=path, reason='Access is denied')
        return normalized

    def get_value(self, path, name):
        normalized = self._check_access(path)
        try:
            _path, values = self._keys[normalized]
            return values[name.lower()][1]
        except KeyError:
            raise errors.EntryNotFound(
                path=PATH_SEPARATOR.join((path, name)))

    def set_value(self, path, name, value):
        normalized = self._check_access(path)
        parts = path.split(PATH_SEPARATOR)
        for i in range(1, len(parts) + 1):
            parent = PATH_SEPARATOR.join(parts[:i])
            self._keys.setdefault(_normalize(parent), (parent, {}))
        self._keys[normalized][1][name.lower()] = (name, value)
        logger.debug('Set %s\\%s = %r', path, name, value)

    def delete_key(self, path):
        normalized = self._check_access(path)
        if normalized not in self._keys:
            raise errors.EntryNotFound(path=path)
        prefix = normalized + PATH_SEPARATOR
        if any(key.startswith(prefix) for key in self._keys):
            raise errors.StoreAccessError(path=path, reason='key has subkeys')
        del self._keys[normalized]
        logger.debug('Deleted %s', path)
