#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Process-wide static configuration and environment.

The run-time instance of the `Env` class is bootstrapped by the admin tools
from their command-line options, completed from the configuration file and
the built-in defaults, and then locked into a read-only state.

For example:

>>> env = Env(restart_delay='30')
>>> env.restart_delay
30
>>> env['restart_delay']
30
"""

import logging
import os
import re
from os import path
from configparser import RawConfigParser, Error as ConfigParserError

from schlib import errors
from schlib.constants import (
    CONFDIR_ENV, CONFIG_SECTION, DEFAULT_CONFIG, DEL_ERROR, NAME_ERROR,
    NAME_REGEX, OVERRIDE_ERROR, SET_ERROR,
)
from schplatform.paths import paths

logger = logging.getLogger(__name__)

_name_re = re.compile(NAME_REGEX)


def check_name(name):
    """
    Verify that ``name`` is a valid lower-case Python identifier that neither
    starts nor ends with an underscore.
    """
    if type(name) is not str:
        raise TypeError('name: need a str; got %r' % (name,))
    if _name_re.match(name) is None:
        raise ValueError(NAME_ERROR % (NAME_REGEX, name))
    return name


class Env:
    """
    Store and retrieve environment variables.

    Variables can be set and retrieved either as attributes or as dictionary
    items.  Each variable can be set only once; values given as ``str`` are
    converted the way they would be written in a configuration file:
    ``True``, ``False`` and ``None`` become the constants (an empty string is
    ``None`` too) and digit strings become ``int``.

    The bootstrap sequence is `Env._bootstrap()`, `Env._finalize_core()` and
    `Env._finalize()`; the last one locks the instance.
    """

    __locked = False

    def __init__(self, **initialize):
        object.__setattr__(self, '_Env__d', {})
        if initialize:
            self._merge(**initialize)

    def __lock__(self):
        """
        Prevent further changes to environment.
        """
        if self.__locked is True:
            raise Exception(
                '%s.__lock__() already called' % self.__class__.__name__
            )
        object.__setattr__(self, '_Env__locked', True)

    def __setattr__(self, name, value):
        self[name] = value

    def __setitem__(self, key, value):
        """
        Set ``key`` to ``value``.
        """
        if self.__locked:
            raise AttributeError(
                SET_ERROR % (self.__class__.__name__, key, value)
            )
        check_name(key)
        # pylint: disable=no-member
        if key in self.__d:
            raise AttributeError(OVERRIDE_ERROR %
                (self.__class__.__name__, key, self.__d[key], value)
            )
        # pylint: enable=no-member
        assert not hasattr(self, key)
        if isinstance(value, str):
            value = value.strip()
            m = {
                'True': True,
                'False': False,
                'None': None,
                '': None,
            }
            if value in m:
                value = m[value]
            elif value.isdigit():
                value = int(value)
        if type(value) not in (str, int, float, bool, type(None)):
            raise TypeError(key, value)
        object.__setattr__(self, key, value)
        # pylint: disable=unsupported-assignment-operation, no-member
        self.__d[key] = value
        # pylint: enable=unsupported-assignment-operation, no-member

    def __getitem__(self, key):
        return self.__d[key]  # pylint: disable=no-member

    def __delattr__(self, name):
        raise AttributeError(
            DEL_ERROR % (self.__class__.__name__, name)
        )

    def __contains__(self, key):
        return key in self.__d  # pylint: disable=no-member

    def __len__(self):
        return len(self.__d)  # pylint: disable=no-member

    def __iter__(self):
        """
        Iterate through keys in ascending order.
        """
        for key in sorted(self.__d):  # pylint: disable=no-member
            yield key

    def _merge(self, **kw):
        """
        Merge variables from ``kw`` into the environment.

        Variables that have already been set are ignored.  Returns a
        ``(num_set, num_total)`` tuple.

        >>> env = Env()
        >>> env._merge(one=1, two=2)
        (2, 2)
        >>> env._merge(one=1, three=3)
        (1, 2)
        """
        i = 0
        for (key, value) in kw.items():
            if key not in self:
                self[key] = value
                i += 1
        return (i, len(kw))

    def _merge_from_file(self, config_file):
        """
        Merge variables from the ``[global]`` section of ``config_file``.

        Variables that have already been set are ignored, and so are keys
        that are not valid variable names.  If ``config_file`` does not
        exist or cannot be read as an UTF-8 INI file, ``None`` is returned;
        otherwise a ``(num_set, num_total)`` tuple.
        """
        if not path.isfile(config_file):
            return None
        parser = RawConfigParser()
        try:
            parser.read(config_file, encoding='utf-8-sig')
        except (ConfigParserError, UnicodeDecodeError) as e:
            logger.debug('Ignoring configuration file %s: %s',
                         config_file, e)
            return None
        if not parser.has_section(CONFIG_SECTION):
            parser.add_section(CONFIG_SECTION)
        items = parser.items(CONFIG_SECTION)
        if len(items) == 0:
            return 0, 0
        i = 0
        for (key, value) in items:
            if _name_re.match(key) is None:
                logger.debug('Ignoring %r in %s: not a valid name',
                             key, config_file)
                continue
            if key not in self:
                self[key] = value
                i += 1
        if 'config_loaded' not in self:
            self['config_loaded'] = True
        return i, len(items)

    def _join(self, key, *parts):
        """
        Append path components in ``parts`` to base path ``self[key]``.
        """
        if key in self and self[key] is not None:
            return path.join(self[key], *parts)
        return None

    def _bootstrap(self, **overrides):
        """
        Initialize basic environment.

        Merges-in ``overrides`` (the command-line options) and fills in
        *confdir* and *conf_default*.  *confdir* comes from the
        ``SCH_CONFDIR`` environment variable when it is set.
        """
        self._merge(**overrides)

        self.env_confdir = os.environ.get(CONFDIR_ENV)

        if 'confdir' in self and self.env_confdir is not None:
            raise errors.ConfigurationError(
                "%s env cannot be set because explicit confdir "
                "is used" % CONFDIR_ENV)

        if 'confdir' not in self:
            if self.env_confdir is not None:
                if (not path.isabs(self.env_confdir)
                        or not path.isdir(self.env_confdir)):
                    raise errors.ConfigurationError(
                        "{} env var must be an absolute path to an "
                        "existing directory, got '{}'.".format(
                            CONFDIR_ENV, self.env_confdir))
                self.confdir = self.env_confdir
            else:
                self.confdir = paths.ETC_SCH

        if 'conf_default' not in self:
            self.conf_default = self._join('confdir', 'default.conf')

    def _finalize_core(self, **defaults):
        """
        Complete initialization of the environment.

        Runs after `Env._bootstrap()`: merges-in the configuration file
        and then ``defaults`` (normally `constants.DEFAULT_CONFIG`).
        """
        self._merge_from_file(self.conf_default)
        self._merge(**defaults)

        delay = self.restart_delay
        if (not isinstance(delay, int) or isinstance(delay, bool)
                or delay < 0):
            raise errors.ConfigurationError(
                "restart_delay must be a non-negative number of seconds, "
                "got '{}'".format(self.restart_delay))
        if not isinstance(self.confirm_default, bool):
            raise errors.ConfigurationError(
                "confirm_default must be True or False, got '{}'".format(
                    self.confirm_default))

    def _finalize(self, **lastchance):
        """
        Finalize and lock environment.
        """
        self._merge(**lastchance)
        self.__lock__()


def bootstrap(**overrides):
    """
    Return a locked `Env` built from ``overrides``, the configuration file
    and the built-in defaults, in that order of precedence.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    env = Env()
    env._bootstrap(**overrides)
    env._finalize_core(**dict(DEFAULT_CONFIG))
    env._finalize()
    return env
