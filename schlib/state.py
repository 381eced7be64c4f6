#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Read and change the server-side state of the SCHANNEL protocols.

Changing the configuration and restarting the computer are two separate
steps: `set_state` only touches the store and tells whether a restart is
needed, the caller then decides to call `restart_computer`.
"""

import logging

from schlib import errors
from schlib.constants import (
    ENABLED_VALUE, FLAG_DISABLED, FLAG_ENABLED, PROTOCOLS_ROOT, RESTART_PROMPT)
from schlib.protocols import ALL_PROTOCOLS, ProtocolState, QueryResult, path_for
from schplatform.tasks import tasks
from schpython import util

logger = logging.getLogger(__name__)


def _read_state(store, path):
    try:
        flag = store.get_value(path, ENABLED_VALUE)
    except errors.EntryNotFound:
        return ProtocolState.DEFAULT
    if flag == FLAG_DISABLED:
        return ProtocolState.DISABLED
    return ProtocolState.ENABLED


def get_state(store, protocols=None, root=PROTOCOLS_ROOT):
    """
    Return a `QueryResult` for each protocol, in the order given

    :param store: `ConfigStore` to read from
    :param protocols: sequence of `Protocol`, all of them when None
    :param root: store path under which the protocol keys live
    """
    if protocols is None:
        protocols = ALL_PROTOCOLS

    results = []
    for protocol in protocols:
        path = path_for(protocol, root)
        state = _read_state(store, path)
        logger.debug('%s (%s) is %s', protocol.name, path, state)
        results.append(QueryResult(protocol, state))
    return results


def set_state(store, protocols, target, root=PROTOCOLS_ROOT):
    """
    Put each protocol in the ``target`` state

    Protocols are updated one by one; the first failure stops the loop and
    leaves the protocols already processed in their new state.

    :param store: `ConfigStore` to write to
    :param protocols: sequence of `Protocol`
    :param target: `ProtocolState`
    :param root: store path under which the protocol keys live
    :raises DeleteNonexistentEntry: target is Default and a protocol has no
        entry
    :raises StoreAccessError: the store could not be written
    :return: True, a restart is required for the changes to take effect
    """
    for protocol in protocols:
        path = path_for(protocol, root)
        if target is ProtocolState.DEFAULT:
            try:
                store.delete_key(path)
            except errors.EntryNotFound:
                raise errors.DeleteNonexistentEntry(
                    protocol=protocol.name, path=path)
        else:
            if target is ProtocolState.ENABLED:
                flag = FLAG_ENABLED
            else:
                flag = FLAG_DISABLED
            store.set_value(path, ENABLED_VALUE, flag)
        logger.info('%s set to %s', protocol.name, target)
    return True


def restart_computer(without_confirmation=False, delay=0, default=False):
    """
    Restart the computer, asking the operator first

    :param without_confirmation: restart without asking
    :param delay: seconds before the restart happens
    :param default: answer assumed when the operator just hits enter
    :return: True if the restart was triggered
    """
    if not without_confirmation:
        if not util.user_input(RESTART_PROMPT, default):
            logger.info('The computer was not restarted')
            return False

    logger.debug('Restarting the computer in %d seconds', delay)
    tasks.reboot(delay)
    return True
