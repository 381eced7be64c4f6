#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

import logging

from schlib import config, errors, state
from schlib.constants import RESTART_NOTICE
from schlib.protocols import Protocol, ProtocolState
from schplatform.osinfo import osinfo
from schplatform.tasks import tasks
from schpython.admintool import AdminTool, ScriptError, SUCCESS

logger = logging.getLogger(__name__)


class ProtocolStatusTool(AdminTool):
    """Common part of the protocol status commands"""

    def validate_options(self, needs_admin=False):
        super(ProtocolStatusTool, self).validate_options(
            needs_admin=needs_admin)
        self.env = config.bootstrap(log_file=self.options.log_file)
        self.log_file_name = self.env.log_file

    def parse_protocols(self, names):
        protocols = []
        for name in names:
            try:
                protocols.append(Protocol.from_name(name))
            except ValueError as e:
                self.option_parser.error(str(e))
        return protocols

    def get_store(self):
        try:
            return tasks.get_config_store()
        except NotImplementedError:
            raise ScriptError(
                '%s is not supported on %s' % (self.command_name,
                                               osinfo.name))


class GetProtocolStatus(ProtocolStatusTool):
    command_name = 'get-protocol-status'
    usage = "%prog [PROTOCOL ...]"
    description = (
        "Show whether each protocol is enabled, disabled or left at the "
        "system default for server-side use. Protocols: %s. "
        "Without arguments, all of them are shown." %
        ', '.join(p.name for p in Protocol))

    def validate_options(self):
        self.protocols = self.parse_protocols(self.args) or None
        super(GetProtocolStatus, self).validate_options()

    def run(self):
        super(GetProtocolStatus, self).run()

        store = self.get_store()
        results = state.get_state(store, self.protocols,
                                  root=self.env.protocols_root)
        for result in results:
            print("{}: {}".format(result.protocol.name, result.state))
        return SUCCESS


class SetProtocolStatus(ProtocolStatusTool):
    command_name = 'set-protocol-status'
    usage = "%prog PROTOCOL [PROTOCOL ...] {Default|Disabled|Enabled}"
    description = (
        "Enable or disable protocols for server-side use, or reset them to "
        "the system default. Protocols: %s. A restart of the computer is "
        "required for the change to take effect." %
        ', '.join(p.name for p in Protocol))

    @classmethod
    def add_options(cls, parser):
        super(SetProtocolStatus, cls).add_options(parser)
        parser.add_option(
            "--restart-without-confirmation",
            dest="restart_without_confirmation", action="store_true",
            default=False,
            help="restart the computer without asking for confirmation")

    def validate_options(self):
        if len(self.args) < 2:
            self.option_parser.error(
                "at least one protocol and a status are required")
        try:
            self.target = ProtocolState.from_name(self.args[-1])
        except ValueError as e:
            self.option_parser.error(str(e))
        self.protocols = self.parse_protocols(self.args[:-1])

        super(SetProtocolStatus, self).validate_options(needs_admin=True)

    def run(self):
        super(SetProtocolStatus, self).run()

        store = self.get_store()
        try:
            restart_required = state.set_state(
                store, self.protocols, self.target,
                root=self.env.protocols_root)
        except errors.DeleteNonexistentEntry as e:
            raise ScriptError(
                '%s is already in the Default state' % e.protocol)

        if restart_required:
            print(RESTART_NOTICE)
            state.restart_computer(
                self.options.restart_without_confirmation,
                delay=self.env.restart_delay,
                default=self.env.confirm_default)
        return SUCCESS
