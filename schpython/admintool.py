#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""A common framework for command-line admin tools

Handles option parsing, logging and turning failures into exit codes.
"""

import logging
import sys
import traceback

from schplatform.tasks import tasks
from schpython import config
from schpython import version
from schpython.log_manager import standard_logging_setup

SUCCESS = 0
ADMIN_TOOL_ERROR = 1
USAGE_ERROR = 2

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """An exception that records an error message and a return value
    """
    def __init__(self, msg='', rval=ADMIN_TOOL_ERROR):
        super(ScriptError, self).__init__(msg or '')
        self.rval = rval

    @property
    def msg(self):
        return str(self)


class AdminTool:
    """Base class for command-line admin tools

    ``main`` builds the option parser of the class (see ``add_options``),
    parses the command line and calls ``execute`` on a new instance, which:

    - checks the options and arguments (validate_options)
    - sets up logging (setup_logging)
    - does the work (run)

    Anything raised on the way is turned into a message and an exit code by
    ``handle_error``; the outcome is logged by ``log_success`` or
    ``log_failure``.

    Class attributes to define in subclasses:
    command_name - shown in logs
    log_file_name - if None, logging is to stderr only
    usage - text shown in help
    description - text shown in help
    """
    command_name = None
    log_file_name = None
    usage = None
    description = None

    @classmethod
    def make_parser(cls):
        parser = config.SchOptionParser(
            usage=cls.usage, version=version.VERSION,
            description=cls.description)
        cls.add_options(parser)
        return parser

    @classmethod
    def add_options(cls, parser):
        """Add command-specific options to the option parser

        :param parser: The parser to add options to
        """
        group = config.OptionGroup(parser, "Logging and output options")
        group.add_option("-v", "--verbose", dest="verbose", default=False,
            action="store_true", help="print debugging information")
        group.add_option("-q", "--quiet", dest="quiet", default=False,
            action="store_true", help="output only errors")
        group.add_option("--log-file", dest="log_file", default=None,
            metavar="FILE", help="log everything to the given file")
        parser.add_option_group(group)

    @classmethod
    def run_cli(cls):
        """Run with sys.argv and exit the process with the exit code"""
        sys.exit(cls.main(sys.argv))

    @classmethod
    def main(cls, argv):
        """Parse ``argv`` and run the command

        :param argv: Command-line arguments, program name first
        :return: Command exit code
        """
        parser = cls.make_parser()
        options, args = parser.parse_args(argv[1:])
        return cls(parser, options, args).execute()

    def __init__(self, option_parser, options, args):
        self.option_parser = option_parser
        self.options = options
        self.args = args

    def execute(self):
        """Validate, set up logging, run, and report the outcome"""
        self._setup_logging(no_file=True)
        try:
            self.validate_options()
            self.setup_logging()
            return_value = self.run()
        except BaseException as exception:
            backtrace = sys.exc_info()[2]
            error_message, return_value = self.handle_error(exception)
            if return_value:
                self.log_failure(error_message, return_value, exception,
                                 backtrace)
                return return_value
        self.log_success()
        return return_value

    def validate_options(self, needs_admin=False):
        """Check self.options and self.args

        Nothing on the system may be changed here.
        """
        if self.options.verbose and self.options.quiet:
            raise ScriptError(
                'The --quiet and --verbose options are mutually exclusive')
        if needs_admin and not tasks.is_admin():
            raise ScriptError(
                'Must be an administrator to run %s' % self.command_name)

    def setup_logging(self, log_file_mode='w'):
        """Replace the console-only logging of option validation

        Once the options are known to be valid, logging also goes to
        --log-file or to self.log_file_name. The console shows INFO by
        default, ERROR with --quiet and DEBUG with --verbose.
        """
        root_logger = logging.getLogger()
        console_handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
        ]
        if console_handlers:
            root_logger.removeHandler(console_handlers[0])

        self._setup_logging(log_file_mode=log_file_mode)

    def _setup_logging(self, log_file_mode='w', no_file=False):
        if no_file:
            log_file_name = None
        else:
            log_file_name = self.options.log_file or self.log_file_name

        if self.options.verbose:
            console_format = '%(name)s: %(levelname)s: %(message)s'
        else:
            console_format = '%(message)s'
        standard_logging_setup(
            log_file_name, verbose=not self.options.quiet,
            debug=self.options.verbose, filemode=log_file_mode,
            console_format=console_format)

        if log_file_name:
            logger.debug('Logging to %s', log_file_name)

    def handle_error(self, exception):
        """Given an exception, return a message (or None) and process exit code
        """
        if isinstance(exception, ScriptError):
            return exception.msg, exception.rval or ADMIN_TOOL_ERROR
        elif isinstance(exception, SystemExit):
            # raised by option_parser.error() and friends
            if isinstance(exception.code, int):
                return None, exception.code
            return str(exception.code), ADMIN_TOOL_ERROR

        return str(exception), ADMIN_TOOL_ERROR

    def run(self):
        """Do the work of the command

        The base implementation logs how the command was invoked. The return
        value of an override becomes the exit code.
        """
        logger.debug('%s %s was invoked with arguments %s and options: %s',
                     self.command_name, version.VERSION, self.args,
                     vars(self.options))

    def log_failure(self, error_message, return_value, exception, backtrace):
        logger.debug('%s failed with %s: %s\n%s', self.command_name,
                     type(exception).__name__, exception,
                     ''.join(traceback.format_tb(backtrace)))
        if error_message:
            logger.error('%s', error_message)
        summary = "The %s command failed." % self.command_name
        if self.log_file_name and return_value != USAGE_ERROR:
            summary = "%s See %s for more information" % (
                summary, self.log_file_name)
        logger.error('%s', summary)

    def log_success(self):
        logger.info('The %s command was successful', self.command_name)
