#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Running external commands and asking the operator questions.
"""

import logging
import subprocess

logger = logging.getLogger(__name__)


class CalledProcessError(subprocess.CalledProcessError):
    """CalledProcessError that also shows what the command wrote to stderr"""

    def __str__(self):
        message = super(CalledProcessError, self).__str__()
        if self.stderr:
            message = '%s %s' % (message, self.stderr.strip())
        return message


def run(args, raiseonerr=True):
    """
    Run a command and wait for it to finish.

    The output is collected and logged at debug level.

    :param args: list of arguments, the first one is the program
    :param raiseonerr: raise when the command exits with a non-zero status
    :raises CalledProcessError: the command failed and ``raiseonerr`` is set
    :return: `subprocess.CompletedProcess` with ``stdout`` and ``stderr``
        as text
    """
    logger.debug('Starting external process')
    logger.debug('args=%s', args)

    try:
        result = subprocess.run(args, stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                universal_newlines=True, errors='replace')
    except OSError as e:
        logger.debug('Process execution failed: %s', e)
        raise

    logger.debug('Process finished, return code=%s', result.returncode)
    if result.stdout:
        logger.debug('stdout=%s', result.stdout)
    if result.stderr:
        logger.debug('stderr=%s', result.stderr)

    if result.returncode != 0 and raiseonerr:
        raise CalledProcessError(result.returncode, args, result.stdout,
                                 result.stderr)
    return result


def user_input(prompt, default=False):
    """Ask a yes/no question on the terminal

    Answers starting with y or n decide, anything else asks again. An empty
    answer or the end of input gives ``default``.
    """
    choice = "yes" if default else "no"
    while True:
        try:
            answer = input("%s [%s]: " % (prompt, choice)).strip().lower()
        except EOFError:
            return default
        if not answer:
            return default
        if answer[0] == "y":
            return True
        if answer[0] == "n":
            return False
