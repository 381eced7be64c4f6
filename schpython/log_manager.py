#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Logging set up shared by the admin tools.

The log file, when there is one, gets every record. The console only gets
what the verbosity options ask for.
"""

import logging
import os
import time

__all__ = ["standard_logging_setup", "Formatter"]

# ISO 8601 timestamp, always in UTC
ISO8601_UTC_DATETIME_FMT = '%Y-%m-%dT%H:%M:%SZ'

CONSOLE_FORMAT = '%(name)s: %(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


class Formatter(logging.Formatter):
    """Formatter stamping records in UTC"""
    converter = time.gmtime

    def __init__(self, fmt=FILE_FORMAT, datefmt=ISO8601_UTC_DATETIME_FMT):
        super(Formatter, self).__init__(fmt, datefmt)


def console_level(verbose=False, debug=False):
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.ERROR


def _open_log_file(filename, filemode):
    # readable by the owner only
    old_umask = os.umask(0o177)
    try:
        return logging.FileHandler(filename, mode=filemode)
    finally:
        os.umask(old_umask)


def standard_logging_setup(filename=None, verbose=False, debug=False,
                           filemode='w', console_format=None):
    """
    Attach a console handler, and a file handler when ``filename`` is given,
    to the root logger.

    :return: the console handler
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if filename is not None:
        file_handler = _open_log_file(filename, filemode)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(Formatter())
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level(verbose, debug))
    console_handler.setFormatter(Formatter(console_format or CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)
    return console_handler
