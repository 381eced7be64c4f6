#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Command-line option parsing of the admin tools.
"""

# pylint: disable=deprecated-module
from optparse import OptionGroup, OptionParser, IndentedHelpFormatter
# pylint: enable=deprecated-module

__all__ = ['SchFormatter', 'SchOptionParser', 'OptionGroup']


class SchFormatter(IndentedHelpFormatter):
    """Help formatter lining up the continuation lines of the usage text"""

    def format_usage(self, usage):
        label = "Usage:"
        lines = usage.split("\n")
        indent = " " * len(label)
        text = ["%s %s\n" % (label, lines[0])]
        text.extend("%s %s\n" % (indent, line) for line in lines[1:])
        return "".join(text)


class SchOptionParser(OptionParser):
    """OptionParser with `SchFormatter` as its default formatter"""

    def __init__(self, usage=None, version=None, description=None,
                 formatter=None, **kwargs):
        if formatter is None:
            formatter = SchFormatter()
        OptionParser.__init__(self, usage=usage, version=version,
                              description=description, formatter=formatter,
                              **kwargs)
