#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#
"""
Test the `schpython/admintool.py` module.
"""

import pytest

from schplatform.tasks import tasks
from schpython import admintool, version

pytestmark = pytest.mark.tier0


class EchoTool(admintool.AdminTool):
    command_name = 'sch-echo'
    usage = "%prog [ARG ...]"
    description = "Print the arguments"

    @classmethod
    def add_options(cls, parser):
        super(EchoTool, cls).add_options(parser)
        parser.add_option("--fail", dest="fail", type="int", default=0)
        parser.add_option("--admin", dest="admin", action="store_true",
                          default=False)

    def validate_options(self):
        super(EchoTool, self).validate_options(needs_admin=self.options.admin)
        if 'bad' in self.args:
            self.option_parser.error("bad argument")

    def run(self):
        super(EchoTool, self).run()
        if self.options.fail:
            raise admintool.ScriptError('failing on request',
                                        self.options.fail)
        print(' '.join(self.args))
        return admintool.SUCCESS


def test_success(capsys):
    assert EchoTool.main(['sch-echo', 'TLS12', 'Enabled']) == 0
    captured = capsys.readouterr()
    assert captured.out == 'TLS12 Enabled\n'
    assert 'The sch-echo command was successful' in captured.err


def test_script_error(capsys):
    assert EchoTool.main(['sch-echo', '--fail', '5']) == 5
    err = capsys.readouterr().err
    assert 'failing on request' in err
    assert 'The sch-echo command failed.' in err


def test_usage_error(capsys):
    assert EchoTool.main(['sch-echo', 'bad']) == admintool.USAGE_ERROR
    assert 'error: bad argument' in capsys.readouterr().err


def test_verbose_and_quiet(capsys):
    assert EchoTool.main(['sch-echo', '-v', '-q']) == 1
    assert 'mutually exclusive' in capsys.readouterr().err


def test_quiet(capsys):
    assert EchoTool.main(['sch-echo', '-q', 'x']) == 0
    captured = capsys.readouterr()
    assert captured.out == 'x\n'
    assert captured.err == ''


def test_needs_admin(monkeypatch, capsys):
    monkeypatch.setattr(tasks, 'is_admin', lambda: False)
    assert EchoTool.main(['sch-echo', '--admin']) == 1
    assert 'Must be an administrator to run sch-echo' in capsys.readouterr().err


def test_log_file(tmp_path):
    log_file = tmp_path / 'echo.log'
    assert EchoTool.main(['sch-echo', '--log-file', str(log_file), 'x']) == 0
    content = log_file.read_text()
    assert ("sch-echo %s was invoked with arguments ['x']" %
            version.VERSION) in content
    assert 'The sch-echo command was successful' in content


def test_parser_per_tool():
    parser = EchoTool.make_parser()
    assert parser.has_option('--fail')
    assert not admintool.AdminTool.make_parser().has_option('--fail')


def test_script_error_message():
    e = admintool.ScriptError(None)
    assert e.msg == ''
    assert e.rval == 1
