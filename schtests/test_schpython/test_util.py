#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#
"""
Test the `schpython/util.py` module.
"""

import sys

import pytest

from schpython import util

pytestmark = pytest.mark.tier0


def python(code):
    return [sys.executable, '-c', code]


def test_run():
    result = util.run(python('import sys; sys.stdout.write("foo")'))
    assert result.returncode == 0
    assert result.stdout == 'foo'
    assert result.stderr == ''


def test_run_logs_output(caplog):
    caplog.set_level('DEBUG', logger='schpython.util')
    util.run(python('print("Restart scheduled")'))
    assert 'stdout=Restart scheduled' in caplog.text
    assert 'return code=0' in caplog.text


def test_run_error():
    with pytest.raises(util.CalledProcessError) as e:
        util.run(python('import sys; sys.stderr.write("boom"); sys.exit(3)'))
    assert e.value.returncode == 3
    assert e.value.stderr == 'boom'
    assert 'non-zero exit status 3' in str(e.value)
    assert str(e.value).endswith(' boom')


def test_run_no_raise():
    result = util.run(python('import sys; sys.exit(3)'), raiseonerr=False)
    assert result.returncode == 3


def test_run_missing_program(tmp_path):
    with pytest.raises(OSError):
        util.run([str(tmp_path / 'no-such-program')])


class test_user_input:
    @pytest.fixture
    def answers(self, monkeypatch):
        answers = []

        def fake_input(prompt):
            if not answers:
                raise EOFError()
            return answers.pop(0)

        monkeypatch.setattr('builtins.input', fake_input)
        return answers

    @pytest.mark.parametrize('answer,expected', [
        ('y', True), ('YES', True), ('n', False), (' No ', False),
    ])
    def test_answer(self, answers, answer, expected):
        answers.append(answer)
        assert util.user_input('Restart?', False) is expected

    def test_retries(self, answers):
        answers.extend(['maybe', 'y'])
        assert util.user_input('Restart?') is True
        assert answers == []

    @pytest.mark.parametrize('default', [True, False])
    def test_empty_answer(self, answers, default):
        answers.append('')
        assert util.user_input('Restart?', default) is default

    @pytest.mark.parametrize('default', [True, False])
    def test_eof(self, answers, default):
        assert util.user_input('Restart?', default) is default

    def test_prompt_shows_default(self, monkeypatch):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return 'n'

        monkeypatch.setattr('builtins.input', fake_input)
        util.user_input('Restart the computer now?', True)
        assert prompts == ['Restart the computer now? [yes]: ']
