import pytest

from textevents import cli


def test_list(capsys):
    cli.main(['list'])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 152
    assert any(line.split()[:2] == ['CHANNEL_ACTION', '4'] for line in out)


def test_help(capsys):
    cli.main(['help', 'change-nick'])
    out = capsys.readouterr().out
    assert 'Change Nick (CHANGE_NICK)' in out
    assert '%1   Old nickname' in out
    assert '%2   New nickname' in out


def test_format(capsys):
    cli.main(['format', '--strip', 'Kick', 'alice', 'bob', '#chan', 'be nice'])
    out = capsys.readouterr().out
    assert out == '*\talice has kicked bob from #chan (be nice)\n'


def test_format_template(capsys):
    cli.main(['format', 'Join', 'alice', '#chan', '-t', '%1 has joined %2'])
    assert capsys.readouterr().out == 'alice has joined #chan\n'


def test_format_hexchat_template(capsys):
    cli.main(['format', 'Join', 'alice', '#chan', '--hexchat', '-t', '$2: $1'])
    assert capsys.readouterr().out == '#chan: alice\n'


def test_format_pevents(tmp_path, capsys):
    conf = tmp_path / 'pevents.conf'
    conf.write_text(
        'event_name=Join\nevent_text=$1 in $2\n\n'
        'event_name=No Such Event\nevent_text=$1\n',
        encoding='utf-8',
    )
    cli.main(['format', '--pevents', str(conf), 'Join', 'alice', '#chan'])
    assert capsys.readouterr().out == 'alice in #chan\n'


def test_check(capsys):
    assert cli.main(['check', 'Join', '%1 %2']) == 0
    assert cli.main(['check', 'Join', '%1 %7']) == 1
    assert '%7 is beyond the 4 arguments of Join' in capsys.readouterr().out


def test_unknown_event(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['format', 'NOT_REAL_EVENT'])
    assert exc_info.value.code == 1
    assert 'Unknown text event: NOT_REAL_EVENT' in capsys.readouterr().out
