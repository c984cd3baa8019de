import pytest

from textevents.catalog import UnknownEvent
from textevents.printer import EAT, EAT_DISPLAY, NO_MORE, Printer, PrioritizedHandler


@pytest.fixture
def lines():
    return []


@pytest.fixture
def printer(lines):
    printer = Printer(output=lines.append)
    printer.formatter.store.set_override('Join', '%1 joined %2')
    return printer


def test_emit_displays(printer, lines):
    assert printer.emit('Join', 'alice', '#chan') == 'alice joined #chan'
    assert lines == ['alice joined #chan']


def test_handlers_in_priority_order(printer):
    calls = []
    printer.add_handler('Join', lambda p, r: calls.append('late'), priority=10)
    printer.add_handler('Join', lambda p, r: calls.append('early'), priority=-10)
    printer.add_handler('all_events', lambda p, r: calls.append('all'))
    printer.emit('Join', 'alice', '#chan')
    assert calls == ['early', 'all', 'late']


def test_handler_receives_request(printer):
    requests = []
    printer.add_handler('join', lambda p, r: requests.append(r))
    printer.emit('JOIN', 'alice')
    (request,) = requests
    assert request.event == 'Join'
    assert request.args == ('alice', '', '', '')


def test_no_more(printer, lines):
    calls = []
    printer.add_handler('Join', lambda p, r: NO_MORE, priority=1)
    printer.add_handler('Join', lambda p, r: calls.append(r), priority=2)
    assert printer.emit('Join', 'alice', '#chan') == 'alice joined #chan'
    assert not calls
    assert lines == ['alice joined #chan']


def test_eat(printer, lines):
    calls = []
    printer.add_handler('Join', lambda p, r: EAT, priority=1)
    printer.add_handler('Join', lambda p, r: calls.append(r), priority=2)
    assert printer.emit('Join', 'alice', '#chan') is None
    assert not calls
    assert lines == []


def test_eat_only_its_event(printer, lines):
    printer.add_handler('Join', lambda p, r: EAT)
    printer.formatter.store.set_override('Part', '%1 left')
    printer.emit('Join', 'alice')
    printer.emit('Part', 'alice')
    assert lines == ['alice left']


def test_handler_may_emit(printer, lines):
    def announce(printer, request):
        printer.emit('Generic Message', 'note', 'join seen')

    printer.add_handler('Join', announce)
    printer.emit('Join', 'alice', '#chan', plain=True)
    assert lines == ['note\tjoin seen', 'alice joined #chan']


def test_remove_handler(printer):
    calls = []

    def handler(p, r):
        calls.append(r)

    printer.add_handler('Join', handler)
    assert printer.remove_handler('Join', lambda p, r: None) == 0
    assert printer.remove_handler('JOIN', handler) == 1
    assert printer.remove_handler('Join', handler) == 0
    assert printer.remove_handler('Part', handler) == 0
    printer.emit('Join', 'alice')
    assert not calls


def test_add_handler_unknown_event(printer):
    with pytest.raises(UnknownEvent):
        printer.add_handler('NOT_REAL_EVENT', lambda p, r: None)


def test_unknown_event_displayed_raw(printer, lines):
    calls = []
    printer.add_handler('all_events', lambda p, r: calls.append(r))
    assert printer.emit('NOT_REAL_EVENT', 'a', 'b') == 'NOT_REAL_EVENT: a b'
    assert lines == ['NOT_REAL_EVENT: a b']
    assert not calls


def test_default_output():
    assert Printer().emit('Beep') == ''


class TestHandlers:
    def test_handlers_same_priority(self):
        """
        Two handlers of the same priority should still compare.
        """
        handler1 = PrioritizedHandler(1, lambda: None)
        handler2 = PrioritizedHandler(1, lambda: 'other')
        assert not handler1 < handler2
        assert not handler2 < handler1


def test_eat_display_calls_later_handlers(printer, lines):
    calls = []
    printer.add_handler('Join', lambda p, r: EAT_DISPLAY, priority=1)
    printer.add_handler('Join', lambda p, r: calls.append(r), priority=2)
    assert printer.emit('Join', 'alice', '#chan', 'example.com') is None
    assert lines == []
    assert [request.args[0] for request in calls] == ['alice']


def test_eat_display_then_no_more(printer, lines):
    calls = []
    printer.add_handler('Join', lambda p, r: EAT_DISPLAY, priority=1)
    printer.add_handler('Join', lambda p, r: NO_MORE, priority=2)
    printer.add_handler('Join', lambda p, r: calls.append(r), priority=3)
    assert printer.emit('Join', 'alice') is None
    assert lines == []
    assert not calls
