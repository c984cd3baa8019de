"""
Emit text events through prioritized handlers before display.

Handlers are registered for an event (or for ``all_events``) and are
called in priority order with the printer and the RenderRequest.  A
handler returning NO_MORE stops any further handlers; one returning EAT
also keeps the event from being displayed.  EAT_DISPLAY keeps the event
from being displayed but lets the remaining handlers run.

>>> lines = []
>>> printer = Printer(output=lines.append)
>>> printer.emit('Join', 'alice', '#chan', 'example.com', plain=True)
'*\\talice (example.com) has joined'
>>> lines
['*\\talice (example.com) has joined']
"""

import bisect
import collections
import logging
import threading

from . import catalog
from .dict import EventDict
from .formatter import Formatter, RenderRequest

log = logging.getLogger(__name__)

NO_MORE = "NO MORE"
"handler result: call no further handlers"

EAT = "EAT"
"handler result: call no further handlers and do not display the event"

EAT_DISPLAY = "EAT DISPLAY"
"handler result: do not display the event, but call further handlers"


class PrioritizedHandler(collections.namedtuple('Base', ('priority', 'callback'))):
    def __lt__(self, other):
        "when sorting prioritized handlers, only use the priority"
        return self.priority < other.priority


class Printer:
    """
    Dispatches emitted text events to handlers and displays the
    formatted line through output.

    The methods of this class are thread-safe; the handler table is
    guarded by a mutex.
    """

    formatter_class = Formatter

    def __do_nothing(*args, **kwargs):
        pass

    def __init__(self, formatter=None, output=__do_nothing):
        """
        formatter: the Formatter to use (by default a new instance of
        formatter_class).

        output: callback invoked with each line to display.
        """
        if formatter is None:
            formatter = self.formatter_class()
        self.formatter = formatter
        self._output = output
        self.handlers = EventDict()
        self.mutex = threading.RLock()

    def add_handler(self, event, handler, priority=0):
        """
        Adds a handler function for a text event.

        Arguments:

            event -- Event name, or "all_events".

            handler -- Callback function taking 'printer' and 'request'
                       parameters.

            priority -- A number (the lower number, the higher priority).
        """
        if event != 'all_events':
            self.formatter.catalog.lookup(event)
        handler = PrioritizedHandler(priority, handler)
        with self.mutex:
            event_handlers = self.handlers.setdefault(event, [])
            bisect.insort(event_handlers, handler)

    def remove_handler(self, event, handler):
        """
        Removes a handler function.

        Returns 1 on success, otherwise 0.
        """
        with self.mutex:
            if event not in self.handlers:
                return 0
            matching = [h for h in self.handlers[event] if handler == h.callback]
            for h in matching:
                self.handlers[event].remove(h)
        return 1 if matching else 0

    def emit(self, event, *args, plain=False):
        """
        Emit a text event with args.

        Returns the line displayed, or None if a handler ate the event.
        Events missing from the catalog are displayed raw, without
        calling handlers.
        """
        try:
            request = self.formatter.request(event, args)
        except catalog.UnknownEvent:
            log.debug("Unknown text event %r, displaying raw", event)
            line = self.formatter.raw(event, args)
            self._output(line)
            return line

        if self._handle(request) in (EAT, EAT_DISPLAY):
            log.debug("Text event %s eaten", request.event)
            return None

        line = self.formatter.format_request(request, plain=plain)
        self._output(line)
        return line

    def _handle(self, request):
        with self.mutex:
            matching_handlers = sorted(
                self.handlers.get("all_events", [])
                + self.handlers.get(request.event, [])
            )
        hidden = False
        for handler in matching_handlers:
            result = handler.callback(self, request)
            if result == EAT:
                return result
            if result == EAT_DISPLAY:
                hidden = True
            if result == NO_MORE:
                break
        return EAT_DISPLAY if hidden else None
