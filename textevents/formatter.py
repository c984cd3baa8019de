"""
Format text events for display.

>>> formatter = Formatter()
>>> formatter.format('Change Nick', ['alice', 'alicia'], plain=True)
'*\\talice is now known as alicia'

Events missing from the catalog are reported to the caller, which may
fall back to a raw rendering.

>>> formatter.format('Not Real Event', [])
Traceback (most recent call last):
...
textevents.catalog.UnknownEvent: Not Real Event
>>> formatter.raw('Not Real Event', ['a', 'b'])
'Not Real Event: a b'
"""

import collections
import logging

from more_itertools import padded, take

from . import catalog as catalog_
from .render import render
from .store import TemplateStore

log = logging.getLogger(__name__)


class RenderRequest(collections.namedtuple('RenderRequest', 'event args')):
    """
    A text event about to be formatted: its EventSpec and the argument
    strings.

    >>> print(RenderRequest(catalog_.EventSpec('Join'), ('alice', '#chan')))
    event: Join, args: ('alice', '#chan')
    """

    def __str__(self):
        return "event: {event}, args: {args}".format(**self._asdict())


def _text(arg):
    return '' if arg is None else str(arg)


class Formatter:
    """
    Format text events through the active template for each event.

    catalog: the Catalog of events (by default the HexChat text events).

    store: the TemplateStore holding the defaults and the user's
    overrides (by default a new store with the catalog's defaults).
    """

    def __init__(self, catalog=None, store=None):
        if catalog is None:
            catalog = catalog_.default
        if store is None:
            store = TemplateStore.from_catalog()
        self.catalog = catalog
        self.store = store

    def request(self, event, args=()):
        """
        Build the RenderRequest for event with args fitted to its arity.
        Missing arguments are blank, extra arguments are dropped.

        >>> Formatter().request('Join', ['alice']).args
        ('alice', '', '', '')
        """
        spec = self.catalog.lookup(event)
        args = list(map(_text, args))
        if len(args) != spec.arity:
            log.debug("%s takes %d arguments, got %d", spec, spec.arity, len(args))
        return RenderRequest(spec, tuple(take(spec.arity, padded(args, ''))))

    def format(self, event, args=(), plain=False):
        """
        Return the line of text for event with args.

        With plain, colors and attributes are left out.
        """
        return self.format_request(self.request(event, args), plain=plain)

    def format_request(self, request, plain=False):
        template = self.store.get_active(request.event)
        nodes = template.plain_nodes() if plain else template.nodes()
        return render(nodes, request.args)

    @staticmethod
    def raw(event, args=()):
        "The generic rendering for an event with no catalog entry"
        return ' '.join([str(event) + ':'] + list(map(_text, args)))
