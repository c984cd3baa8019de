"""
The catalog of text events.

Each text event names a category of notable occurrence (a join, a kick, a
WHOIS reply line, a DCC failure) and documents the ordered arguments a
template for that event may reference.  The catalog shipped with this
package is loaded from ``events.txt`` and follows HexChat's list of text
events.
"""

import types
from importlib.resources import files

from jaraco.text import clean, drop_comment, lines_from

from . import strings
from .dict import EventDict


class TextEventError(Exception):
    "A text event exception"


class UnknownEvent(TextEventError, LookupError):
    "No text event is registered by that name"


def _untranslated(text):
    return text


class EventSpec(str):
    """
    A text event and the descriptions of its arguments.

    >>> kick = EventSpec('Kick', ['The kicker', 'The person being kicked'])
    >>> kick
    'Kick'
    >>> kick.id
    'KICK'
    >>> kick.arity
    2
    >>> kick.arg_names
    ('The kicker', 'The person being kicked')
    """

    def __new__(cls, name, arg_names=()):
        return super().__new__(cls, name)

    def __init__(self, name, arg_names=()):
        self._arg_names = tuple(arg_names)

    @property
    def arg_names(self):
        return self._arg_names

    @property
    def name(self):
        return str(self)

    @property
    def id(self):
        return strings.identifier(self)

    @property
    def arity(self):
        return len(self.arg_names)

    def help(self, translate=_untranslated):
        """
        Pair each placeholder with the description of the argument it
        stands for, as shown to users editing a template.

        Descriptions are lookup keys for a translation table; pass
        ``translate`` to resolve them.

        >>> EventSpec('Change Nick', ['Old nickname', 'New nickname']).help()
        [('%1', 'Old nickname'), ('%2', 'New nickname')]
        >>> EventSpec('Beep').help()
        []
        >>> EventSpec('Motd', ['Text']).help(str.upper)
        [('%1', 'TEXT')]
        """
        return [
            ('%{}'.format(index), translate(arg_name))
            for index, arg_name in enumerate(self.arg_names, 1)
        ]


class Catalog:
    """
    A read-only registry of text events.

    >>> catalog = Catalog([EventSpec('Join', ['Nick', 'Channel'])])
    >>> catalog.lookup('JOIN').arg_names
    ('Nick', 'Channel')
    >>> 'join' in catalog
    True
    >>> catalog.lookup('Not Real')
    Traceback (most recent call last):
    ...
    textevents.catalog.UnknownEvent: Not Real
    """

    def __init__(self, specs=()):
        self._specs = EventDict((spec, spec) for spec in specs)

    def lookup(self, event):
        """
        Return the EventSpec registered for event, which may be the
        display name or the enumerated key in any case.
        """
        try:
            return self._specs[event]
        except KeyError:
            raise UnknownEvent(event) from None

    __getitem__ = lookup

    def __contains__(self, event):
        return event in self._specs

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self):
        return len(self._specs)


def _parse_entry(line):
    name, default, *arg_names = line.split('|')
    return EventSpec(name, arg_names), default


_entries = list(
    map(
        _parse_entry,
        map(drop_comment, clean(lines_from(files(__package__) / 'events.txt'))),
    )
)


default = Catalog(spec for spec, _ in _entries)
"The catalog of HexChat text events"

defaults = types.MappingProxyType(dict(_entries))
"HexChat's default template for each event, in HexChat syntax"
