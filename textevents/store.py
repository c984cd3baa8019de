import logging
import threading

from . import catalog
from . import legacy
from .dict import EventDict
from .template import Template

log = logging.getLogger(__name__)


class TemplateStore:
    """
    The active template for each text event: the user's override if one
    was set, otherwise the default.

    >>> store = TemplateStore({'Join': '%1 joined'})
    >>> store.get_active('join')
    '%1 joined'
    >>> store.set_override('JOIN', '--> %1')
    >>> store.get_active('Join')
    '--> %1'
    >>> store.reset('Join')
    >>> store.get_active('Join')
    '%1 joined'

    Reads take no lock. Writers are serialized and publish a new map of
    overrides, so a render running during a write sees either the old
    template or the new one.
    """

    def __init__(self, defaults):
        self._defaults = EventDict(
            (name, Template(raw)) for name, raw in dict(defaults).items()
        )
        self._overrides = EventDict()
        self.mutex = threading.RLock()

    @classmethod
    def from_catalog(cls, defaults=None):
        """
        Construct a store from default templates in HexChat syntax,
        by default those shipped with the catalog.
        """
        if defaults is None:
            defaults = catalog.defaults
        return cls(
            (name, legacy.translate(raw)) for name, raw in dict(defaults).items()
        )

    def _check(self, event):
        if event not in self._defaults:
            raise catalog.UnknownEvent(event)

    def get_default(self, event):
        try:
            return self._defaults[event]
        except KeyError:
            raise catalog.UnknownEvent(event) from None

    def get_active(self, event):
        overrides = self._overrides
        if event in overrides:
            return overrides[event]
        return self.get_default(event)

    def set_override(self, event, raw):
        """
        Replace the active template for event. The template is not
        checked; markers it gets wrong render as text.
        """
        self.update({event: raw})

    def update(self, overrides):
        """
        Set several overrides at once.

        >>> store = TemplateStore({'Join': '%1 joined', 'Part': '%1 left'})
        >>> store.update({'join': 'J %1', 'Quit': 'Q %1'})
        Traceback (most recent call last):
        ...
        textevents.catalog.UnknownEvent: Quit

        Nothing is applied when any event is unknown.

        >>> store.get_active('Join')
        '%1 joined'
        """
        overrides = dict(overrides)
        for event in overrides:
            self._check(event)
        with self.mutex:
            replacement = EventDict(self._overrides)
            for event, raw in overrides.items():
                log.debug("Override template for %s: %r", event, raw)
                replacement[self._defaults.matching_key_for(event)] = Template(raw)
            self._overrides = replacement

    def reset(self, event):
        "Restore the default template for event"
        self._check(event)
        with self.mutex:
            replacement = EventDict(self._overrides)
            if replacement.pop(event, None) is not None:
                log.debug("Reset template for %s", event)
            self._overrides = replacement

    def reset_all(self):
        with self.mutex:
            self._overrides = EventDict()

    def overrides(self):
        """
        A snapshot of the overrides, keyed by the display name of
        each event, for the settings to persist.

        >>> store = TemplateStore({'Channel Action': '* %1 %2'})
        >>> store.set_override('CHANNEL_ACTION', '%1 does %2')
        >>> store.overrides()
        {'Channel Action': '%1 does %2'}
        """
        return {str(event): str(raw) for event, raw in self._overrides.items()}
