from jaraco.collections import KeyTransformingDict

from . import strings


class EventDict(KeyTransformingDict):
    """
    A dictionary keyed by text event names, where the keys match
    regardless of case or word separators.

    >>> d = EventDict({'Channel Action': 'act'}, Join='foo')

    The dict maintains the original spelling:

    >>> 'Channel Action' in ''.join(d.keys())
    True

    But the keys can be referenced by any spelling of the name

    >>> d['CHANNEL_ACTION'] == 'act'
    True

    >>> d['channel action'] == 'act'
    True

    >>> 'JOIN' in d
    True

    This should work for operations like delete and pop as well.

    >>> d.pop('join') == 'foo'
    True
    >>> del d['Channel-Action']
    >>> len(d)
    0
    """

    @staticmethod
    def transform_key(key):
        if isinstance(key, str):
            key = strings.EventName(key)
        return key
