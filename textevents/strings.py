import re

from jaraco.text import FoldedCase


_separators = re.compile(r'[\W_]+')


class EventName(FoldedCase):
    """
    A version of FoldedCase for text event names, which also disregards
    the separators between words.

    >>> EventName('Channel Action') == EventName('CHANNEL_ACTION')
    True

    >>> EventName('WhoIs Channel/Oper Line') == EventName('whois-channel-oper-line')
    True

    >>> EventName('You Join') == EventName('Join')
    False

    >>> EventName('Channel Half-Operator').lower()
    'channelhalfoperator'

    >>> EventName().lower()
    ''
    """

    def lower(self):
        return _separators.sub('', super().lower())

    def casefold(self):
        """
        Ensure cached superclass value doesn't supersede.

        >>> ob = EventName('Part with Reason')
        >>> ob.casefold()
        'partwithreason'
        >>> ob.casefold()
        'partwithreason'
        """
        return _separators.sub('', super().casefold())

    def __setattr__(self, key, val):
        if key == 'casefold':
            return
        return super().__setattr__(key, val)


def identifier(name):
    """
    Return the enumerated key for an event name.

    >>> identifier('WhoIs Channel/Oper Line')
    'WHOIS_CHANNEL_OPER_LINE'
    >>> identifier('Channel Half-Operator')
    'CHANNEL_HALF_OPERATOR'
    >>> identifier('DCC CHAT Abort')
    'DCC_CHAT_ABORT'
    """
    return _separators.sub('_', name).strip('_').upper()
