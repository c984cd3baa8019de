"""
Read templates written in HexChat's text event syntax.

HexChat marks arguments with ``$1`` .. ``$9``, the column separator with
``$t`` and arbitrary characters with ``$a`` and a three digit decimal
code.  Its style markers (``%C``, ``%B`` and so on) are the same as ours,
but ``%`` followed by a digit is plain text there.
"""

import re

_legacy_regexp = re.compile(
    r'\$(?P<index>\d)'
    r'|\$t'
    r'|\$a(?P<code>\d{3})'
    r'|%(?P<style>[CBUIRHO%])'
    r'|%'
)


def _escape(text):
    return text.replace('%', '%%')


def _translate_marker(match):
    if match.group('index'):
        follower = match.string[match.end() : match.end() + 1]
        pad = '0' if follower.isdigit() else ''
        return '%' + pad + match.group('index')
    if match.group('code'):
        return _escape(chr(int(match.group('code'))))
    if match.group('style'):
        return match.group(0)
    if match.group(0) == '$t':
        return '%T'
    return '%%'


def translate(raw):
    """
    Translate a HexChat template to the native syntax.

    >>> translate('%C22*%O$t%C26$1%O sets ban on %C18$2%O')
    '%C22*%O%T%C26%1%O sets ban on %C18%2%O'

    HexChat reads only one digit after ``$``.

    >>> translate('$12')
    '%012'

    ``%`` is only a marker when a style letter follows.

    >>> translate('100% of $1 (%5)')
    '100%% of %1 (%%5)'
    >>> translate('%%')
    '%%'

    Character codes become the character itself.

    >>> translate('a$a010b')
    'a\\nb'
    >>> translate('$a037')
    '%%'

    Other uses of ``$`` are plain text.

    >>> translate('$x $')
    '$x $'
    """
    return _legacy_regexp.sub(_translate_marker, raw)


def read_pevents(lines):
    """
    Generate (event name, template) pairs from the lines of a HexChat
    ``pevents.conf``, with the templates translated to the native syntax.

    >>> conf = [
    ...     'event_name=Join\\n',
    ...     'event_text=$1 joined $2\\n',
    ...     '\\n',
    ...     'event_name=Part\\n',
    ...     'event_text=$1 left\\n',
    ... ]
    >>> list(read_pevents(conf))
    [('Join', '%1 joined %2'), ('Part', '%1 left')]

    A name without text is skipped.

    >>> list(read_pevents(['event_name=Join', 'event_name=Part']))
    []
    """
    name = None
    for line in lines:
        key, sep, value = line.rstrip('\r\n').partition('=')
        if key == 'event_name':
            name = value
        elif key == 'event_text' and name is not None:
            yield name, translate(value)
            name = None
