"""
Parse text event templates.

A template is free text in which ``%`` introduces a marker:

``%1`` .. ``%99``
    the argument at that (1-based) position; ``%01`` is ``%1``, which
    lets a digit follow a placeholder
``%C``
    a color, optionally followed by ``fg`` or ``fg,bg`` (1-2 digits each)
``%B %U %I %R %H``
    bold, underline, italic, reverse and hidden text
``%O``
    reset all styles
``%T``
    the separator between the nick column and the text column
``%%``
    a literal percent sign

A ``%`` followed by anything else is not a marker and is kept as it is.
Parsing never fails.
"""

import collections
import logging
import re

import jaraco.functools

from . import style

log = logging.getLogger(__name__)


Literal = collections.namedtuple('Literal', 'text')
Placeholder = collections.namedtuple('Placeholder', 'index')
Style = collections.namedtuple('Style', 'kind code')


_marker_regexp = re.compile(
    '%(?:'
    r'(?P<index>\d{1,2})'
    r'|C(?P<color>\d{1,2}(?:,\d{1,2})?)?'
    r'|(?P<attribute>[' + ''.join(style.attribute_codes) + '])'
    r'|(?P<separator>T)'
    r'|(?P<percent>%)'
    ')'
)


def _marker_node(match):
    if match.group('index'):
        return Placeholder(int(match.group('index')))
    if match.group('attribute'):
        return Style('attribute', style.attribute_codes[match.group('attribute')])
    if match.group('separator'):
        return Style('separator', style.SEPARATOR)
    if match.group('percent'):
        return Literal('%')
    return Style('color', style.color(match.group('color') or ''))


def _tokens(raw):
    pos = 0
    for match in _marker_regexp.finditer(raw):
        yield Literal(raw[pos : match.start()])
        yield _marker_node(match)
        pos = match.end()
    yield Literal(raw[pos:])


def _merge_literals(nodes):
    text = ''
    for node in nodes:
        if isinstance(node, Literal):
            text += node.text
            continue
        if text:
            yield Literal(text)
            text = ''
        yield node
    if text:
        yield Literal(text)


def parse(raw):
    """
    Parse raw into a tuple of Literal, Placeholder and Style nodes.

    >>> parse('%1 has joined %2')
    (Placeholder(index=1), Literal(text=' has joined '), Placeholder(index=2))

    >>> parse('%C18*%O%T%B%1')
    (Style(kind='color', code='\\x0318'), Literal(text='*'), Style(kind='attribute', code='\\x0f'), Style(kind='separator', code='\\t'), Style(kind='attribute', code='\\x02'), Placeholder(index=1))

    Placeholders take at most two digits.

    >>> parse('%123')
    (Placeholder(index=12), Literal(text='3'))
    >>> parse('%011')
    (Placeholder(index=1), Literal(text='1'))

    Malformed markers are literal text.

    >>> parse('100% of %Z, %%1 and %')
    (Literal(text='100% of %Z, %1 and %'),)

    >>> parse('')
    ()
    """
    if '%' in _marker_regexp.sub('', raw):
        log.debug("Template %r has unrecognized markers", raw)
    return tuple(_merge_literals(_tokens(raw)))


class Template(str):
    """
    A template as entered by the user or shipped as a default.

    >>> tmpl = Template('%C22*%O%T%1 kicked %2 (%5)')
    >>> tmpl.raw
    '%C22*%O%T%1 kicked %2 (%5)'
    >>> tmpl.nodes()[:2]
    (Style(kind='color', code='\\x0322'), Literal(text='*'))

    The parse is computed once per template.

    >>> tmpl.nodes() is tmpl.nodes()
    True
    """

    @property
    def raw(self):
        return str(self)

    @jaraco.functools.method_cache
    def nodes(self):
        return parse(self)

    @jaraco.functools.method_cache
    def plain_nodes(self):
        """
        The nodes without colors or attributes, for contexts where styles
        cannot be displayed. The column separator is kept.

        >>> Template('%C18%B%1%O%T%2').plain_nodes()
        (Placeholder(index=1), Style(kind='separator', code='\\t'), Placeholder(index=2))
        """
        return tuple(
            _merge_literals(
                node
                for node in self.nodes()
                if not isinstance(node, Style) or node.kind == 'separator'
            )
        )

    def references(self):
        """
        The placeholder indices this template uses.

        >>> sorted(Template('%2 and %1 and %2%%3').references())
        [1, 2]
        """
        return {node.index for node in self.nodes() if isinstance(node, Placeholder)}

    def unbound(self, arity):
        """
        The placeholder indices that cannot be bound for an event of
        the given arity.

        >>> Template('%1 %3 %0').unbound(2)
        [0, 3]
        """
        return sorted(index for index in self.references() if not 0 < index <= arity)
