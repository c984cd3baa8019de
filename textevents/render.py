"""
Bind parsed template nodes to event arguments.
"""

from .template import Literal, Placeholder, Style


def _literal(node, args):
    return node.text


def _placeholder(node, args):
    # arguments are opaque text; they are never parsed for markers
    if 0 < node.index <= len(args):
        return args[node.index - 1]
    return ''


def _style(node, args):
    return node.code


_renderers = {
    Literal: _literal,
    Placeholder: _placeholder,
    Style: _style,
}


def render(nodes, args):
    r"""
    Render the nodes of a template with args.

    >>> from textevents.template import parse
    >>> render(parse('%1 has joined %2'), ['alice', '#chan'])
    'alice has joined #chan'

    Placeholders out of range render as nothing.

    >>> render(parse('[%3]'), ['alice', '#chan'])
    '[]'

    Style directives are passed through as control codes.

    >>> render(parse('%C24*%O%T%1'), ['bob'])
    '\x0324*\x0f\tbob'
    """
    args = tuple(args)
    return ''.join(_renderers[type(node)](node, args) for node in nodes)
