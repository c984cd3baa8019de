"""
mIRC style control codes, as emitted for template style directives and
understood by IRC display surfaces.
"""

import re

BOLD = '\x02'
COLOR = '\x03'
HIDDEN = '\x08'
RESET = '\x0f'
REVERSE = '\x16'
ITALIC = '\x1d'
UNDERLINE = '\x1f'
SEPARATOR = '\t'

attribute_codes = {
    'B': BOLD,
    'H': HIDDEN,
    'I': ITALIC,
    'O': RESET,
    'R': REVERSE,
    'U': UNDERLINE,
}
"attribute directive letters and the codes they stand for"

color_regexp = re.compile(COLOR + r'(\d{1,2}(,\d{1,2})?)?')
attribute_regexp = re.compile('[' + ''.join(attribute_codes.values()) + ']')


def color(spec=''):
    r"""
    Return the control sequence for a color directive.

    >>> color('18')
    '\x0318'
    >>> color()
    '\x03'
    """
    return COLOR + spec


def strip(text, colors=True, attributes=True):
    r"""
    Remove mIRC colors and/or text attributes from text.

    >>> strip('\x0318alice\x0f has joined \x02#chan\x02')
    'alice has joined #chan'

    Colors and attributes may each be kept.

    >>> strip('\x0304,01red\x03 \x1fline\x1f', colors=False)
    '\x0304,01red\x03 line'
    >>> strip('\x0304,01red\x03 \x1fline\x1f', attributes=False)
    'red \x1fline\x1f'

    The column separator is text, not style.

    >>> strip('\x0318*\x0f\tNow talking')
    '*\tNow talking'
    """
    if colors:
        text = color_regexp.sub('', text)
    if attributes:
        text = attribute_regexp.sub('', text)
    return text
