"""
Command line access to the text event catalog and formatter.

    textevents list
    textevents help "Channel Message"
    textevents check Join '%1 joined %5'
    textevents format --strip Kick alice bob '#chan' 'be nice'
"""

import argparse
import logging
import sys

import jaraco.logging

from . import _get_version
from . import catalog
from . import legacy
from . import style
from .formatter import Formatter
from .template import Template

log = logging.getLogger(__name__)


def list_events(formatter, args):
    for spec in formatter.catalog:
        print('{spec.id:<32} {spec.arity}  {spec.name}'.format(spec=spec))


def show_help(formatter, args):
    spec = formatter.catalog.lookup(args.event)
    print('{spec.name} ({spec.id})'.format(spec=spec))
    print('template: {}'.format(formatter.store.get_active(spec)))
    for placeholder, description in spec.help():
        print('  {:<4} {}'.format(placeholder, description))


def check_template(formatter, args):
    spec = formatter.catalog.lookup(args.event)
    raw = legacy.translate(args.template) if args.hexchat else args.template
    unbound = Template(raw).unbound(spec.arity)
    for index in unbound:
        print(
            '%{index} is beyond the {spec.arity} arguments of {spec}'.format(
                index=index, spec=spec
            )
        )
    return 1 if unbound else 0


def format_event(formatter, args):
    if args.pevents:
        with open(args.pevents, encoding='utf-8') as lines:
            overrides = dict(legacy.read_pevents(lines))
        log.debug("Read %d templates from %s", len(overrides), args.pevents)
        formatter.store.update(
            {
                name: template
                for name, template in overrides.items()
                if name in formatter.catalog
            }
        )
    if args.template is not None:
        raw = legacy.translate(args.template) if args.hexchat else args.template
        formatter.store.set_override(args.event, raw)
    line = formatter.format(args.event, args.args, plain=args.plain)
    if args.strip:
        line = style.strip(line)
    print(line)


def get_args(argv=None):
    parser = argparse.ArgumentParser(prog='textevents')
    parser.add_argument(
        '--version', action='version', version='%(prog)s ' + _get_version()
    )
    jaraco.logging.add_arguments(parser)
    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('list', help="list the text events").set_defaults(
        func=list_events
    )

    help_cmd = commands.add_parser('help', help="describe an event's arguments")
    help_cmd.add_argument('event')
    help_cmd.set_defaults(func=show_help)

    check = commands.add_parser('check', help="check a template for an event")
    check.add_argument('event')
    check.add_argument('template')
    check.add_argument('--hexchat', action='store_true', help="HexChat syntax")
    check.set_defaults(func=check_template)

    fmt = commands.add_parser('format', help="format an event")
    fmt.add_argument('event')
    fmt.add_argument('args', nargs='*')
    fmt.add_argument('-t', '--template', help="template to use for the event")
    fmt.add_argument('--hexchat', action='store_true', help="HexChat syntax")
    fmt.add_argument('--pevents', help="HexChat pevents.conf to load")
    fmt.add_argument(
        '--plain', action='store_true', help="leave out colors and attributes"
    )
    fmt.add_argument(
        '--strip', action='store_true', help="strip control codes from output"
    )
    fmt.set_defaults(func=format_event)

    return parser.parse_args(argv)


def main(argv=None):
    args = get_args(argv)
    jaraco.logging.setup(args)
    formatter = Formatter()
    try:
        return args.func(formatter, args)
    except catalog.UnknownEvent:
        print('Unknown text event:', sys.exc_info()[1])
        raise SystemExit(1)
