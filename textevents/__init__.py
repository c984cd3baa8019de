import contextlib
from importlib import metadata


def _get_version():
    with contextlib.suppress(Exception):
        return metadata.version('irc-textevents')
    return 'unknown'
