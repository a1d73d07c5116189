"""
Sharp BASIC tools - compat
Platform locations, entry-point guard and option splitting

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import re
import sys
from contextlib import contextmanager

from .base import USER_CONFIG_HOME


def _silence(stream):
    """Point a standard stream's file descriptor at the null device."""
    try:
        os.dup2(os.open(os.devnull, os.O_WRONLY), stream.fileno())
    except (EnvironmentError, ValueError, AttributeError):
        pass


@contextmanager
def script_entry_point_guard():
    """Run a console entry point; exit quietly on Ctrl-C or a closed pipe."""
    # sharpbasic -t LONG.BAS | head closes stdout under our feet
    failed = True
    try:
        yield
        failed = False
    except KeyboardInterrupt:
        failed = False
    except BrokenPipeError:
        pass
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (EnvironmentError, ValueError):
            failed = True
    if failed:
        # interpreter shutdown flushes again
        _silence(sys.stdout)
        _silence(sys.stderr)
    sys.exit(failed)


def _build_split_regexp(split_by, quote):
    """Regular expression for an unquoted run up to the separator."""
    quote = re.escape(quote or '')
    separator = r'\s' if split_by is None else re.escape(split_by)
    pattern = r'(?:[^{%s}{%s}]|[{%s}](?:\\.|[^{%s}])*[{%s}])+'
    return pattern % (separator, quote, quote, quote, quote)

def split_pair(line, split_by=None, quote=None):
    """
    Split at the first separator outside quotes; quotes are kept in the result.
    Returns a pair; ('', '') if the line holds nothing but separators.
    """
    match = re.search(_build_split_regexp(split_by, quote), line)
    if not match:
        return '', ''
    return match.group(), line[match.end()+1:]
