"""
Sharp BASIC tools - main.py
Command-line front end to the tokeniser and reformatters

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging
from importlib import resources

from . import config
from .basic import Converter
from .basic import NAME, VERSION, COPYRIGHT
from .compat import script_entry_point_guard


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    # get settings and prepare logging
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        # convert and exit
        if not _convert(**settings.conv_params):
            sys.exit(1)


def _show_usage():
    """Show usage description."""
    usage = resources.files(__package__ + '.data').joinpath('USAGE.txt').read_text(
        encoding='utf-8', errors='replace'
    )
    sys.stdout.write(usage)

def _show_version():
    """Show version and copyright."""
    sys.stdout.write('%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))

def _convert(mode, name_in, name_out, encoding, line_ending):
    """Perform file format conversion; return False on failure."""
    try:
        text = _read_input(name_in, encoding)
    except (EnvironmentError, UnicodeError) as e:
        logging.error('Could not read `%s`: %s', name_in or '<stdin>', e)
        return False
    converter = Converter(line_ending=line_ending)
    if mode == 'tokens':
        output = _list_tokens(converter.tokenise(text))
    else:
        output = converter.convert(text, mode)
    logging.debug('Converted %d characters to %d in %s mode', len(text), len(output), mode)
    try:
        _write_output(name_out, output, encoding)
    except (EnvironmentError, UnicodeError) as e:
        logging.error('Could not write `%s`: %s', name_out or '<stdout>', e)
        return False
    return True

def _list_tokens(stream):
    """One line per token: kind, span and original text."""
    return ''.join(
        '%-16s [%d,%d) %r\n' % (_tok.kind.name, _tok.start, _tok.end, stream.original_text(_tok))
        for _tok in stream
    )

def _read_input(name_in, encoding):
    """Read program text from file or stdin, keeping line endings."""
    if not name_in or name_in == '-':
        instream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, newline='')
        text = instream.read()
        # don't close stdin when the wrapper goes
        instream.detach()
        return text
    with io.open(name_in, 'r', encoding=encoding, newline='') as infile:
        return infile.read()

def _write_output(name_out, output, encoding):
    """Write program text to file or stdout, keeping line endings."""
    if not name_out or name_out == '-':
        outstream = io.TextIOWrapper(sys.stdout.buffer, encoding=encoding, newline='')
        outstream.write(output)
        outstream.flush()
        outstream.detach()
        return
    with io.open(name_out, 'w', encoding=encoding, newline='') as outfile:
        outfile.write(output)
