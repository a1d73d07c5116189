"""
Sharp BASIC tools - config.py
Options from the command line and SHARPBASIC.INI

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import sys
import logging
import codecs
import configparser
from collections import deque

from .compat import USER_CONFIG_HOME
from .compat import split_pair
from .basic import VERSION


# options file lives in a directory per major.minor release
MAJOR_VERSION = '.'.join(VERSION.split('.')[:2])
USER_CONFIG_DIR = os.path.join(USER_CONFIG_HOME, 'sharpbasic-%s' % (MAJOR_VERSION,))
CONFIG_NAME = 'SHARPBASIC.INI'
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, CONFIG_NAME)

# options are read from this section of an options file
DEFAULT_SECTION = 'sharpbasic'

# log record layout
LOGGING_FORMAT = '[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt='%H:%M:%S')

# accepted spellings of boolean values
TRUES = ('YES', 'TRUE', 'ON', '1')
FALSES = ('NO', 'FALSE', 'OFF', '0')

# --line-ending values
LINE_ENDINGS = {
    'native': os.linesep,
    'crlf': '\r\n',
    'lf': '\n',
    'cr': '\r',
}

# input and output file
NUM_POSITIONAL = 2


def _is_codec(name):
    """Text encoding is known to Python."""
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


# single-letter flags: option name and the value they set
SHORT_ARGS = {
    'd': ('debug', 'True'),
    'h': ('help', 'True'),
    'v': ('version', 'True'),
    'l': ('convert', 'canonical'),
    'k': ('convert', 'compact'),
    't': ('convert', 'tokens'),
}

ARGUMENTS = {
    'convert': {
        'type': 'string', 'default': 'canonical',
        'choices': ('canonical', 'compact', 'tokens'),
    },
    'line-ending': {
        'type': 'string', 'default': 'native',
        'choices': tuple(LINE_ENDINGS),
    },
    'text-encoding': {'type': 'string', 'default': 'utf-8', 'check': _is_codec},
    'config': {'type': 'string', 'default': ''},
    'logfile': {'type': 'string', 'default': ''},
    'debug': {'type': 'bool', 'default': False},
    'help': {'type': 'bool', 'default': False},
    'version': {'type': 'bool', 'default': False},
}


##############################################################################
# logging

class Lumberjack(object):
    """Route log records to stderr or a log file once options are known."""

    def __init__(self):
        """Collect records in memory while options are being parsed."""
        logging.captureWarnings(True)
        self._backlog = io.StringIO()
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        root_logger.addHandler(self._handler(self._backlog))

    def _handler(self, stream):
        """Formatted handler on a stream."""
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LOGGING_FORMATTER)
        return handler

    def reset(self):
        """Detach all handlers from the root logger and return it."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Log to the given file, or stderr, replaying anything collected so far."""
        root_logger = self.reset()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        stream = sys.stderr
        if logfile:
            try:
                stream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
            except EnvironmentError as e:
                sys.stderr.write('Could not open log file `%s`: %s\n' % (logfile, e))
        stream.write(self._backlog.getvalue())
        root_logger.addHandler(self._handler(stream))


##############################################################################
# settings

class Settings(object):
    """Conversion options gathered from defaults, options files and the command line."""

    def __init__(self, arguments=None):
        """Parse the given arguments, or sys.argv if none."""
        if arguments:
            argv = list(arguments)
        else:
            argv = sys.argv[1:]
        lumberjack = Lumberjack()
        try:
            self._options = ArgumentParser().retrieve_options(argv)
        except BaseException:
            # don't swallow messages logged to the backlog
            lumberjack.reset()
            raise
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Value of an option; for unset options the default, or None if get_default is False."""
        value = self._options.get(name)
        if value is not None and value != '':
            return value
        if not get_default:
            return value
        if name in ARGUMENTS:
            return ARGUMENTS[name]['default']
        if name in range(NUM_POSITIONAL):
            return ''
        raise KeyError(name)

    @property
    def conv_params(self):
        """Keyword arguments for a conversion run."""
        return {
            'mode': self.get('convert'),
            'name_in': self.get(0),
            'name_out': self.get(1),
            'encoding': self.get('text-encoding'),
            'line_ending': LINE_ENDINGS[self.get('line-ending')],
        }

    @property
    def version(self):
        """Show version and exit."""
        return self.get('version')

    @property
    def help(self):
        """Show usage and exit."""
        return self.get('help')

    @property
    def debug(self):
        """Log at debug level."""
        return self.get('debug')


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Merge options files and command line into one options dictionary."""

    def retrieve_options(self, argv):
        """Options by name, positional arguments by index."""
        given = self._split_command_line(argv)
        options = self._read_options_files(given.pop('config', None))
        options.update(self._known_arguments(given))
        for name in options:
            options[name] = self._parse_type(name, options[name])
        return options

    def _split_command_line(self, argv):
        """Sort command-line words into named options and numbered positionals."""
        given = {}
        queue = deque(argv)
        positionals = []
        literal = False
        while queue:
            word = queue.popleft()
            if literal or word == '-' or not word.startswith('-'):
                positionals.append(_unquote(word))
            elif word == '--':
                # everything after is a file name
                literal = True
            elif word.startswith('--'):
                key, value = split_pair(word, split_by='=', quote='"\'')
                if key[2:]:
                    given[key[2:]] = value
            else:
                key, value = split_pair(word, split_by='=', quote='"\'')
                if not value and queue and not queue[0].startswith('-'):
                    value = queue.popleft()
                leftover = self._expand_flags(given, key[1:], value)
                if leftover:
                    queue.appendleft(leftover)
        given.update(enumerate(positionals))
        return given

    def _expand_flags(self, given, flags, value):
        """Set options for a cluster of flags; return the value if no flag takes it."""
        preset = None
        for i, flag in enumerate(flags):
            if flag not in SHORT_ARGS:
                logging.warning('Ignored unrecognised option `-%s`', flag)
                continue
            name, preset = SHORT_ARGS[flag]
            if i == len(flags) - 1:
                given[name] = preset or value or ''
            else:
                given[name] = preset or ''
        if preset and value:
            logging.debug('Value `%s` after option `-%s` taken as file name', value, flags)
            return value
        return None

    def _read_options_files(self, config_file):
        """Options from the user's SHARPBASIC.INI, updated from the file given with --config."""
        options = self._read_config_file(USER_CONFIG_PATH, required=False)
        if config_file:
            options.update(self._read_config_file(config_file))
        for name in [_name for _name in options if _name not in ARGUMENTS]:
            logging.warning(
                'Ignored unrecognised option `%s=%s` in configuration file', name, options.pop(name)
            )
        return options

    def _read_config_file(self, config_file, required=True):
        """Options in the [sharpbasic] section of an options file."""
        if not required and not os.path.exists(config_file):
            return {}
        parser = configparser.RawConfigParser(allow_no_value=True)
        try:
            # utf_8_sig skips a byte order mark
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                parser.read_file(WhitespaceStripper(f))
        except (configparser.Error, EnvironmentError) as e:
            logging.warning('Configuration file `%s` not loaded: %s', config_file, e)
            return {}
        if not parser.has_section(DEFAULT_SECTION):
            return {}
        # a bare key switches the option on
        return {
            _name: '' if _value is None else _value
            for _name, _value in parser.items(DEFAULT_SECTION)
        }

    def _known_arguments(self, given):
        """Drop and log command-line options and surplus file names we don't know."""
        known = {}
        for name, value in given.items():
            if name in ARGUMENTS or name in range(NUM_POSITIONAL):
                known[name] = value
            elif isinstance(name, int):
                logging.warning('Ignored surplus file name `%s`', value)
            elif value:
                logging.warning('Ignored unrecognised command-line argument `%s=%s`', name, value)
            else:
                logging.warning('Ignored unrecognised command-line argument `%s`', name)
        return known

    ##########################################################################
    # type conversions

    def _parse_type(self, name, value):
        """Convert and validate a string option value; rejected values become ''."""
        spec = ARGUMENTS.get(name)
        if spec is None:
            return value
        if spec['type'] == 'bool':
            return self._to_bool(name, value)
        if 'choices' in spec:
            value = value.lower()
            if value and value not in spec['choices']:
                logging.warning(
                    'Value `%s=%s` ignored; should be one of `%s`',
                    name, value, '`, `'.join(spec['choices'])
                )
                return ''
        if 'check' in spec and value and not spec['check'](value):
            logging.warning('Value `%s=%s` ignored; not recognised', name, value)
            return ''
        return value

    def _to_bool(self, name, value):
        """Boolean option value; a bare option is True."""
        if value.upper() in FALSES:
            return False
        if value and value.upper() not in TRUES:
            logging.warning('Boolean option `%s=%s` taken as `%s=True`', name, value, name)
        return True


def _unquote(word):
    """Strip a pair of enclosing quotes."""
    for quote in '"\'':
        if len(word) > 1 and word.startswith(quote) and word.endswith(quote):
            return word[1:-1]
    return word


class WhitespaceStripper(object):
    """Line source for configparser that drops indentation."""

    def __init__(self, file):
        self._file = file

    def readline(self):
        """Next line without leading blanks."""
        return self._file.readline().lstrip(' \t')

    def __iter__(self):
        return self

    def __next__(self):
        line = self.readline()
        if not line:
            raise StopIteration()
        return line
