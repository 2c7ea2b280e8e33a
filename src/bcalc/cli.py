from os import path
from argparse import ArgumentParser
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from . import config
from .util import BCalcError
from .parser import evaluate


logger = logging.getLogger(__name__)


def fragments(lines, size):
    '''
    Cut lines into pieces that fit a size character buffer.

    One character of the buffer is reserved for the terminator, as with
    fgets(), so pieces are at most size - 1 long. A line that fits is yielded
    whole, newline and all.
    '''
    for line in lines:
        for start in range(0, len(line), size - 1):
            yield line[start:start + size - 1]


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=history,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                # Same shape as a line read off a pipe.
                yield session.prompt() + '\n'
        except EOFError:
            return


class CLI:
    '''
    Command line interface to bcalc.
    '''

    DEFAULT_PROMPT = config.PROMPT
    HISTORY_FILE = config.HISTORY_FILE
    BANNER = 'Press Ctrl+C to quit...'
    MATHLIB_BANNER = 'Mathlib Initialized...'
    OPTIONS = [
        ('-h', '--help', 'help',
         'print this usage and exit'),
        ('-l', '--mathlib', 'mathlib',
         'use the predefined math routines'),
        ('-q', '--quiet', 'quiet',
         "don't print initial banner"),
        ('-v', '--version', 'version',
         'print version information and exit'),
    ]
    # Spelled out exactly; no bundling (-qh), no values (--quiet=1).
    OPTION_STRINGS = {option
                      for short_, long_, _, _ in OPTIONS
                      for option in (short_, long_)}

    def __init__(self, *, on_error=None, max_line=None, prompt=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments. Keyword arguments
        override the defaults from bcalc.config.

        :param on_error: 'exit' to stop at the first bad line, 'continue' to
                         report it and carry on.
        :param max_line: Line buffer size, terminator included.
        :param prompt: Prompt for interactive sessions.
        '''
        self.on_error = on_error or config.ON_ERROR
        if self.on_error not in config.ON_ERROR_POLICIES:
            raise ValueError('Unknown error policy {}'.format(
                repr(self.on_error)))
        max_line = max_line or config.MAX_LINE
        try:
            self.max_line = int(max_line)
        except ValueError:
            raise ValueError('Line buffer size {} is not a number'.format(
                repr(max_line))) from None
        if self.max_line < 2:
            raise ValueError('Line buffer of {} is too small'.format(
                self.max_line))
        self.prompt = prompt or self.DEFAULT_PROMPT
        self.argument_parser = ArgumentParser(prog='bcalc',
                                              usage='%(prog)s [options]',
                                              description='Basic calculator',
                                              add_help=False,
                                              allow_abbrev=False)
        for short_, long_, dest, help_ in self.OPTIONS:
            self.argument_parser.add_argument(short_, long_,
                                              action='store_true',
                                              dest=dest,
                                              help=help_)

    def print_version(self):
        print('bcalc', config.VERSION)

    def executor(self, lines):
        '''
        Evaluate and print every line, returning the exit status.
        '''
        for fragment in fragments(lines, self.max_line):
            try:
                result = evaluate(fragment)
            except BCalcError as e:
                logger.debug('%s at offset %s of %r',
                             type(e).__name__, e.position, fragment)
                print('Error:', e, file=sys.stderr)
                if self.on_error == 'exit':
                    return 1
                continue
            print('%g' % result)
        return 0

    def _prompting_input(self):
        '''
        Return an interactive session if both stdin/out are a tty, else stdin.
        '''
        if sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.prompt,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's, returning the exit status.

        Only the first argument is looked at.
        '''
        logging.basicConfig(
            level=getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING),
            format='%(name)s: %(levelname)s: %(message)s')
        if args is None:
            args = sys.argv[1:]
        if args and args[0] not in self.OPTION_STRINGS:
            print('Invalid option:', args[0])
            self.argument_parser.print_help()
            return 1
        self.args = self.argument_parser.parse_args(args[:1])
        if self.args.help:
            self.argument_parser.print_help()
            return 0
        if self.args.version:
            self.print_version()
            return 0
        if not self.args.quiet:
            self.print_version()
            print(self.BANNER)
        if self.args.mathlib:
            # Nothing to register; the grammar has no functions.
            print(self.MATHLIB_BANNER)
        try:
            return self.executor(self._prompting_input())
        except KeyboardInterrupt:
            return 1
