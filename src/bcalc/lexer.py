from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex


class Kind(Enum):
    NUMBER = 'number'
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    LPAREN = '('
    RPAREN = ')'
    END = 'end'
    INVALID = 'invalid'


class Token(namedtuple('Token', 'kind value')):
    '''
    A lexeme. Only numbers carry a value.
    '''
    __slots__ = ()

    def __new__(cls, kind, value=None):
        return super().__new__(cls, kind, value)

    def __str__(self):
        if self.kind is Kind.NUMBER:
            return '{:g}'.format(self.value)
        return self.kind.value


def _accumulate(state, char):
    '''
    Fold one character of a numeric lexeme into (value, divisor).

    divisor stays None until the decimal point shows up.
    '''
    value, divisor = state
    if char == '.':
        return value, 1.0
    value = value * 10 + int(char)
    if divisor is not None:
        divisor *= 10
    return value, divisor


class Lexer:
    '''
    Lexer for the bcalc arithmetic grammar.

    Holds no state of its own; the caller owns the cursor, and gets a new one
    back with each token.
    '''
    # Digits with at most one decimal point anywhere in them. A second point
    # isn't ours: it starts the next lexeme.
    NUMBER = r'''
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  # .2, and . on its own, which is zero
                  \.
                  [0-9]*
              )
              '''
    SPACE = r'\s*'

    OPERATORS = {
        kind.value: kind
        for kind
        in (Kind.PLUS, Kind.MINUS,
            Kind.MULTIPLY, Kind.DIVIDE,
            Kind.LPAREN, Kind.RPAREN)
    }

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    _number = regex.compile(NUMBER, flags=FLAGS)
    _space = regex.compile(SPACE, flags=FLAGS)

    def skip(self, line, cursor):
        '''
        Return the cursor moved past any whitespace.
        '''
        return type(self)._space.match(line, cursor).end()

    def scan(self, line, cursor):
        '''
        Return the next token in line at or after cursor, where it starts,
        and the cursor just past it.
        '''
        start = self.skip(line, cursor)
        if start >= len(line):
            return Token(Kind.END), start, start
        match = type(self)._number.match(line, start)
        if match is not None:
            value, divisor = reduce(_accumulate, match.group(0), (0.0, None))
            if divisor is not None:
                value /= divisor
            return Token(Kind.NUMBER, value), start, match.end()
        kind = type(self).OPERATORS.get(line[start])
        if kind is None:
            return Token(Kind.INVALID), start, start
        return Token(kind), start, start + 1

    def next_token(self, line, cursor):
        '''
        Return the next token in line at or after cursor, and the cursor just
        past it.

        END and INVALID don't move the cursor past anything but whitespace, so
        asking again gets the same token back.
        '''
        token, _, cursor = self.scan(line, cursor)
        return token, cursor

    def lex(self, line):
        '''
        Take a line and yield all tokens, stopping after END or INVALID.
        '''
        cursor = 0
        while True:
            token, cursor = self.next_token(line, cursor)
            yield token
            if token.kind in {Kind.END, Kind.INVALID}:
                return
