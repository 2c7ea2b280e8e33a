'''
Recursive descent evaluator for infix arithmetic.

Grammar, loosest binding first::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := number | '(' expression ')'

Values are computed while parsing; there is no tree. Unary minus isn't part of
the grammar, so -1 is a syntax error, as it always has been.
'''

import logging
import operator

from .lexer import Kind, Lexer
from .util import (UnexpectedToken, MissingClosingParen, DivisionByZero,
                   InvalidCharacter, NestingTooDeep)


logger = logging.getLogger(__name__)


class Parser:
    '''
    Evaluation context for a single line.

    Owns the cursor into the line and the lookahead token. Make a new one per
    line; see evaluate().
    '''

    ADDITIVE = {
        Kind.PLUS: operator.__add__,
        Kind.MINUS: operator.__sub__,
    }
    MULTIPLICATIVE = {
        Kind.MULTIPLY: operator.__mul__,
        Kind.DIVIDE: operator.__truediv__,
    }
    # Open parentheses allowed at once. Each costs three frames of recursion,
    # so this keeps well clear of the interpreter's limit.
    MAX_DEPTH = 200

    def __init__(self, line, lexer=None):
        self.line = line
        self.lexer = lexer or Lexer()
        self.cursor = 0
        self.position = 0
        self.depth = 0
        self.lookahead = None

    def advance(self):
        '''
        Consume the lookahead, fetching the next token from the lexer.
        '''
        self.lookahead, self.position, self.cursor = \
            self.lexer.scan(self.line, self.cursor)

    def unexpected(self, message):
        '''
        Return the error for an unwanted lookahead, to be raised.
        '''
        if self.lookahead.kind is Kind.INVALID:
            return InvalidCharacter(
                '{}: {!r}'.format(message, self.line[self.position]),
                self.position)
        return UnexpectedToken(message, self.position)

    def evaluate(self):
        self.cursor = 0
        self.depth = 0
        self.advance()
        result = self.expression()
        if self.lookahead.kind is not Kind.END:
            raise self.unexpected('Unexpected token after expression')
        return result

    def expression(self):
        result = self.term()
        while self.lookahead.kind in type(self).ADDITIVE:
            apply = type(self).ADDITIVE[self.lookahead.kind]
            self.advance()
            result = apply(result, self.term())
        return result

    def term(self):
        result = self.factor()
        while self.lookahead.kind in type(self).MULTIPLICATIVE:
            kind = self.lookahead.kind
            self.advance()
            position = self.position
            right = self.factor()
            if kind is Kind.DIVIDE and right == 0:
                raise DivisionByZero('Division by zero', position)
            result = type(self).MULTIPLICATIVE[kind](result, right)
        return result

    def factor(self):
        if self.lookahead.kind is Kind.NUMBER:
            result = self.lookahead.value
            self.advance()
            return result
        elif self.lookahead.kind is Kind.LPAREN:
            if self.depth >= type(self).MAX_DEPTH:
                raise NestingTooDeep('Expression nested too deeply',
                                     self.position)
            self.depth += 1
            self.advance()
            result = self.expression()
            if self.lookahead.kind is not Kind.RPAREN:
                raise MissingClosingParen('Expected closing parenthesis',
                                          self.position)
            self.advance()
            self.depth -= 1
            return result
        raise self.unexpected('Unexpected token')


def evaluate(line):
    '''
    Evaluate one line of arithmetic, returning a float.

    Raises a BCalcError subclass if the line isn't a well formed expression,
    is nested too deeply, or divides by zero.
    '''
    result = Parser(line).evaluate()
    logger.debug('%r = %g', line, result)
    return result
