'''
bcalc, a basic calculator.

Reads infix arithmetic, one expression per line, and prints each result. Plain
old + - * / and parentheses over floating point numbers, with the usual
precedence. No variables, no functions, no unary minus.
'''

from .cli import CLI
from .lexer import Lexer
from .parser import Parser, evaluate
from .util import (BCalcError, UnexpectedToken, MissingClosingParen,
                   DivisionByZero, InvalidCharacter, NestingTooDeep)


__all__ = ('CLI', 'Lexer', 'Parser', 'evaluate',
           'BCalcError', 'UnexpectedToken', 'MissingClosingParen',
           'DivisionByZero', 'InvalidCharacter', 'NestingTooDeep')
