from io import StringIO
from typing import Callable
import sys

from pytest import MonkeyPatch, fixture

from bcalc.lexer import Lexer


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def stdin(monkeypatch: MonkeyPatch) -> Callable[[str], None]:
    '''
    Replace standard input with the given text.

    Not a tty, so the CLI reads it line by line, like a pipe.
    '''
    def feed(text: str) -> None:
        monkeypatch.setattr(sys, 'stdin', StringIO(text))
    return feed
