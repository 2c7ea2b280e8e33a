'''
bcalc lexer tests
'''

from bcalc.lexer import Kind, Token


def kinds(tokens):
    return [token.kind for token in tokens]


def test_skips_whitespace(lexer):
    assert lexer.next_token(' \t 12', 0) == (Token(Kind.NUMBER, 12.0), 5)


def test_end_stays_put(lexer):
    assert lexer.next_token('1  ', 1) == (Token(Kind.END), 3)
    assert lexer.next_token('1  ', 3) == (Token(Kind.END), 3)


def test_trailing_newline_is_whitespace(lexer):
    assert list(lexer.lex('7\n')) == [Token(Kind.NUMBER, 7.0), Token(Kind.END)]


def test_operators(lexer):
    assert kinds(lexer.lex('+-*/()')) == [Kind.PLUS, Kind.MINUS,
                                         Kind.MULTIPLY, Kind.DIVIDE,
                                         Kind.LPAREN, Kind.RPAREN,
                                         Kind.END]


def test_operator_advances_by_one(lexer):
    assert lexer.next_token('2 * 3', 1) == (Token(Kind.MULTIPLY), 3)


def test_decimal(lexer):
    token, cursor = lexer.next_token('3.14', 0)
    assert token == Token(Kind.NUMBER, 3.14)
    assert cursor == 4


def test_leading_and_trailing_point(lexer):
    assert list(lexer.lex('.5 5. .')) == [Token(Kind.NUMBER, 0.5),
                                         Token(Kind.NUMBER, 5.0),
                                         Token(Kind.NUMBER, 0.0),
                                         Token(Kind.END)]


def test_second_point_starts_next_number(lexer):
    # Not an error as far as the lexer cares. The parser rejects it.
    assert list(lexer.lex('1.2.3')) == [Token(Kind.NUMBER, 1.2),
                                       Token(Kind.NUMBER, 0.3),
                                       Token(Kind.END)]


def test_number_stops_at_operator(lexer):
    assert lexer.next_token('12+3', 0) == (Token(Kind.NUMBER, 12.0), 2)


def test_invalid_does_not_advance(lexer):
    assert lexer.next_token('1 $ 2', 1) == (Token(Kind.INVALID), 2)
    assert lexer.next_token('1 $ 2', 2) == (Token(Kind.INVALID), 2)


def test_lex_stops_at_invalid(lexer):
    assert kinds(lexer.lex('1 x 2')) == [Kind.NUMBER, Kind.INVALID]


def test_non_ascii_digits_are_invalid(lexer):
    assert kinds(lexer.lex('\N{ARABIC-INDIC DIGIT THREE}')) == [Kind.INVALID]


def test_empty(lexer):
    assert list(lexer.lex('')) == [Token(Kind.END)]


def test_token_str():
    assert str(Token(Kind.NUMBER, 2.5)) == '2.5'
    assert str(Token(Kind.LPAREN)) == '('


def test_scan_reports_token_start(lexer):
    assert lexer.scan('  +1', 0) == (Token(Kind.PLUS), 2, 3)
    assert lexer.scan('1 2.5 ', 1) == (Token(Kind.NUMBER, 2.5), 2, 5)
    assert lexer.scan('1 ?', 1) == (Token(Kind.INVALID), 2, 2)
