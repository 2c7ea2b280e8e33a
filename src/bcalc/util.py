class BCalcError(Exception):
    '''
    Base of everything that can go wrong evaluating a line.

    :param message: Human readable reason, printed by the CLI.
    :param position: Offset into the line of the offending token, if known.
    '''
    def __init__(self, message, position=None):
        super().__init__(message, position)
        self.position = position

    def __str__(self):
        return self.args[0]


class UnexpectedToken(BCalcError):
    pass


class MissingClosingParen(BCalcError):
    pass


class DivisionByZero(BCalcError):
    pass


class NestingTooDeep(BCalcError):
    pass


class InvalidCharacter(UnexpectedToken):
    '''
    Unexpected token that the lexer could not classify at all.
    '''
    pass
