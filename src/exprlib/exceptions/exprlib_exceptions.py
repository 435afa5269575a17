# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.


class ExprError(Exception):
    pass


class LexError(ExprError):
    def __init__(self, character, position):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character: {character!r} at position {position}")


class UnknownTokenError(ExprError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Unknown token: {token.text}")


class MismatchedParenError(ExprError):
    def __init__(self, msg="Mismatched brackets"):
        super().__init__(msg)


class ArityError(ExprError):
    pass


class DivisionByZeroError(ExprError):
    def __init__(self, msg="Division by zero"):
        super().__init__(msg)


class ResultError(ExprError):
    def __init__(self, msg="error calculating the expression"):
        super().__init__(msg)


class VariableError(ExprError):
    def __init__(self, name, msg):
        self.name = name
        super().__init__(msg)
