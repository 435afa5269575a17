# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""expression tokens"""


class Token:
    """An immutable lexical token.

    ``type`` is one of the ``t_*`` class constants, ``text`` the source
    text the token was scanned from and ``position`` its offset in the
    whitespace-stripped input. Identifiers are not split into variables
    and functions here; that is decided by a lookup in the function table
    when the token is consumed.
    """

    __slots__ = ("type", "text", "position")

    t_number = 1
    t_identifier = 2
    t_operator = 3
    t_lparen = 4
    t_rparen = 5
    t_comma = 6

    token2name = {}

    def __init__(self, type, text, position=None):
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "position", position)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text) == (other.type, other.text)

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"<{self.token2name.get(self.type, self.type)} {self.text!r}>"

    @property
    def value(self):
        """numeric value of a number token, parsed on access"""
        return float(self.text)

    def is_number(self):
        return self.type == Token.t_number

    def is_identifier(self):
        return self.type == Token.t_identifier

    def is_operator(self):
        return self.type == Token.t_operator


for _name in dir(Token):
    if _name.startswith("t_"):
        Token.token2name[getattr(Token, _name)] = _name
del _name


def number(text, position=None):
    return Token(Token.t_number, text, position)


def identifier(name, position=None):
    return Token(Token.t_identifier, name, position)


def operator(symbol, position=None):
    return Token(Token.t_operator, symbol, position)


def format_tokens(tokens):
    return " ".join(token.text for token in tokens)

