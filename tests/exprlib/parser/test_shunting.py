#! /usr/bin/env py.test

import pytest

from exprlib.exceptions.exprlib_exceptions import MismatchedParenError, UnknownTokenError
from exprlib.parser.scanner import tokenize
from exprlib.parser.shunting import PostfixConverter, to_postfix
from exprlib.parser.token import Token, format_tokens, number, operator


def postfix(text):
    return format_tokens(to_postfix(tokenize(text)))


@pytest.mark.parametrize(
    "infix,expected",
    [
        ("2+3*4", "2 3 4 * +"),
        ("(2+3)*5", "2 3 + 5 *"),
        ("2*3+4", "2 3 * 4 +"),
        ("2-3-4", "2 3 - 4 -"),
        ("8/4/2", "8 4 / 2 /"),
        ("2^3^2", "2 3 ^ 2 ^"),
        ("2*3^2", "2 3 2 ^ *"),
        ("2^3*2", "2 3 ^ 2 *"),
        ("x*(y+1)", "x y 1 + *"),
        ("", ""),
    ],
)
def test_precedence_and_associativity(infix, expected):
    assert postfix(infix) == expected


@pytest.mark.parametrize(
    "infix,expected",
    [
        ("sin(x)+1", "x sin 1 +"),
        ("sqrt(abs(x))", "x abs sqrt"),
        ("2*sin(3+4)", "2 3 4 + sin *"),
        ("cos(0)^2", "0 cos 2 ^"),
        ("sin()", "sin"),
    ],
)
def test_functions(infix, expected):
    assert postfix(infix) == expected


def test_unknown_identifiers_are_variables():
    assert postfix("foo+sinus") == "foo sinus +"


def test_comma_separates_arguments():
    # kept as is; unary functions just see the last argument
    assert postfix("sin(1,2)") == "1 2 sin"
    assert postfix("sin(1+2,3)") == "1 2 + 3 sin"


def test_missing_operand_is_not_detected():
    assert postfix("2+*3") == "2 3 * +"


@pytest.mark.parametrize(
    "infix",
    ["2+3*4", "(1+2)*(3-4)", "sqrt(abs(x-1))/2", "sin(1,2)", "((((1))))"],
)
def test_postfix_has_no_grouping_tokens(infix):
    grouping = (Token.t_lparen, Token.t_rparen, Token.t_comma)
    assert not [token for token in to_postfix(tokenize(infix)) if token.type in grouping]


@pytest.mark.parametrize("infix", ["(2+3", "2+3)", ")(", "((1)", "sin(1", "1)+(2"])
def test_mismatched_parenthesis(infix):
    with pytest.raises(MismatchedParenError):
        to_postfix(tokenize(infix))


def test_unknown_token():
    with pytest.raises(UnknownTokenError):
        to_postfix([number("1"), Token(99, "?")])


def test_unknown_operator_symbol():
    with pytest.raises(UnknownTokenError) as excinfo:
        to_postfix([number("1"), operator("%"), number("2")])
    assert "%" in str(excinfo.value)


def test_converter_is_incremental():
    converter = PostfixConverter()
    for token in tokenize("1+2"):
        converter.feed(token)
    assert format_tokens(converter.output) == "1 2"
    assert format_tokens(converter.finish()) == "1 2 +"
