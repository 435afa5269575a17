# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Evaluation of arithmetic expressions.

An expression is tokenized, converted to postfix order with the
shunting-yard algorithm and then reduced on an operand stack::

    >>> evaluate("2 + 3 * 4")
    14.0

Variables are looked up through a resolver (see exprlib.resolvers) the
first time they are used by an Evaluator; later uses in the same
session reuse the stored value.
"""

import logging

from exprlib import ops
from exprlib.exceptions.exprlib_exceptions import ArityError, ExprError, ResultError, UnknownTokenError
from exprlib.parser.scanner import tokenize
from exprlib.parser.shunting import to_postfix
from exprlib.resolvers import ConsoleResolver

logger = logging.getLogger(__name__)


class Evaluator:
    def __init__(self, resolver=None) -> None:
        if resolver is None:
            resolver = ConsoleResolver()
        self.resolver = resolver
        self.variables = {}

    def variable_value(self, name):
        try:
            return self.variables[name]
        except KeyError:
            pass

        value = float(self.resolver.value_of(name))
        logger.debug("resolved variable %s = %r", name, value)
        self.variables[name] = value
        return value

    def apply_function(self, stack, name):
        if not stack:
            raise ArityError("not enough arguments for the function")
        arg = stack.pop()
        stack.append(float(ops.FUNCTIONS[name](arg)))

    def apply_operator(self, stack, symbol):
        if len(stack) < 2:
            raise ArityError("not enough arguments for the operation")
        b = stack.pop()
        a = stack.pop()
        stack.append(float(ops.OPERATORS[symbol].fun(a, b)))

    def evaluate_rpn(self, postfix) -> float:
        stack = []
        for token in postfix:
            if token.is_number():
                stack.append(token.value)
            elif token.is_identifier():
                if ops.is_function(token.text):
                    self.apply_function(stack, token.text)
                else:
                    stack.append(self.variable_value(token.text))
            elif token.is_operator():
                self.apply_operator(stack, token.text)
            else:
                raise UnknownTokenError(token)

        if len(stack) != 1:
            raise ResultError()
        return stack.pop()

    def evaluate(self, expression: str) -> float:
        """evaluate *expression*, raising ExprError on any failure"""
        try:
            return self.evaluate_rpn(to_postfix(tokenize(expression)))
        except ExprError:
            raise
        except ValueError as err:
            # malformed number literal
            raise ExprError(str(err)) from err


def evaluate_rpn(postfix, resolver=None) -> float:
    return Evaluator(resolver).evaluate_rpn(postfix)


def evaluate(expression: str, resolver=None) -> float:
    return Evaluator(resolver).evaluate(expression)
