# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""infix to postfix conversion (shunting-yard)"""

import logging

from exprlib import ops
from exprlib.exceptions.exprlib_exceptions import MismatchedParenError, UnknownTokenError
from exprlib.parser.token import Token

logger = logging.getLogger(__name__)


class PostfixConverter:
    def __init__(self) -> None:
        self.output = []
        self.operator_stack = []

    def _top(self):
        return self.operator_stack[-1] if self.operator_stack else None

    def _top_is_lparen(self):
        top = self._top()
        return top is not None and top.type == Token.t_lparen

    def _top_is_function(self):
        top = self._top()
        return top is not None and top.is_identifier() and ops.is_function(top.text)

    def _pop_until_lparen(self):
        while self.operator_stack and not self._top_is_lparen():
            self.output.append(self.operator_stack.pop())

    def _should_pop(self, operator):
        top = self._top()
        if top is None or not top.is_operator():
            return False
        top_prec = ops.precedence(top.text)
        info = ops.OPERATORS[operator.text]
        if info.associativity == ops.RIGHT:
            return top_prec > info.precedence
        return top_prec >= info.precedence

    def handle_operator(self, token):
        while self._should_pop(token):
            self.output.append(self.operator_stack.pop())
        self.operator_stack.append(token)

    def handle_closing_parenthesis(self):
        self._pop_until_lparen()
        if not self.operator_stack:
            raise MismatchedParenError()
        self.operator_stack.pop()
        if self._top_is_function():
            self.output.append(self.operator_stack.pop())

    def feed(self, token):
        if token.is_number():
            self.output.append(token)
        elif token.is_identifier():
            if ops.is_function(token.text):
                self.operator_stack.append(token)
            else:
                self.output.append(token)
        elif token.type == Token.t_comma:
            # argument separator; every known function is unary, so a
            # multi-argument call does not evaluate correctly downstream
            self._pop_until_lparen()
        elif token.is_operator() and token.text in ops.OPERATORS:
            self.handle_operator(token)
        elif token.type == Token.t_lparen:
            self.operator_stack.append(token)
        elif token.type == Token.t_rparen:
            self.handle_closing_parenthesis()
        else:
            raise UnknownTokenError(token)

    def finish(self):
        while self.operator_stack:
            token = self.operator_stack.pop()
            if token.type == Token.t_lparen:
                raise MismatchedParenError()
            self.output.append(token)
        return self.output


def to_postfix(tokens):
    """convert an infix token sequence into postfix order"""
    converter = PostfixConverter()
    for token in tokens:
        converter.feed(token)
    postfix = converter.finish()
    logger.debug("postfix: %r", postfix)
    return postfix
