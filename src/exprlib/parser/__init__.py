# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

from exprlib.parser.scanner import tokenize
from exprlib.parser.shunting import to_postfix
from exprlib.parser.token import Token, format_tokens

__all__ = ["Token", "format_tokens", "to_postfix", "tokenize"]
