# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""tokenizer for arithmetic expressions"""

import logging
import re

from exprlib.exceptions.exprlib_exceptions import LexError
from exprlib.parser.token import Token

logger = logging.getLogger(__name__)

rx_whitespace = re.compile(r"\s+")

# number: maximal run of digits and dots, malformed literals included
# identifier: candidate run of word characters, cut down to its leading
# letters (str.isalpha) by _letter_run
rx_token = re.compile(
    r"""
    (?P<number>[\d.]+)
    |(?P<identifier>[^\W\d_]+)
    |(?P<operator>[-+*/^])
    |(?P<lparen>\()
    |(?P<rparen>\))
    |(?P<comma>,)
    """,
    re.VERBOSE,
)

_group2type = {
    "number": Token.t_number,
    "identifier": Token.t_identifier,
    "operator": Token.t_operator,
    "lparen": Token.t_lparen,
    "rparen": Token.t_rparen,
    "comma": Token.t_comma,
}


def strip_whitespace(text):
    return rx_whitespace.sub("", text)


def _letter_run(text, start, end):
    pos = start
    while pos < end and text[pos].isalpha():
        pos += 1
    return pos


def tokenize(text):
    """Split *text* into a list of tokens.

    Whitespace is removed before scanning, token positions refer to the
    stripped text. Raises LexError on the first character that cannot
    start a token.
    """
    text = strip_whitespace(text)
    res = []
    pos = 0
    while pos < len(text):
        match = rx_token.match(text, pos)
        if match is None:
            raise LexError(text[pos], pos)
        end = match.end()
        if match.lastgroup == "identifier":
            # other numerics such as "²" or "½" are word characters too
            end = _letter_run(text, pos, end)
            if end == pos:
                raise LexError(text[pos], pos)
        res.append(Token(_group2type[match.lastgroup], text[pos:end], pos))
        pos = end

    logger.debug("tokenized %r into %r", text, res)
    return res
