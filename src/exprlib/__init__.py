# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""arithmetic expression evaluation: tokenizer, shunting-yard, postfix evaluator"""

from exprlib.utils import log  # noqa: F401
from exprlib.evaluator import Evaluator, evaluate, evaluate_rpn
from exprlib.exceptions.exprlib_exceptions import ExprError

__all__ = ["Evaluator", "ExprError", "evaluate", "evaluate_rpn"]
