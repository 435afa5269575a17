# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""operator and function tables shared by the converter and the evaluator"""

import math
import operator
from types import MappingProxyType

from exprlib.exceptions.exprlib_exceptions import DivisionByZeroError

LEFT = "left"
RIGHT = "right"


class OpInfo:
    __slots__ = ("symbol", "precedence", "associativity", "fun")

    def __init__(self, symbol, precedence, associativity, fun):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.fun = fun

    def __repr__(self):
        return f"<OpInfo {self.symbol!r} prec={self.precedence} {self.associativity}>"


def _divide(a, b):
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _is_odd_integer(x):
    return float(x).is_integer() and x % 2 == 1


def _power(a, b):
    """math.pow with IEEE results instead of domain and range errors"""
    try:
        return math.pow(a, b)
    except OverflowError:
        pass
    except ValueError:
        if a != 0:
            # negative base, fractional exponent
            return math.nan
    # overflow, or zero to a negative power
    if _is_odd_integer(b):
        return math.copysign(math.inf, a)
    return math.inf


def _nan_on_domain_error(fun):
    def wrap(x):
        try:
            return fun(x)
        except ValueError:
            return math.nan

    wrap.__name__ = fun.__name__
    return wrap


_operators = {}
_functions = {}


def _addop(symbol, prec, fun, associativity=LEFT):
    _operators[symbol] = OpInfo(symbol, prec, associativity, fun)


def _addfun(name, fun):
    _functions[name] = fun


# every operator is left-associative, "^" included: 2^3^2 == (2^3)^2
a = _addop
a("+", 1, operator.add)
a("-", 1, operator.sub)
a("*", 2, operator.mul)
a("/", 2, _divide)
a("^", 3, _power)
del a

f = _addfun
f("sin", _nan_on_domain_error(math.sin))
f("cos", _nan_on_domain_error(math.cos))
f("tan", _nan_on_domain_error(math.tan))
f("sqrt", _nan_on_domain_error(math.sqrt))
f("abs", abs)
del f

OPERATORS = MappingProxyType(_operators)
FUNCTIONS = MappingProxyType(_functions)


def is_function(name):
    return name in FUNCTIONS


def precedence(symbol):
    return OPERATORS[symbol].precedence
