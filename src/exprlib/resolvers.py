# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""variable resolvers

A resolver is any object with a ``value_of(name)`` method returning a
float. The evaluator asks it once per variable name and session; the
values are cached by the evaluator, not by the resolver.
"""

import logging
import sys

from exprlib.exceptions.exprlib_exceptions import VariableError

logger = logging.getLogger(__name__)

PROMPT_FMT = "Enter the value of the variable %s: "


class VariableResolver:
    def value_of(self, name):
        raise NotImplementedError


class ConsoleResolver(VariableResolver):
    """ask for variable values on a console

    stdin and stdout are looked up on each call unless given explicitly,
    so redirected streams are honoured.
    """

    def __init__(self, stdin=None, stdout=None, prompt_fmt=PROMPT_FMT):
        self._stdin = stdin
        self._stdout = stdout
        self.prompt_fmt = prompt_fmt

    @property
    def stdin(self):
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self):
        return self._stdout if self._stdout is not None else sys.stdout

    def value_of(self, name):
        self.stdout.write(self.prompt_fmt % name)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise VariableError(name, f"no value given for the variable {name}")
        try:
            value = float(line.strip())
        except ValueError:
            raise VariableError(
                name, f"invalid value for the variable {name}: {line.strip()!r}"
            ) from None
        logger.debug("read %s = %r from console", name, value)
        return value


class MappingResolver(VariableResolver):
    """look up variable values in a mapping

    Names missing from the mapping are passed to *fallback* if given,
    otherwise they are an error.
    """

    def __init__(self, values=None, fallback=None):
        self.values = dict(values or {})
        self.fallback = fallback

    def value_of(self, name):
        try:
            return float(self.values[name])
        except KeyError:
            pass
        if self.fallback is None:
            raise VariableError(name, f"unknown variable: {name}")
        return self.fallback.value_of(name)
