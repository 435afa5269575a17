# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""exprcalc -- installed via setuptools' entry_points"""

import logging
import sys

import click

from exprlib.evaluator import Evaluator
from exprlib.exceptions.exprlib_exceptions import ExprError
from exprlib.parser import format_tokens, to_postfix, tokenize
from exprlib.resolvers import ConsoleResolver, MappingResolver
from exprlib.utils import conf
from exprlib.utils._version import display_version
from exprlib.utils.log import setup_console_logging

logger = logging.getLogger(__name__)
USAGE_HINT = "Enter an arithmetic expression (for example: 2 + 3 * (x - 1))"


def parse_definitions(definitions):
    values = {}
    for definition in definitions:
        name, sep, value = definition.partition("=")
        name = name.strip()
        if not sep or not name.isalpha():
            raise click.BadParameter(
                f"expected NAME=VALUE, got {definition!r}", param_hint="'-D' / '--define'"
            )
        try:
            values[name] = float(value)
        except ValueError:
            raise click.BadParameter(
                f"invalid value for {name}: {value!r}", param_hint="'-D' / '--define'"
            ) from None
    return values


def make_resolver(values, interactive):
    fallback = ConsoleResolver() if interactive else None
    if values or fallback is None:
        return MappingResolver(values, fallback=fallback)
    return fallback


def run_expression(evaluator, expression, show_postfix=False):
    """evaluate one expression and print the outcome; returns True on success"""
    try:
        if show_postfix:
            click.echo(f"Postfix: {format_tokens(to_postfix(tokenize(expression)))}")
        result = evaluator.evaluate(expression)
    except ExprError as err:
        logger.debug("evaluation of %r failed", expression, exc_info=True)
        click.echo(f"Error: {err}")
        return False
    click.echo(f"Result: {result}")
    return True


def read_expression(prompt):
    click.echo(prompt, nl=False)
    # plain sys.stdin: the console resolver reads variable values from it too
    return sys.stdin.readline()


@click.command()
@click.option("-e", "--expression", help="evaluate EXPRESSION instead of reading it from stdin")
@click.option(
    "-D",
    "--define",
    "definitions",
    multiple=True,
    metavar="NAME=VALUE",
    help="value for a variable, may be given multiple times",
)
@click.option(
    "--prompt/--no-prompt",
    "interactive",
    default=None,
    help="ask for values of undefined variables (default from config: cli.interactive)",
)
@click.option("--postfix", "show_postfix", is_flag=True, help="also print the postfix form")
@click.option("--repl", is_flag=True, help="keep reading expressions until end of input")
@click.option("-l", "--log-level", help="console log level (default from config: logging.log_level)")
@click.version_option(version=display_version, prog_name="exprcalc")
def main(expression, definitions, interactive, show_postfix, repl, log_level):
    conf.readrc()
    setup_console_logging(level=log_level or conf.log_level)
    if interactive is None:
        interactive = conf.interactive

    evaluator = Evaluator(make_resolver(parse_definitions(definitions), interactive))

    if expression is not None:
        ok = run_expression(evaluator, expression, show_postfix)
    elif repl:
        click.echo(USAGE_HINT)
        ok = True
        while True:
            line = read_expression(conf.prompt)
            if not line:
                click.echo()
                break
            if not line.strip():
                continue
            ok = run_expression(evaluator, line, show_postfix)
    else:
        click.echo(USAGE_HINT)
        ok = run_expression(evaluator, read_expression(conf.prompt), show_postfix)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
