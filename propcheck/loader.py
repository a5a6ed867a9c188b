"""Read propositions from text, one per line.

Lines that start with `//` are comments.
Blank lines are ignored. The last proposition
is the conjecture, the others are axioms.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from propcheck.errors import EmptyInput
from propcheck.errors import FileOpenError
from propcheck.errors import ParseError
from propcheck.logic.parser import Parser
from propcheck.logic.variables import VariableTable
from propcheck.logic.variables import WHITESPACE


logger = logging.getLogger(__name__)
COMMENT = '//'


def load(filename):
    """Return propositions and variables in file `filename`.

    @rtype: `tuple(list, VariableTable)`
    """
    try:
        with open(filename, encoding='utf-8', newline='\n') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpenError(filename) from e
    logger.info(f'read {len(lines)} lines from "{filename}"')
    return parse_lines(lines)


def parse_lines(lines, variables=None):
    """Return propositions and variables in `lines`.

    @param lines: iterable of `str`
    @param variables: table to extend,
        a new one if `None`
    @type variables: `VariableTable`
    @return: `(propositions, variables)`,
        where `propositions` is a nonempty `list`
        of syntax trees in input order
    """
    if variables is None:
        variables = VariableTable()
    parser = Parser(variables)
    propositions = list()
    for lineno, line in enumerate(lines, start=1):
        if is_skipped(line):
            continue
        try:
            u = parser.parse(line)
        except ParseError as e:
            raise type(e)(line, lineno) from e
        propositions.append(u)
    if not propositions:
        raise EmptyInput('no theorem to check')
    logger.info(
        f'{len(propositions) - 1} axioms, '
        f'{len(variables)} variables')
    return propositions, variables


def is_skipped(line):
    """Return `True` if `line` is a comment or blank."""
    return (
        line.startswith(COMMENT) or
        not line.strip(WHITESPACE))
