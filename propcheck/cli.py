"""Command line interface.

```
propcheck <filename>
```

Exit status is 0 if the theorem is verified,
or the axioms are inconsistent, and 1 otherwise.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import argparse
import logging
import sys

from propcheck import check as _check
from propcheck import loader
from propcheck.errors import EmptyInput
from propcheck.errors import FileOpenError
from propcheck.errors import NestingTooDeep
from propcheck.errors import ParseError
from propcheck.errors import TooManyVariables
from propcheck.errors import UsageError
from propcheck.logic.variables import MAX_VARIABLES


PROG = 'propcheck'
NAME_WIDTH = 40


class _ArgumentParser(argparse.ArgumentParser):
    """Raise `UsageError` instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _make_parser():
    p = _ArgumentParser(
        prog=PROG,
        description=(
            'Check that the last proposition in a file '
            'follows from the propositions before it.'))
    p.add_argument(
        'filename',
        help='propositions, one per line')
    p.add_argument(
        '--truth-table', action='store_true',
        help='print truth table of the conjecture')
    p.add_argument(
        '-v', '--verbose', action='store_true',
        help='log progress to stderr')
    return p


def main(argv=None):
    """Run `propcheck` and return exit status."""
    try:
        args = _make_parser().parse_args(argv)
    except UsageError:
        print(f'Usage: {PROG} <filename>')
        return 1
    if args.verbose:
        _config_logging()
    fname = args.filename
    try:
        propositions, variables = loader.load(fname)
    except FileOpenError:
        print(f'Error: Cannot open {fname}')
        return 1
    except NestingTooDeep as e:
        print(f'Error: Nesting too deep line {e.lineno} in {fname}')
        return 1
    except ParseError as e:
        print(f'Error: Syntax Error line {e.lineno} in {fname}')
        return 1
    except EmptyInput:
        print(f'Error: No theorem to check in {fname}')
        return 1
    except TooManyVariables:
        print(
            f'error: over {MAX_VARIABLES} propositional '
            'variables, Exiting.')
        return 1
    result = _check.check(propositions, len(variables))
    print(format_result(result, variables))
    if args.truth_table:
        print(format_truth_table(propositions[-1], variables))
    if result.holds:
        return 0
    return 1


def format_result(result, variables):
    """Return report of `result` as `str`.

    @type result: `propcheck.check.Result`
    @type variables: `VariableTable`
    """
    if result.status == _check.VERIFIED:
        return 'Theorem has been verified!'
    if result.status == _check.INCONSISTENT:
        return 'Axioms are not consistent!'
    assert result.status == _check.FALSIFIED, result
    lines = ['Theorem is false!']
    if len(variables):
        lines.append('Counterexample:')
        lines.append(_row('Proposition', 'Value'))
    for name, value in variables.assignment(result.mask):
        lines.append(_row(name, value))
    return '\n'.join(lines)


def format_truth_table(u, variables):
    """Return truth table of syntax tree `u` as `str`."""
    header = [u.flatten()]
    header.extend(variables)
    lines = [' | '.join(header)]
    n = len(variables)
    for mask, value in _check.truth_table(u, n):
        row = [_bit(value)]
        row.extend(_bit((mask >> i) & 1) for i in range(n))
        lines.append(' | '.join(row))
    return '\n'.join(lines)


def _row(name, value):
    return '{name:>{w}} {value}'.format(
        name=name, w=NAME_WIDTH, value=value)


def _bit(value):
    return 'T' if value else 'F'


def _config_logging():
    log = logging.getLogger('propcheck')
    if not log.handlers:
        log.addHandler(logging.StreamHandler())
    log.setLevel(logging.DEBUG)


def run():
    sys.exit(main())
