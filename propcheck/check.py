"""Check a conjecture against axioms by enumeration.

All assignments to the variables are enumerated,
in increasing order of their binary encoding.
The first assignment that satisfies the axioms
and falsifies the conjecture is the counterexample.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from propcheck import loader
from propcheck.errors import EmptyInput
from propcheck.logic.variables import MAX_VARIABLES


logger = logging.getLogger(__name__)
VERIFIED = 'verified'
INCONSISTENT = 'inconsistent'
FALSIFIED = 'falsified'


class Result(object):
    """Outcome of checking a conjecture.

    Attributes:

    - `status`: one of `VERIFIED`, `INCONSISTENT`,
      `FALSIFIED`
    - `mask`: the counterexample if `FALSIFIED`,
      otherwise `None`
    """

    def __init__(self, status, mask=None):
        assert status in (VERIFIED, INCONSISTENT, FALSIFIED), status
        assert (status == FALSIFIED) == (mask is not None), (
            status, mask)
        self.status = status
        self.mask = mask

    def __repr__(self):
        if self.mask is None:
            return f'Result({self.status!r})'
        return f'Result({self.status!r}, {self.mask})'

    def __eq__(self, other):
        return (
            isinstance(other, Result) and
            self.status == other.status and
            self.mask == other.mask)

    @property
    def holds(self):
        """Return `True` unless a counterexample was found.

        Inconsistent axioms imply any conjecture.
        """
        return self.status != FALSIFIED


def check(propositions, n_vars):
    """Return `Result` of checking the last of `propositions`.

    @param propositions: syntax trees,
        axioms followed by the conjecture
    @type propositions: nonempty `list`
    @param n_vars: number of variables,
        at most `MAX_VARIABLES`
    @rtype: `Result`
    """
    if not propositions:
        raise EmptyInput('no theorem to check')
    if not (0 <= n_vars <= MAX_VARIABLES):
        raise ValueError(
            f'number of variables must be in 0 .. {MAX_VARIABLES}, '
            f'got: {n_vars}')
    *axioms, conjecture = propositions
    logger.info(
        f'enumerating {2**n_vars} assignments '
        f'against {len(axioms)} axioms')
    consistent = False
    for mask in range(1 << n_vars):
        if not all(u.evaluate(mask) for u in axioms):
            continue
        consistent = True
        if not conjecture.evaluate(mask):
            logger.info(f'counterexample: {mask:#x}')
            return Result(FALSIFIED, mask)
    if consistent:
        return Result(VERIFIED)
    logger.info('no assignment satisfies the axioms')
    return Result(INCONSISTENT)


def check_lines(lines):
    """Return `(Result, VariableTable)` for text `lines`."""
    propositions, variables = loader.parse_lines(lines)
    return check(propositions, len(variables)), variables


def check_file(filename):
    """Return `(Result, VariableTable)` for file `filename`."""
    propositions, variables = loader.load(filename)
    return check(propositions, len(variables)), variables


def truth_table(u, n_vars):
    """Yield `(mask, value)` of syntax tree `u`.

    Masks are in increasing order,
    from 0 to `2**n_vars - 1`.
    """
    assert 0 <= n_vars <= MAX_VARIABLES, n_vars
    for mask in range(1 << n_vars):
        yield mask, u.evaluate(mask)
