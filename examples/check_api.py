"""Checking theorems from Python, instead of the command line."""
import logging

import propcheck.check as _check
import propcheck.logic.parser as _parser


log = logging.getLogger('propcheck.check')
log.addHandler(logging.StreamHandler())
log.setLevel(logging.DEBUG)


def check_text():
    """Check a theorem given as lines of text."""
    lines = [
        '([P] or [Q])',
        '![P]',
        '[Q]']  # disjunctive syllogism
    result, variables = _check.check_lines(lines)
    print(result)


def print_counterexample():
    """Find the assignment that refutes a fallacy."""
    lines = [
        '([P] => [Q])',
        '![P]',
        '![Q]']  # denying the antecedent
    result, variables = _check.check_lines(lines)
    assert not result.holds, result
    for name, value in variables.assignment(result.mask):
        print(f'{name} = {value}')


def truth_table():
    """Enumerate the values of a single formula."""
    parser = _parser.Parser()
    u = parser.parse('[P] xor ![Q]')
    n = len(parser.variables)
    for mask, value in _check.truth_table(u, n):
        print(f'{mask:0{n}b}  {value}')


if __name__ == '__main__':
    check_text()
    print_counterexample()
    truth_table()
