"""Tests for `propcheck.check`."""
import logging

import pytest

from propcheck import check as _check
from propcheck.errors import EmptyInput
from propcheck.errors import TooManyVariables
from propcheck.logic.ast import Nodes


logging.getLogger('propcheck').setLevel('ERROR')


class CountingConstant(object):
    """Constant that counts evaluations."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def evaluate(self, assignment):
        self.calls += 1
        return self.value


def test_axiom_implies_itself():
    r, t = _check.check_lines(['[P]', '([P] => [P])'])
    assert r.status == _check.VERIFIED, r
    assert r.mask is None, r.mask
    assert r.holds
    assert t.names == ['P'], t.names


def test_conjunction_of_axioms():
    r, _ = _check.check_lines(['[P]', '[Q]', '([P] and [Q])'])
    assert r == _check.Result(_check.VERIFIED), r


def test_inconsistent_axioms():
    r, _ = _check.check_lines(['[P]', '![P]', '[P]'])
    assert r.status == _check.INCONSISTENT, r
    assert r.holds
    # any conjecture
    r, _ = _check.check_lines(['F', '([P] and ![P])'])
    assert r.status == _check.INCONSISTENT, r


def test_counterexample():
    r, t = _check.check_lines(['T', '([P] <=> [Q])'])
    assert r.status == _check.FALSIFIED, r
    assert not r.holds
    assert r.mask == 1, r.mask
    pairs = t.assignment(r.mask)
    assert pairs == [('P', True), ('Q', False)], pairs


def test_smallest_counterexample():
    # masks 1, 3, 5 falsify, 7 satisfies
    r, _ = _check.check_lines(['[P]', '([Q] & [R])'])
    assert r == _check.Result(_check.FALSIFIED, 1), r
    # mask 0 violates the axiom, 1 and 2 falsify
    r, _ = _check.check_lines(['([P] | [Q])', '([P] & [Q])'])
    assert r.mask == 1, r.mask
    r, _ = _check.check_lines(['[Q]', '![P]', '([P] | ![Q])'])
    assert r.mask == 1, r.mask


def test_no_axioms():
    r, _ = _check.check_lines(['([P] | ![P])'])
    assert r.status == _check.VERIFIED, r
    r, _ = _check.check_lines(['([P] => [Q])'])
    assert r.mask == 1, r.mask


def test_no_variables():
    r, t = _check.check_lines(['T'])
    assert r.status == _check.VERIFIED, r
    assert len(t) == 0, t
    r, _ = _check.check_lines(['T', 'F'])
    assert r == _check.Result(_check.FALSIFIED, 0), r
    r, _ = _check.check_lines(['F', 'F'])
    assert r.status == _check.INCONSISTENT, r


def test_single_assignment_without_variables():
    u = CountingConstant(True)
    r = _check.check([u], 0)
    assert r.status == _check.VERIFIED, r
    assert u.calls == 1, u.calls


def test_axioms_short_circuit():
    false = CountingConstant(False)
    later = CountingConstant(True)
    conjecture = CountingConstant(True)
    r = _check.check([false, later, conjecture], 3)
    assert r.status == _check.INCONSISTENT, r
    assert false.calls == 8, false.calls
    assert later.calls == 0, later.calls
    assert conjecture.calls == 0, conjecture.calls


def test_stops_at_first_counterexample():
    true = CountingConstant(True)
    conjecture = Nodes.Var('P', 0)
    r = _check.check([true, conjecture], 4)
    assert r.mask == 0, r.mask
    assert true.calls == 1, true.calls


def test_check_arguments():
    with pytest.raises(EmptyInput):
        _check.check([], 0)
    u = Nodes.Bool('true')
    with pytest.raises(ValueError):
        _check.check([u], 33)
    with pytest.raises(ValueError):
        _check.check([u], -1)


def test_too_many_variables_before_enumeration(monkeypatch):
    def fail(*arg, **kw):
        raise AssertionError('enumeration started')
    monkeypatch.setattr(_check, 'check', fail)
    lines = [f'[v{i}]' for i in range(33)]
    with pytest.raises(TooManyVariables):
        _check.check_lines(lines)
    # 33 names on one line
    line = '[v0]'
    for i in range(1, 33):
        line = f'({line} & [v{i}])'
    with pytest.raises(TooManyVariables):
        _check.check_lines(['T', line])


def test_result():
    r = _check.Result(_check.FALSIFIED, 5)
    assert repr(r) == "Result('falsified', 5)", repr(r)
    assert r != _check.Result(_check.FALSIFIED, 4)
    r = _check.Result(_check.VERIFIED)
    assert repr(r) == "Result('verified')", repr(r)
    with pytest.raises(AssertionError):
        _check.Result(_check.VERIFIED, 3)
    with pytest.raises(AssertionError):
        _check.Result(_check.FALSIFIED)


def test_truth_table():
    p = Nodes.Var('P', 0)
    q = Nodes.Var('Q', 1)
    u = Nodes.Binary('^', p, q)
    r = list(_check.truth_table(u, 2))
    r_ = [(0, False), (1, True), (2, True), (3, False)]
    assert r == r_, r
    r = list(_check.truth_table(Nodes.Bool('false'), 0))
    assert r == [(0, False)], r


def test_check_file(tmp_path):
    fname = tmp_path / 'modus_ponens.txt'
    fname.write_text(
        '// modus ponens\n'
        '[rain]\n'
        '\n'
        '([rain] => [wet])\n'
        '[wet]\n')
    r, t = _check.check_file(str(fname))
    assert r.status == _check.VERIFIED, r
    assert t.names == ['rain', 'wet'], t.names


def test_long_negation_chain():
    r, _ = _check.check_lines(['!' * 600 + '[P]'])
    assert r == _check.Result(_check.FALSIFIED, 0), r
    r, _ = _check.check_lines(['[P]', '!' * 5001 + '[P]'])
    assert r == _check.Result(_check.FALSIFIED, 1), r
