"""Abstract syntax tree classes for propositional formulas.

Each node evaluates to a Boolean, given an assignment.
An assignment is an `int` whose bit `i` is the value
of the variable with index `i`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import astutils


TRUE = 'true'
FALSE = 'false'
NOT = '!'
AND = '&'
OR = '|'
XOR = '^'
IMPLIES = '=>'
IFF = '<=>'
BINARY_OPERATORS = {
    AND: lambda x, y: x and y,
    OR: lambda x, y: x or y,
    XOR: lambda x, y: x != y,
    IMPLIES: lambda x, y: (not x) or y,
    IFF: lambda x, y: x == y}


class Nodes(object):
    """Container of AST node classes for propositions."""

    Terminal = astutils.Terminal

    class Bool(astutils.Terminal):
        """Boolean constant."""

        def __init__(self, value, dtype='bool'):
            if value not in (TRUE, FALSE):
                raise ValueError(value)
            super(Nodes.Bool, self).__init__(value, dtype)

        def evaluate(self, assignment):
            return self.value == TRUE

    class Var(astutils.Terminal):
        """Variable identifier.

        @param value: name, without brackets
        @param index: bit of assignments that
            holds the value of this variable
        """

        def __init__(self, value, index, dtype='var'):
            super(Nodes.Var, self).__init__(value, dtype)
            assert index >= 0, index
            self.index = index

        def __repr__(self):
            return '{c}({v}, {i})'.format(
                c=type(self).__name__,
                v=repr(self.value),
                i=self.index)

        def __eq__(self, other):
            return (
                isinstance(other, type(self)) and
                self.value == other.value and
                self.index == other.index)

        def __hash__(self):
            return id(self)

        def flatten(self, *arg, **kw):
            return '[' + self.value + ']'

        def evaluate(self, assignment):
            return bool((assignment >> self.index) & 1)

    class Unary(astutils.Operator):
        """Negation."""

        def __init__(self, operator, operand):
            if operator != NOT:
                raise ValueError(operator)
            super(Nodes.Unary, self).__init__(operator, operand)

        def flatten(self, *arg, **kw):
            prefix = list()
            x = self
            while isinstance(x, Nodes.Unary):
                prefix.append(x.operator)
                (x,) = x.operands
            prefix.append(x.flatten(*arg, **kw))
            return ' '.join(prefix)

        def evaluate(self, assignment):
            # iterate over chains of negations
            negate = False
            x = self
            while isinstance(x, Nodes.Unary):
                negate = not negate
                (x,) = x.operands
            return negate != x.evaluate(assignment)

    class Binary(astutils.Operator):
        """Binary connective."""

        def __init__(self, operator, left, right):
            if operator not in BINARY_OPERATORS:
                raise ValueError(operator)
            super(Nodes.Binary, self).__init__(
                operator, left, right)

        def flatten(self, *arg, **kw):
            # infix flattener for consistency with parser
            return ' '.join([
                '(',
                self.operands[0].flatten(*arg, **kw),
                self.operator,
                self.operands[1].flatten(*arg, **kw),
                ')'])

        def evaluate(self, assignment):
            x, y = self.operands
            f = BINARY_OPERATORS[self.operator]
            return f(
                x.evaluate(assignment),
                y.evaluate(assignment))


def variables(u):
    """Return `set` of indices of variables in tree `u`."""
    r = set()
    stack = [u]
    while stack:
        u = stack.pop()
        if hasattr(u, 'operator'):
            stack.extend(u.operands)
        elif u.type == 'var':
            r.add(u.index)
    return r
