"""Recursive descent parser for propositions.

Grammar, with whitespace allowed between tokens:

```
expr   ::= 'T' | 'true' | 'F' | 'false'
         | '[' name ']'
         | ('!' | 'not') expr
         | '(' expr op expr ')'
op     ::= 'and' | '&' | 'or' | '|' | 'xor' | '^'
         | 'then' | 'implies' | '=>'
         | 'if' | '<='
         | 'iff' | '<=>'
```

Alternatives are tried in the order listed,
and the first that matches wins.
Binary connectives must be parenthesized,
except at the top level of a line.
`(x if y)` and `(x <= y)` mean `(y => x)`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from propcheck.errors import NestingTooDeep
from propcheck.errors import ParseError
from propcheck.logic import ast
from propcheck.logic.ast import Nodes
from propcheck.logic.variables import VariableTable
from propcheck.logic.variables import WHITESPACE


logger = logging.getLogger(__name__)
# operator token -> (canonical operator, swap operands ?)
OPERATORS = {
    'and': (ast.AND, False),
    '&': (ast.AND, False),
    'or': (ast.OR, False),
    '|': (ast.OR, False),
    'xor': (ast.XOR, False),
    '^': (ast.XOR, False),
    'then': (ast.IMPLIES, False),
    'implies': (ast.IMPLIES, False),
    '=>': (ast.IMPLIES, False),
    'if': (ast.IMPLIES, True),
    '<=': (ast.IMPLIES, True),
    'iff': (ast.IFF, False),
    '<=>': (ast.IFF, False)}
# an operator token ends where an operand may start
_OPERAND_CHARS = '!([TF'
_OPERAND_PREFIXES = ('fa', 'tr', 'no')


class Parser(object):
    """Parser of one proposition per line.

    Variables are registered in `self.variables`
    as soon as they are read, so the same table
    should be used for all lines of an input.
    """
    # Context-sensitive operator tokens, so cannot use PLY

    def __init__(self, variables=None, nodes=None):
        if variables is None:
            variables = VariableTable()
        if nodes is None:
            nodes = Nodes()
        self.variables = variables
        self.nodes = nodes

    def parse(self, line):
        """Return syntax tree of `line`.

        If `line` is not a formula, then retry once
        with `line` enclosed in parentheses, so that
        top-level binary connectives need none.

        Raise `ParseError` if neither is a formula.
        Raise `NestingTooDeep` if parentheses nest
        deeper than the interpreter can recurse.
        Raise `TooManyVariables` if the table overflows.
        """
        try:
            u = self._parse_whole(line)
            if u is not None:
                return u
            logger.debug(f'retry parenthesized: {line!r}')
            u = self._parse_whole('(' + line + ')')
        except RecursionError as e:
            raise NestingTooDeep(line) from e
        if u is not None:
            return u
        raise ParseError(line)

    def _parse_whole(self, s):
        n, u = self._expr(s, 0)
        if not n:
            return None
        i = n + _skip_whitespace(s, n)
        if i != len(s):
            return None
        return u

    def _expr(self, s, i):
        """Return `(n, tree)` for prefix of `s[i:]`.

        `n` is the number of characters consumed.
        If no alternative matches, then `n == 0`.
        """
        ws = _skip_whitespace(s, i)
        j = i + ws
        alternatives = (
            self._true, self._false, self._var,
            self._not, self._binary)
        for parse in alternatives:
            n, u = parse(s, j)
            if n:
                return ws + n, u
        return 0, None

    def _true(self, s, i):
        n = _match_either(s, i, 'T', 'true')
        if not n:
            return 0, None
        return n, self.nodes.Bool(ast.TRUE)

    def _false(self, s, i):
        n = _match_either(s, i, 'F', 'false')
        if not n:
            return 0, None
        return n, self.nodes.Bool(ast.FALSE)

    def _var(self, s, i):
        if not s.startswith('[', i):
            return 0, None
        start = i + 1
        start += _skip_whitespace(s, start)
        end = s.find(']', start)
        if end < 0:
            return 0, None
        name = s[start:end].rstrip(WHITESPACE)
        index = self.variables.resolve(name)
        return end + 1 - i, self.nodes.Var(name, index)

    def _not(self, s, i):
        # negation chains may be longer than the recursion limit
        j = i
        negations = 0
        while True:
            n = _match_either(s, j, '!', 'not')
            if not n:
                break
            negations += 1
            j += n
            j += _skip_whitespace(s, j)
        if not negations:
            return 0, None
        m, x = self._expr(s, j)
        if not m:
            return 0, None
        for _ in range(negations):
            x = self.nodes.Unary(ast.NOT, x)
        return j + m - i, x

    def _binary(self, s, i):
        j = i + _skip_whitespace(s, i)
        if not s.startswith('(', j):
            return 0, None
        j += 1
        # left operand
        n, x = self._expr(s, j)
        if not n:
            return 0, None
        j += n
        # operator
        j += _skip_whitespace(s, j)
        start = j
        while j < len(s) and not _ends_operator(s, j):
            j += 1
        token = s[start:j]
        # right operand
        n, y = self._expr(s, j)
        if not n:
            return 0, None
        j += n
        # closing parenthesis
        j += _skip_whitespace(s, j)
        if not s.startswith(')', j):
            return 0, None
        j += 1
        if token not in OPERATORS:
            return 0, None
        op, swap = OPERATORS[token]
        if swap:
            x, y = y, x
        return j - i, self.nodes.Binary(op, x, y)


def _skip_whitespace(s, i):
    """Return number of whitespace characters at `s[i:]`."""
    j = i
    while j < len(s) and s[j] in WHITESPACE:
        j += 1
    return j - i


def _match_either(s, i, short, word):
    """Return length of `short` or `word` at `s[i:]`, else 0."""
    if s.startswith(short, i):
        return len(short)
    if s.startswith(word, i):
        return len(word)
    return 0


def _ends_operator(s, i):
    c = s[i]
    return (
        c in _OPERAND_CHARS or
        c in WHITESPACE or
        s.startswith(_OPERAND_PREFIXES, i))
