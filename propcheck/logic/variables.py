"""Table of propositional variables.

Each distinct name gets the next free index,
in the order that names first appear in the input.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from propcheck.errors import TooManyVariables


logger = logging.getLogger(__name__)
MAX_VARIABLES = 32
WHITESPACE = ' \t\n\v\f\r'


class VariableTable(object):
    """Map variable names to bit indices.

    Indices are never reassigned. The table only grows,
    and holds at most `MAX_VARIABLES` names, so that
    any assignment fits in that many bits.
    """

    def __init__(self):
        self.names = list()
        self._index = dict()  # name -> index

    def __repr__(self):
        return '{c}({names})'.format(
            c=type(self).__name__, names=self.names)

    def __len__(self):
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __contains__(self, name):
        return name.strip(WHITESPACE) in self._index

    def index(self, name):
        """Return index of registered `name`.

        Raise `KeyError` if `name` is not registered.
        """
        return self._index[name.strip(WHITESPACE)]

    def resolve(self, name):
        """Return index of `name`, registering it if new.

        Raise `TooManyVariables` if `name` would be
        variable number `MAX_VARIABLES + 1`.
        """
        name = name.strip(WHITESPACE)
        i = self._index.get(name)
        if i is not None:
            return i
        i = len(self.names)
        if i >= MAX_VARIABLES:
            raise TooManyVariables(name, MAX_VARIABLES)
        self.names.append(name)
        self._index[name] = i
        logger.debug(f'variable "{name}" has index {i}')
        return i

    def assignment(self, mask):
        """Return `list` of `(name, value)` pairs under `mask`.

        Pairs are ordered by index.
        """
        return [
            (name, bool((mask >> i) & 1))
            for i, name in enumerate(self.names)]
