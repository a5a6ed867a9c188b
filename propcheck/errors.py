"""Errors that stop a run before enumeration."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#


class PropcheckError(Exception):
    """Base class of fatal conditions."""


class UsageError(PropcheckError):
    """Command line arguments are wrong."""


class FileOpenError(PropcheckError):
    """Input file cannot be read."""

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f'Cannot open {filename}')


class ParseError(PropcheckError, ValueError):
    """A line is not a formula.

    @param lineno: 1-based line number,
        `None` if the text did not come from a file
    @param line: offending text
    """

    def __init__(self, line, lineno=None):
        self.line = line
        self.lineno = lineno
        if lineno is None:
            msg = f'syntax error: {line!r}'
        else:
            msg = f'syntax error at line {lineno}: {line!r}'
        super().__init__(msg)


class TooManyVariables(PropcheckError, ValueError):
    """More distinct variables than bits in an assignment."""

    def __init__(self, name, limit):
        self.name = name
        self.limit = limit
        super().__init__(
            f'over {limit} propositional variables, '
            f'at variable "{name}"')


class EmptyInput(PropcheckError, ValueError):
    """No proposition to check."""


class NestingTooDeep(ParseError):
    """A line nests deeper than the parser can recurse."""
