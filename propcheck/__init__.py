"""Decide propositional consequence by truth-table enumeration."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
from propcheck._version import version as __version__
