#!/usr/bin/env python3
"""
The enums used to convey option information around optionparser.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class ArgPolicy_e(enum.Enum):
    """
      How an option consumes a value.

      NONE     : a flag, never takes a value.
      REQUIRED : takes a value, from '=', the rest of a short cluster, or the next token.
      OPTIONAL : takes a value only when given with '='.
    """

    NONE     = enum.auto()
    REQUIRED = enum.auto()
    OPTIONAL = enum.auto()
