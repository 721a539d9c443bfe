#!/usr/bin/env python3
"""
optionparser : Declarative command line option parsing.

Declare options with short (-h) and long (--help) aliases,
parse a list of tokens, and get back what wasn't consumed.
Matched values are available per option, or getopt style for the whole parser.

    parser = OptionParser()
    parser.add_option("h", "help", "Show this help").action(parser.help_action())
    parser.add_option("r", "required", "Needs a value", "required").argument("DATA")
    unparsed = parser.parse(["-r", "blah", "file.txt"])
    parser.get_value("required") # "blah"
    parser.getopt()              # {"r": "blah"}
"""
# Imports:
from __future__ import annotations

from ._interface import __version__
from .enums import ArgPolicy_e
from .structs import OptionParameter
from .parsers import OptionParser
from . import errors

__all__ = ("ArgPolicy_e", "OptionParameter", "OptionParser", "errors", "__version__")
