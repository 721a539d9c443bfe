#!/usr/bin/env python3
"""
These are the optionparser specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"InvalidHandlerError",
"MissingValueError",
"OptionParserError",
"ParseError",
"RegistrationError",
"UnknownArgumentPolicyError",
"UnknownNameError",
"ValidationError",

)
# ##-- end Generated Exports

# ##-- 1st party imports
from ._base import OptionParserError, ParseError, RegistrationError
from .parse import MissingValueError, ValidationError, UnknownArgumentPolicyError
from .registration import InvalidHandlerError, UnknownNameError

# ##-- end 1st party imports
