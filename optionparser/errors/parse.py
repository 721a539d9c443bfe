#!/usr/bin/env python3
"""
Errors raised while consuming tokens
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import OptionParserError, ParseError

if TYPE_CHECKING:
    from optionparser.structs.option_param import OptionParameter

class MissingValueError(ParseError):
    """ An option requiring a value was the last token. """
    general_msg = "Missing Option Value:"

    def __init__(self, token:str, option:None|OptionParameter=None):
        super().__init__("Value needed for %s", token)
        self.token  = token
        self.option = option

class ValidationError(ParseError):
    """ An option's validator rejected the value it was given. """
    general_msg = "Option Validation Failure:"

    def __init__(self, message:str, option:OptionParameter):
        super().__init__(message)
        self.message = message
        self.option  = option

    def __str__(self):
        return str(self.message)

class UnknownArgumentPolicyError(OptionParserError):
    """ An option carried an argument policy the parser doesn't handle """
    general_msg = "Invalid Argument Policy:"

    def __init__(self, policy:Any):
        super().__init__("Invalid OptionParameter argument type: %s", policy)
        self.policy = policy
