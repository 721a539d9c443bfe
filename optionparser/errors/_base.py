#!/usr/bin/env python3
"""
The root of the optionparser error hierarchy.
"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class OptionParserError(Exception):
    """
      The base class for all optionparser errors.
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Option Parser Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, ValueError):
            return str(self.args)

class ParseError(OptionParserError):
    """ In the course of consuming CLI tokens, a failure occurred. """
    general_msg = "CLI Parsing Failure:"
    pass

class RegistrationError(OptionParserError):
    """ An option was declared in a way the parser can't use. """
    general_msg = "Option Registration Failure:"
    pass
