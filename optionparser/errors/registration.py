#!/usr/bin/env python3
"""
Errors raised while declaring options
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import RegistrationError

class InvalidHandlerError(RegistrationError):
    """ Something that isn't callable was given as an action or validation """
    general_msg = "Invalid Handler:"
    pass

class UnknownNameError(RegistrationError, KeyError):
    """ No option was registered under the requested name """
    general_msg = "Unknown Option Name:"

    def __str__(self):
        return RegistrationError.__str__(self)
