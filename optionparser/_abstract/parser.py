#!/usr/bin/env python3
"""
The interface every optionparser parser implements.
"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from abc import abstractmethod
from typing import Any

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgParser_i(abc.ABC):
    """
    A Single standard process point for turning the list of passed in args,
    into the options they name, and the args that named nothing.
    """

    @abstractmethod
    def parse(self, args:None|list[str]=None) -> list[str]:
        pass

    @abstractmethod
    def getopt(self) -> dict[str, Any]:
        pass

    @abstractmethod
    def help(self, pad:None|int=None, gutter:None|int=None, width:None|int=None) -> str:
        pass
