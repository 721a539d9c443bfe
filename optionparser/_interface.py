#!/usr/bin/env python3
"""
The installed version of optionparser, read from package metadata.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from importlib.metadata import PackageNotFoundError, version
from typing import Final

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ : Final[str] = version("optionparser")
except PackageNotFoundError:
    __version__ = "0.0.0"
