#!/usr/bin/env python3
"""
The few facts optionparser needs from the running process:
its arguments, its name, the terminal width, and a way to exit.

Kept as module level functions so tests can patch them.
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
import shutil
import sys
from typing import NoReturn

import __main__
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from optionparser.constants import DEFAULT_WIDTH

def argv() -> list[str]:
    """ The process arguments, without the program itself """
    return sys.argv[1:]

def terminal_width() -> int:
    """ Columns of the attached terminal, or the default width """
    return shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH

def process_name() -> tuple[str, str]:
    """ (interpreter, script) as the process was invoked """
    interpreter = pl.Path(sys.executable or "python").name
    match getattr(__main__, "__spec__", None), sys.argv[:1]:
        case None, [script, *_]:
            return interpreter, script
        case spec, _ if spec is not None:
            return interpreter, spec.name.removesuffix(".__main__")
        case _:
            return interpreter, ""

def program_name() -> str:
    """ A display name for the program, for usage messages """
    interpreter, script = process_name()
    match getattr(__main__, "__spec__", None), script:
        case _, "" | "-c":
            return interpreter
        case None, str():
            return pl.Path(script).name
        case _, str():
            return f"{interpreter} -m {script}"

def exit(status:int=0) -> NoReturn:
    logging.debug("Exiting with status: %s", status)
    sys.exit(status)
