#!/usr/bin/env python3
"""
Library defaults.
Read once, on import, from the packaged __data/constants.toml.
Each value falls back to an in-code default if the file lacks it.
"""
##-- std imports
from __future__ import annotations

import re
from importlib import resources
from typing import Final

##-- end std imports

import tomlguard

CONSTANTS_FILE     : Final                   = resources.files("optionparser.__data").joinpath("constants.toml")

_data                                        = tomlguard.read(CONSTANTS_FILE.read_text())

##-- layout
DEFAULT_PAD        : Final[int]              = _data.on_fail(16, int).layout.pad()
DEFAULT_GUTTER     : Final[int]              = _data.on_fail(2, int).layout.gutter()
DEFAULT_WIDTH      : Final[int]              = _data.on_fail(80, int).layout.width()
WRAP_RATIO         : Final[float]            = _data.on_fail(0.8, float).layout.wrap_ratio()
DEFAULT_CMDLINE    : Final[str]              = _data.on_fail("[options]", str).layout.cmdline()
##-- end layout

##-- parsing
DEFAULT_AUTOCOMPLETE : Final[bool]           = _data.on_fail(False, bool).parsing.autocomplete()
DEFAULT_SCAN_ALL     : Final[bool]           = _data.on_fail(True, bool).parsing.scan_all()
END_MARKER           : Final[str]            = _data.on_fail("--", str).parsing.end_marker()
WILDCARDS            : Final[frozenset[str]] = frozenset(_data.on_fail(["*", "-"], list).parsing.wildcards())
##-- end parsing

##-- logging
LOG_NAME           : Final[str]              = _data.on_fail("optionparser", str).logging.name()
LOG_LEVEL          : Final[str]              = _data.on_fail("WARNING", str).logging.level()
LOG_FORMAT         : Final[str]              = _data.on_fail("{levelname:<8} : {message}", str).logging.format()
LOG_TARGET         : Final[str]              = _data.on_fail("stderr", str).logging.target()
##-- end logging

LONG_PREFIX        : Final[str]              = "--"
SHORT_PREFIX       : Final[str]              = "-"
VALUE_SEP          : Final[str]              = "="
NEWLINE_PATTERN    : Final[re.Pattern]       = re.compile(r"\r\n|\n|\r")
