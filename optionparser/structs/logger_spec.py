#!/usr/bin/env python3
"""
Logging configuration described as data, applied to a named logger.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys
from typing import ClassVar, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, Field, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from optionparser.constants import LOG_FORMAT, LOG_LEVEL, LOG_NAME, LOG_TARGET

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS : Final[list[str]] = ["stdout", "stderr", "pass"]

class LoggerSpec(BaseModel):
    """
      A Spec for toml defined logging control.
      Names a logger, sets its level and format,
      and what stream it writes to.

      When 'apply' is called, it gets the logger,
      and sets any relevant settings on it.
      Each verbosity step lowers the level by one stdlib level (10).
    """

    name                       : str                         = LOG_NAME
    disabled                   : bool                        = False
    level                      : str|int                     = Field(default=LOG_LEVEL, validate_default=True)
    format                     : str                         = LOG_FORMAT
    target                     : None|str                    = Field(default=LOG_TARGET, validate_default=True)
    propagate                  : bool                        = False

    RootName                   : ClassVar[str]               = "root"

    @staticmethod
    def build(data:dict|TomlGuard, **kwargs) -> LoggerSpec:
        match data:
            case TomlGuard():
                as_dict = dict(data._table())
                as_dict.update(kwargs)
                return LoggerSpec.model_validate(as_dict)
            case dict():
                as_dict = data.copy()
                as_dict.update(kwargs)
                return LoggerSpec.model_validate(as_dict)
            case _:
                raise TypeError("Unknown data for LoggerSpec", data)

    @field_validator("level")
    def _validate_level(cls, val):
        match val:
            case int():
                return val
            case str():
                return logmod._nameToLevel.get(val.upper(), logmod.WARNING)

    @field_validator("target")
    def _validate_target(cls, val):
        match val:
            case None:
                return "stderr"
            case str() if val in TARGETS:
                return val
            case _:
                raise ValueError("Unknown target value for LoggerSpec", val)

    def _build_handler(self) -> None|logmod.Handler:
        match self.target:
            case "stdout":
                return logmod.StreamHandler(sys.stdout)
            case "stderr":
                return logmod.StreamHandler(sys.stderr)
            case _:
                return None

    def get(self) -> logmod.Logger:
        match self.name:
            case self.RootName:
                return logmod.getLogger()
            case _:
                return logmod.getLogger(self.name)

    def apply(self, *, verbosity:int=0) -> logmod.Logger:
        """ Configure the named logger, replacing handlers this spec added before """
        logger        = self.get()
        logger.disabled = self.disabled
        logger.propagate = self.propagate
        logger.setLevel(max(logmod.DEBUG, self.level - (10 * max(0, verbosity))))

        for handler in logger.handlers[:]:
            if getattr(handler, "_from_logger_spec", False):
                logger.removeHandler(handler)

        match self._build_handler():
            case None:
                pass
            case handler:
                handler._from_logger_spec = True
                handler.setFormatter(logmod.Formatter(fmt=self.format, style="{"))
                logger.addHandler(handler)

        logging.debug("Applied LoggerSpec to %s at level %s", logger.name, logger.level)
        return logger
