#!/usr/bin/env python3
"""
The declaration of a single command line option,
and the record of how it was used.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, Callable, ClassVar

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, PrivateAttr, field_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
import optionparser.errors as errors
from optionparser.constants import (DEFAULT_GUTTER, DEFAULT_PAD, DEFAULT_WIDTH,
                                    LONG_PREFIX, SHORT_PREFIX, VALUE_SEP,
                                    WILDCARDS)
from optionparser.enums import ArgPolicy_e
from optionparser.utils import env
from optionparser.utils.text_wrap import padding, wrap

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

type_Handler   = Callable[[None|str], Any]
type_Validator = Callable[[str], None|str]

def _or_default(val:None|int, default:int) -> int:
    match val:
        case None:
            return default
        case int() if val < 0:
            return default
        case _:
            return val

class OptionParameter(BaseModel, arbitrary_types_allowed=True):
    """ Describes a single command line option for the OptionParser.
      Matches short ('-x') and long ('--ex') aliases,
      and records every time it was matched.

      Build fluently:
      OptionParameter(short="r", long="required", desc="..").argument("DATA").action(fn)

      Occurrences are recorded twice:
      as a plain history of values, and in getopt form,
      keyed by the alias that was actually used.
    """

    short              : list[str]                 = []
    long               : list[str]                 = []
    desc               : None|str                  = None
    arg_name           : None|str                  = None
    arg_policy         : ArgPolicy_e               = ArgPolicy_e.NONE
    action_fn          : None|Callable             = None
    validation_fn      : None|Callable             = None

    _values            : list[None|str]            = PrivateAttr(default_factory=list)
    _getopt            : dict[str, Any]            = PrivateAttr(default_factory=dict)
    _wildcards         : ClassVar[frozenset[str]]  = WILDCARDS

    @field_validator("short", "long", mode="before")
    def _validate_aliases(cls, val):
        match val:
            case None | "":
                return []
            case str():
                return [val]
            case list() | tuple():
                return list(val)
            case _:
                return val

    @field_validator("short")
    def _validate_short(cls, val):
        if any(len(x) != 1 for x in val):
            raise ValueError("Short options must be single characters", val)
        return val

    @field_validator("long")
    def _validate_long(cls, val):
        if not all(bool(x) for x in val):
            raise ValueError("Long options can't be empty", val)
        return val

    def __repr__(self):
        return f"<OptionParameter: {self}>"

    def __str__(self):
        return "/".join([f"{SHORT_PREFIX}{x}" for x in self.short] + [f"{LONG_PREFIX}{x}" for x in self.long])

    ##-- builder

    def argument(self, name:str, required:bool=True) -> OptionParameter:
        """ Declare that this option takes a value, named `name` in help """
        self.arg_name = name
        match bool(required):
            case True:
                self.arg_policy = ArgPolicy_e.REQUIRED
            case False:
                self.arg_policy = ArgPolicy_e.OPTIONAL

        return self

    def action(self, fn:type_Handler) -> OptionParameter:
        """ Run fn(value) each time this option is matched """
        self._check_callable(fn)
        self.action_fn = fn
        return self

    def validation(self, fn:type_Validator) -> OptionParameter:
        """ Check values with fn(value), which returns an error message to reject """
        self._check_callable(fn)
        self.validation_fn = fn
        return self

    def _check_callable(self, fn:Any) -> None:
        if callable(fn):
            return

        raise errors.InvalidHandlerError("Invalid closure specified for %s: %s", str(self), fn)

    ##-- end builder

    ##-- matching

    def matches_short(self, arg:str) -> bool:
        return arg in self.short

    def matches_long(self, arg:str) -> bool:
        return arg in self.long

    def matches_wildcard(self) -> bool:
        return any(x in self._wildcards for x in self.short)

    def autocomplete(self, prefix:str) -> list[str]:
        """ The long aliases that `prefix` abbreviates """
        return [x for x in self.long if x.startswith(prefix)]

    def uses_argument(self) -> ArgPolicy_e:
        return self.arg_policy

    ##-- end matching

    def handle(self, matched:str, value:None|str=None) -> OptionParameter:
        """
          Record one occurrence of this option, matched as `matched`.
          Validates the value, runs the action, then stores the value.
          A rejected value stores nothing.
        """
        if value is not None and self.validation_fn is not None:
            if (message:=self.validation_fn(value)) is not None:
                raise errors.ValidationError(message, self)

        logging.debug("Handling %s : %s = %s", repr(self), matched, value)
        if self.action_fn is not None:
            self.action_fn(value)

        self._values.append(value)
        getopt_value = False
        if self.arg_policy is not ArgPolicy_e.NONE and value is not None:
            getopt_value = value

        match matched in self._getopt, self._getopt.get(matched):
            case False, _:
                self._getopt[matched] = getopt_value
            case True, list() as existing:
                existing.append(getopt_value)
            case True, existing:
                self._getopt[matched] = [existing, getopt_value]

        return self

    ##-- accessors

    def count(self) -> int:
        return len(self._values)

    def occurrence_count(self) -> int:
        return self.count()

    def occurrence_values(self) -> list[None|str]:
        return self._values[:]

    def values(self) -> int|list[None|str]:
        """ The values seen, or for flags, the number of times seen """
        if self.arg_name is None:
            return self.count()

        return self.occurrence_values()

    def value(self) -> None|int|str:
        """ The last value seen, or for flags, the number of times seen """
        match self.values():
            case int() as count:
                return count
            case []:
                return None
            case [*_, last]:
                return last

    def getopt(self) -> dict[str, Any]:
        return {x: (y[:] if isinstance(y, list) else y) for x,y in self._getopt.items()}

    ##-- end accessors

    ##-- help

    def alias_str(self) -> str:
        """ eg: '-r, --required DATA' or '-o, --optional[=VALUE]' """
        aliases = ", ".join([f"{SHORT_PREFIX}{x}" for x in self.short] + [f"{LONG_PREFIX}{x}" for x in self.long])
        match self.arg_policy:
            case ArgPolicy_e.REQUIRED:
                return f"{aliases} {self.arg_name}"
            case ArgPolicy_e.OPTIONAL:
                return f"{aliases}[{VALUE_SEP}{self.arg_name}]"
            case _:
                return aliases

    def render_help(self, pad:None|int=None, gutter:None|int=None, width:None|int=None) -> str:
        """
          The help entry for this option, aliases on the left, description from column `pad`.
          Aliases too wide for the left column get their own line(s).
          Hidden options (no desc) render as an empty string.
        """
        if self.desc is None:
            return ""

        pad     = _or_default(pad, DEFAULT_PAD)
        gutter  = _or_default(gutter, DEFAULT_GUTTER)
        if width is None or width < 0:
            width = self._terminal_width(pad, gutter)

        aliases = self.alias_str()
        text    = wrap(padding(pad) + self.desc, pad, width)

        if pad - gutter < len(aliases):
            return wrap(aliases, 0, width) + text

        first, _, remainder = text.partition("\n")
        line                = (aliases + first[len(aliases):]).rstrip()
        return f"{line}\n{remainder}"

    def _terminal_width(self, pad:int, gutter:int) -> int:
        """ terminals too narrow for the description column use the default width """
        width = env.terminal_width() - gutter
        if width <= pad:
            return max(DEFAULT_WIDTH - gutter, pad + 1)

        return width

    ##-- end help
