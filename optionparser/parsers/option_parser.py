##-- imports
from __future__ import annotations

import collections
import enum
import logging as logmod
import sys
from typing import Any, Callable, TextIO

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import more_itertools as mitz

import optionparser.errors as errors
from optionparser._abstract import ArgParser_i
from optionparser.constants import (DEFAULT_AUTOCOMPLETE, DEFAULT_CMDLINE,
                                    DEFAULT_SCAN_ALL, END_MARKER, LONG_PREFIX,
                                    SHORT_PREFIX, VALUE_SEP)
from optionparser.enums import ArgPolicy_e
from optionparser.structs import OptionParameter
from optionparser.utils import env

class OptionParser(ArgParser_i):
    """
    Matches a list of cli tokens against registered OptionParameters.

    Tokens are consumed from the front of a queue,
    and parts of a token can be pushed back for rescanning
    (eg: the '-bc' of '-abc', once '-a' has been handled).

    Long options resolve by exact match, then unique abbreviation (if autocompleting),
    then the first wildcard option.
    Short options resolve by exact match, then the first wildcard option.

    parse returns the tokens no option consumed.
    Not safe for concurrent parses: each parameter records its occurrences in place.
    """

    class _Token(enum.Enum):
        END   = enum.auto()
        LONG  = enum.auto()
        SHORT = enum.auto()
        BARE  = enum.auto()

    def __init__(self, *, autocomplete:None|bool=None, scan_all:None|bool=None, program_name:None|str=None):
        self.TK                                          = OptionParser._Token
        self.params           : list[OptionParameter]      = []
        self.named            : dict[str, OptionParameter] = {}
        self._program_name    : None|str                   = program_name
        self._do_autocomplete : bool                       = DEFAULT_AUTOCOMPLETE
        self._do_scan_all     : bool                       = DEFAULT_SCAN_ALL

        if autocomplete is not None:
            self.autocomplete(autocomplete)
        if scan_all is not None:
            self.scan_all(scan_all)

    def __getattr__(self, name:str) -> OptionParameter:
        """ Named options are available as attributes, unless a method has the name """
        named = self.__dict__.get("named", {})
        if name in named:
            return named[name]

        raise AttributeError(name)

    def __getitem__(self, name:str) -> OptionParameter:
        return self.get(name)

    def __contains__(self, name:str) -> bool:
        return name in self.named

    ##-- configuration

    def add_option(self, short:None|str|list[str], long:None|str|list[str], desc:None|str=None, name:None|str=None) -> OptionParameter:
        """ Register an option. Returns it for further building, eg: .argument("FILE") """
        param = OptionParameter(short=short, long=long, desc=desc)
        self.params.append(param)
        if name:
            self.named[name] = param

        logging.debug("Added Option: %s (%s)", repr(param), name)
        return param

    def autocomplete(self, flag:bool) -> OptionParser:
        """ Allow unique abbreviations of long options, eg: --verb for --verbose """
        self._do_autocomplete = bool(flag)
        return self

    def scan_all(self, flag:bool) -> OptionParser:
        """ Keep parsing past non-option tokens, instead of stopping at the first one """
        self._do_scan_all = bool(flag)
        return self

    def program_name(self, new_name:None|str=None) -> str:
        if new_name is not None:
            self._program_name = new_name

        if self._program_name is None:
            self._program_name = env.program_name()

        return self._program_name

    ##-- end configuration

    ##-- access

    def get(self, name:str) -> OptionParameter:
        match self.named.get(name, None) if name else None:
            case None:
                raise errors.UnknownNameError("No parameter named %s", name)
            case found:
                return found

    def get_value(self, name:str) -> None|int|str:
        return self.get(name).value()

    def getopt(self) -> dict[str, Any]:
        """ Every option's getopt values, keyed by the alias used on the command line """
        result = {}
        for param in self.params:
            result.update(param.getopt())

        return result

    def help(self, pad:None|int=None, gutter:None|int=None, width:None|int=None) -> str:
        return "".join(x.render_help(pad, gutter, width) for x in self.params)

    def help_action(self, cmdline:str=DEFAULT_CMDLINE, stream:None|TextIO=None) -> Callable[..., None]:
        """ Build an action that prints usage and help, then exits.
        eg: parser.add_option("h", "help", "Show this help").action(parser.help_action())
        """

        def _help_action(value:None|str=None) -> None:
            target = stream or sys.stdout
            print("Usage:", file=target)
            print(f"    {self.program_name()} {cmdline}", file=target)
            print("", file=target)
            print("Available Options:", file=target)
            print(self.help().rstrip("\n"), file=target)
            env.exit(0)

        return _help_action

    ##-- end access

    ##-- matching

    def match_long(self, name:str) -> tuple[None|OptionParameter, str]:
        """ Find the option for a long name, and the alias it matched as """
        match mitz.first_true(self.params, pred=lambda x: x.matches_long(name)):
            case OptionParameter() as found:
                return found, name
            case None:
                pass

        if self._do_autocomplete:
            match [(alias, x) for x in self.params for alias in x.autocomplete(name)]:
                case [(alias, found)]:
                    logging.debug("Autocompleted %s to %s", name, alias)
                    return found, alias
                case []:
                    pass
                case [*xs]:
                    logging.debug("Ambiguous abbreviation %s : %s", name, [x[0] for x in xs])

        return mitz.first_true(self.params, pred=lambda x: x.matches_wildcard()), name

    def match_short(self, char:str) -> None|OptionParameter:
        """ A lone '-' has an empty char, which only a wildcard can match """
        match mitz.first_true(self.params, pred=lambda x: x.matches_short(char)):
            case OptionParameter() as found:
                return found
            case None:
                return mitz.first_true(self.params, pred=lambda x: x.matches_wildcard())

    ##-- end matching

    ##-- parsing

    def _classify(self, token:str) -> OptionParser._Token:
        match token:
            case str() if token == END_MARKER:
                return self.TK.END
            case str() if token.startswith(LONG_PREFIX):
                return self.TK.LONG
            case str() if token.startswith(SHORT_PREFIX):
                return self.TK.SHORT
            case _:
                return self.TK.BARE

    def parse(self, args:None|list[str]=None) -> list[str]:
        """
          Consume the args, calling the matched options.
          With no args, uses the process arguments, and learns the program name.
          Returns the args that weren't consumed by an option.
        """
        match args:
            case None:
                args = env.argv()
                if self._program_name is None:
                    self._program_name = env.program_name()
            case str() | bytes():
                raise errors.ParseError("Unable to parse options - they are not a list: %s", args)
            case _:
                pass

        logging.debug("Parsing args: %s", args)
        queue    : collections.deque[str] = collections.deque(args)
        unparsed : list[str]              = []

        while bool(queue):
            match self._classify(queue[0]):
                case self.TK.END:
                    queue.popleft()
                    return unparsed + list(queue)
                case self.TK.LONG:
                    self._parse_long(queue, unparsed)
                case self.TK.SHORT:
                    self._parse_short(queue, unparsed)
                case self.TK.BARE if self._do_scan_all:
                    unparsed.append(queue.popleft())
                case self.TK.BARE:
                    logging.debug("Stopping at first non-option: %s", queue[0])
                    return unparsed + list(queue)

        return unparsed

    def _parse_long(self, queue:collections.deque[str], unparsed:list[str]) -> None:
        """ handles --name, --name=value, and --name value """
        body = queue.popleft().removeprefix(LONG_PREFIX)
        match body.partition(VALUE_SEP):
            case (name, sep, inline) if bool(name) and bool(sep):
                pass
            case _:
                name, inline = body, None

        found, alias = self.match_long(name)
        if found is None:
            logging.debug("Unmatched long option: %s", name)
            unparsed.append(self._reconstruct(name, inline))
            return

        match found.uses_argument():
            case ArgPolicy_e.NONE:
                found.handle(alias, None)
                if inline is not None:
                    # the value becomes its own token
                    queue.appendleft(f"{VALUE_SEP}{inline}")
            case ArgPolicy_e.REQUIRED:
                if inline is None:
                    if not bool(queue):
                        raise errors.MissingValueError(f"{LONG_PREFIX}{alias}", found)
                    inline = queue.popleft()

                found.handle(alias, inline)
            case ArgPolicy_e.OPTIONAL:
                # only --name=value supplies a value
                found.handle(alias, inline)
            case x:
                raise errors.UnknownArgumentPolicyError(x)

    def _parse_short(self, queue:collections.deque[str], unparsed:list[str]) -> None:
        """ handles -x, -xyz clusters, -xvalue, -x=value, and -x value """
        token      = queue.popleft()
        char, rest = token[1:2], token[2:]
        found      = self.match_short(char)

        if found is None:
            logging.debug("Unmatched short option: %s", char)
            unparsed.append(f"{SHORT_PREFIX}{char}")
            if bool(rest):
                queue.appendleft(f"{SHORT_PREFIX}{rest}")
            return

        match found.uses_argument():
            case ArgPolicy_e.NONE:
                found.handle(char, None)
                if bool(rest):
                    queue.appendleft(f"{SHORT_PREFIX}{rest}")
            case ArgPolicy_e.REQUIRED if bool(rest):
                found.handle(char, rest.removeprefix(VALUE_SEP))
            case ArgPolicy_e.REQUIRED if bool(queue):
                found.handle(char, queue.popleft())
            case ArgPolicy_e.REQUIRED:
                raise errors.MissingValueError(f"{SHORT_PREFIX}{char}", found)
            case ArgPolicy_e.OPTIONAL if rest.startswith(VALUE_SEP):
                found.handle(char, rest.removeprefix(VALUE_SEP))
            case ArgPolicy_e.OPTIONAL:
                found.handle(char, None)
                if bool(rest):
                    queue.appendleft(f"{SHORT_PREFIX}{rest}")
            case x:
                raise errors.UnknownArgumentPolicyError(x)

    def _reconstruct(self, name:str, inline:None|str) -> str:
        match inline:
            case None:
                return f"{LONG_PREFIX}{name}"
            case _:
                return f"{LONG_PREFIX}{name}{VALUE_SEP}{inline}"

    ##-- end parsing
