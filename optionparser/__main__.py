#!/usr/bin/env python3
"""
A demonstration cli, exercising each kind of option.
Prints the getopt results and unparsed args of whatever it is given.

eg: python -m optionparser -bo=val --required data -- -z
"""
# Imports:
from __future__ import annotations

import logging as logmod
import re
from typing import Any

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import optionparser.errors as errors
from optionparser.parsers import OptionParser
from optionparser.structs import LoggerSpec
from optionparser.utils import env

INDENT          = 4
LOWERCASE       = re.compile(r"^[a-z]+$")

def _lowercase_only(value:str) -> None|str:
    if not LOWERCASE.match(value):
        return "Only lowercase allowed"
    return None

def build_parser(log_spec:LoggerSpec) -> OptionParser:
    parser    = OptionParser(program_name="optionparser-demo")
    verbosity = 0

    def _more_verbose(value:None|str) -> None:
        nonlocal verbosity
        verbosity += 1
        log_spec.apply(verbosity=verbosity)

    parser.add_option("b", "boolean", "Boolean flag").action(lambda _: print("Boolean"))
    parser.add_option(["h", "?"], "help", "This help message").action(parser.help_action())
    parser.add_option("v", "verbose", "Log more, repeatable").action(_more_verbose)
    parser.add_option("z", "hidden").action(lambda _: print("Hidden option triggered"))
    (parser.add_option(None, "lowercase", "Only allows lowercase values")
     .argument("STRING")
     .validation(_lowercase_only))
    parser.add_option(["m", "M", "9"], ["many-ways", "multitude"], "Option can be used many ways")
    (parser.add_option("o", "optional", "Optional argument")
     .argument("VALUE", False)
     .action(lambda x: print("Optional parameter, no value" if x is None else f"Optional: {x}")))
    (parser.add_option("r", "required", "Required argument")
     .argument("DATA")
     .action(lambda x: print(f"Required: {x}")))
    parser.add_option("s", None, "This option should just barely wrap-around-to-the-next-line-but-it-should-chop-this-super-long-word up.")
    parser.add_option(["w", "W"], "wrapping-of-long-description",
                      "This is a very long description of an option.  It ensures that the text will wrap around and around.  By forcing it to be extremely long we can confirm that implementations perform the proper wrapping and line breaks in the right locations.")
    return parser

def display(label:str, value:Any, indent:int=0) -> None:
    """ print nested results, with sorted keys, one value per line """
    match value:
        case dict():
            print(label)
            for key in sorted(value.keys()):
                display(f"{' ' * (indent + INDENT)}{key}:", value[key], indent + INDENT)
        case list() | tuple():
            print(label)
            for item in value:
                display(f"{' ' * (indent + INDENT)}-", item, indent + INDENT)
        case _:
            print(f"{label} {value}")

def main() -> None:
    log_spec = LoggerSpec()
    log_spec.apply()
    parser   = build_parser(log_spec)

    try:
        unparsed = parser.parse()
    except errors.OptionParserError as err:
        logging.debug("Parse failed", exc_info=err)
        print(err)
        env.exit(1)

    result = {"getopt": parser.getopt(), "unparsed": unparsed}
    for key in sorted(result):
        display(f"{key}:", result[key])

if __name__ == "__main__":
    main()
