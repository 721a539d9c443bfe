#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import sys
##-- end imports
logging = logmod.root

import pytest

from optionparser.__main__ import build_parser, display, main
from optionparser.structs import LoggerSpec

@pytest.fixture
def run(mocker, capsys):
    mocker.patch("optionparser.utils.env.terminal_width", return_value=80)

    def _run(*args):
        mocker.patch.object(sys, "argv", ["demo", *args])
        main()
        return capsys.readouterr().out

    return _run

class TestDisplay:

    def test_scalar(self, capsys):
        display("a:", "blah")
        assert(capsys.readouterr().out == "a: blah\n")

    def test_nested(self, capsys):
        display("x:", {"b": [1, 2], "a": "v"})
        assert(capsys.readouterr().out == "x:\n    a: v\n    b:\n        - 1\n        - 2\n")

class TestDemoParser:

    def test_build(self):
        parser = build_parser(LoggerSpec(target="pass"))
        assert(len(parser.params) == 10)
        assert("--hidden" not in parser.help(16, 2, 78))

class TestMain:

    def test_flags_and_values(self, run):
        out = run("-b", "-r", "data", "x")
        assert(out == "Boolean\nRequired: data\ngetopt:\n    b: False\n    r: data\nunparsed:\n    - x\n")

    def test_optional_without_value(self, run):
        out = run("-o")
        assert(out == "Optional parameter, no value\ngetopt:\n    o: False\nunparsed:\n")

    def test_optional_with_value(self, run):
        out = run("--optional=blah")
        assert(out == "Optional: blah\ngetopt:\n    optional: blah\nunparsed:\n")

    def test_many_aliases(self, run):
        out = run("-m", "-M", "--multitude", "-9")
        assert(out == "getopt:\n    9: False\n    M: False\n    m: False\n    multitude: False\nunparsed:\n")

    def test_end_marker(self, run):
        out = run("-z", "--", "-b")
        assert(out == "Hidden option triggered\ngetopt:\n    z: False\nunparsed:\n    - -b\n")

    def test_verbose(self, run):
        run("-vv")
        assert(logmod.getLogger("optionparser").level == logmod.DEBUG)
        run()
        assert(logmod.getLogger("optionparser").level == logmod.WARNING)

    def test_validation_failure(self, run, capsys):
        with pytest.raises(SystemExit) as ctx:
            run("--lowercase=ABC")

        assert(ctx.value.code == 1)
        assert(capsys.readouterr().out == "Only lowercase allowed\n")

    def test_validation_success(self, run):
        out = run("--lowercase=abc")
        assert(out == "getopt:\n    lowercase: abc\nunparsed:\n")

    def test_missing_value(self, run, capsys):
        with pytest.raises(SystemExit) as ctx:
            run("-r")

        assert(ctx.value.code == 1)
        assert(capsys.readouterr().out == "Value needed for -r\n")

    def test_help(self, run, capsys):
        with pytest.raises(SystemExit) as ctx:
            run("-?")

        out = capsys.readouterr().out
        assert(ctx.value.code == 0)
        assert(out.startswith("Usage:\n    optionparser-demo [options]\n\nAvailable Options:\n-b, --boolean   Boolean flag\n"))
        assert("--hidden" not in out)
        assert(all(len(x) <= 78 for x in out.splitlines()))
