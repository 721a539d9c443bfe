#!/usr/bin/env python3
"""
Wrapping of help text into fixed width, indented lines.
"""
##-- imports
from __future__ import annotations

import logging as logmod

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from optionparser.constants import NEWLINE_PATTERN, WRAP_RATIO

def padding(length:int) -> str:
    return " " * max(0, length)

def _take_line(text:str, pad:int, width:int) -> str:
    """ the head of text that fits in width, preferring to end on a late space """
    line      = text[:width]
    space_pos = line.rfind(" ")
    # a space inside the indent would consume nothing new
    if space_pos > width * WRAP_RATIO and pad <= space_pos:
        line = line[:space_pos + 1]

    return line

def wrap(text:str, pad:int, width:int) -> str:
    """
      Wrap text to fit within `width` columns,
      indenting every continued line by `pad` spaces.

      Line breaks in the text are honoured when they fall within the width.
      Otherwise a line is broken at its last space, if that space is past
      WRAP_RATIO of the width, or hard broken at the width.

      The result always ends in a newline, and no line has trailing whitespace.
    """
    if width <= pad:
        raise ValueError("Wrap width must be greater than the padding", width, pad)

    lines  = []
    spaces = padding(pad)
    text   = text.rstrip()

    while bool(text):
        match NEWLINE_PATTERN.search(text):
            case newline if newline is not None and newline.start() <= width:
                lines.append(text[:newline.start()].rstrip())
                text = text[newline.end():]
            case _:
                line = _take_line(text, pad, width)
                lines.append(line.rstrip())
                text = text[len(line):]

        if bool(text):
            text = spaces + text

    return "\n".join(lines) + "\n"
