"""
Parsers that turn cli tokens into matched options
"""
from .option_parser import OptionParser
