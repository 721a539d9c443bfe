"""
Abstract interfaces for optionparser
"""
from .parser import ArgParser_i
