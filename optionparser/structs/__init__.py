"""
The data structures of optionparser
"""
from .option_param import OptionParameter
from .logger_spec import LoggerSpec
