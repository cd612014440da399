"""This module provides a line-oriented parser for INI-style configuration text."""

from .exceptions import EncodingError, IniError, LineTooLongError
from .ini import Config, Kind, ParseResult, iterparse, load, loads, parse, strip_comment
from .reader import ReaderSettings, detect_encoding, read_lines
from .report import describe
