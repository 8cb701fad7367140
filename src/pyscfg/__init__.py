# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 15:40:12
# @Author : Kariko Lin

"""scfg, a simple line oriented configuration format.

See https://git.sr.ht/~emersion/scfg for the format itself.
"""

from .consts import ErrorKind
from .model import Directive, Scfg
from .parser import ParseError, ScfgParser, document, parse
from .words import TokenizeError, join, quote, split

__all__ = [
    'Scfg', 'Directive',
    'ParseError', 'ErrorKind', 'TokenizeError',
    'ScfgParser', 'document', 'parse',
    'split', 'quote', 'join'
]
