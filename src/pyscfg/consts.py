# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/17 14:05:40
# @Author : Kariko Lin

from enum import Enum

# False: directive names iterate sorted.
# True: directive names iterate in order of their first appearance.
PRESERVE_ORDER = False

BLOCK_OPEN = '{'
BLOCK_CLOSE = '}'
COMMENT = '#'
INDENT = '\t'


class ErrorKind(str, Enum):
    UNEXPECTED_CLOSING_BRACE = 'unexpected closing brace'
    IO = 'io'
    TOKENIZE = 'tokenize'
