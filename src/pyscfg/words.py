# -*- encoding: utf-8 -*-
# @File   : words.py
# @Time   : 2026/10/17 14:11:27
# @Author : Kariko Lin

"""Shell-style words, which is how scfg lines are tokenized.

    ```
    dir4 "param 1" 'param 2'   ->  ['dir4', 'param 1', 'param 2']
    ```

`shlex` in POSIX mode already does the quoting and unquoting,
we only decide what a comment line is and how errors look like.
"""

import shlex
from typing import Iterable

from .consts import COMMENT

__all__ = ['TokenizeError', 'split', 'quote', 'join']


class TokenizeError(ValueError):
    """A line could not be split into words,
    e.g. unterminated quote or a dangling backslash."""
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(reason)
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.reason.lower()}: {self.line!r}'


def split(line: str) -> list[str]:
    """Split one line into words.

    An unquoted word starting with `#` comments out the rest of the line,
    so blank and comment lines give an empty list.
    A `#` inside a word (`a#b`) or quoted (`'#x'`) is an ordinary character.
    """
    # `shlex` comments would also cut `a#b`, check word starts ourselves.
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ''
    ret: list[str] = []
    while True:
        # lexer reads `instream` char by char, so `tell()` is where it stopped.
        rest = line[lexer.instream.tell():].lstrip(lexer.whitespace)
        if not rest or rest.startswith(COMMENT):
            return ret
        try:
            word = lexer.get_token()
        except ValueError as e:
            raise TokenizeError(line, str(e)) from e
        if word is None:
            return ret
        ret.append(word)


def quote(word: str) -> str:
    # empty word -> '', unsafe chars -> single quoted, `'` -> '"'"'
    return shlex.quote(word)


def join(words: Iterable[str]) -> str:
    return ' '.join(quote(i) for i in words)
