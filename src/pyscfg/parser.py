# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/17 15:03:48
# @Author : Kariko Lin

"""scfg reader & writer.

Parsing is all-or-nothing. Any error (bad quoting, stray `}`,
unclosed block, stream failure) raises `ParseError` carrying the
physical line number, and no partial document is returned.
"""

import logging
from io import StringIO, TextIOBase
from typing import TextIO

import chardet

from .abstract import FileHandler
from .consts import BLOCK_CLOSE, BLOCK_OPEN, ErrorKind
from .model import Directive, Scfg
from .words import TokenizeError, split

__all__ = ['ParseError', 'ScfgParser', 'document', 'parse']


class ParseError(Exception):
    """To record where and why an scfg document failed to parse."""
    def __init__(
        self, kind: ErrorKind, lineno: int,
        cause: BaseException | None = None
    ) -> None:
        super().__init__(kind, lineno)
        self.kind = kind
        self.lineno = lineno
        self._cause = cause

    @property
    def source(self) -> BaseException | None:
        """The underlying I/O or tokenizer error, if any."""
        return self._cause

    def __str__(self) -> str:
        ret = f'parsing error at line {self.lineno}: '
        match self.kind:
            case ErrorKind.UNEXPECTED_CLOSING_BRACE:
                return ret + "unexpected '}'"
            case ErrorKind.IO:
                return ret + f'io: {self._cause}'
            case _:
                return ret + str(self._cause)


class _BlockReader:
    """Recursive descent over a line stream.

    `lineno` is shared by every nesting level and counts every read,
    blank or comment lines included.
    """
    def __init__(self, buf: TextIO, preserve_order: bool | None) -> None:
        self._buf = buf
        self._order = preserve_order
        self.lineno = 0

    def _readline(self) -> str:
        self.lineno += 1
        try:
            return self._buf.readline()
        except OSError as e:
            raise ParseError(ErrorKind.IO, self.lineno, e) from e

    def read_block(self) -> tuple[Scfg, bool]:
        """Returns `(block, closed)`.

        `closed` is `True` if stopped on a `}` line, `False` on EOF.
        """
        block = Scfg(preserve_order=self._order)
        while line := self._readline():
            line = line.strip()
            try:
                words = split(line)
            except TokenizeError as e:
                raise ParseError(ErrorKind.TOKENIZE, self.lineno, e) from e
            if not words:
                continue

            if len(words) == 1 and line.endswith(BLOCK_CLOSE):
                return block, True

            # `"{"` is a plain word, only a bare brace opens a block.
            if words[-1] == BLOCK_OPEN and line.endswith(BLOCK_OPEN):
                words.pop()
                name = words.pop(0) if words else ''
                child, closed = self.read_block()
                if not closed:
                    eof = EOFError('unexpected end of input')
                    raise ParseError(ErrorKind.IO, self.lineno, eof) from eof
                directive = Directive(params=words, child=child)
            else:
                name = words.pop(0)
                directive = Directive(params=words)
            block.add_directive(name, directive)
        return block, False


def document(buf: TextIO, *, preserve_order: bool | None = None) -> Scfg:
    """Read a whole document from a decoded text stream."""
    reader = _BlockReader(buf, preserve_order)
    ret, closed = reader.read_block()
    if closed:
        raise ParseError(ErrorKind.UNEXPECTED_CLOSING_BRACE, reader.lineno)
    return ret


def parse(text: str, *, preserve_order: bool | None = None) -> Scfg:
    return document(StringIO(text), preserve_order=preserve_order)


class ScfgParser(FileHandler[Scfg]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        preserve_order: bool | None = None
    ) -> None:
        super().__init__(filename, encoding)
        self._order = preserve_order

    @staticmethod
    def readstream(
        buf: TextIOBase, *, preserve_order: bool | None = None
    ) -> Scfg:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return document(buf, preserve_order=preserve_order)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.warning(
            f'"{filename}" is not in the given encoding, '
            f'retrying as {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> Scfg:
        """读取`ScfgParser`实例指定的文件。"""
        logging.debug(f'reading scfg from {self}')
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp, preserve_order=self._order)
        except UnicodeDecodeError:
            return self.readstream(
                self._decode_file(self._fn), preserve_order=self._order)

    def write(self, instance: Scfg) -> None:
        """保存到*一个* scfg 文件。注释不会保留。"""
        logging.debug(f'writing scfg to {self}')
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            instance.write(fp)

    def __str__(self) -> str:
        return "scfg file: " + super().__str__() + f"({self._codec})"
