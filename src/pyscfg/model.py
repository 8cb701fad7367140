# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/17 14:26:03
# @Author : Kariko Lin

"""scfg document structure.

    ```
    train "Shinkansen" {
        model "E5" {
            max-speed 320km/h
            lines-served "Tōhoku" "Hokkaido"
        }
        model "E7" {
            max-speed 275km/h
        }
    }
    ```

A document is a multimap: one name (`model` above) may own several
directives, and each directive may own a child document.
No comment survives here, they are dropped while parsing.
"""

import warnings
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from io import StringIO
from typing import Iterable, Iterator, Sequence, TextIO

from . import consts
from .words import quote

__all__ = ['Scfg', 'Directive']

# whatever `str.splitlines()` breaks on.
_LINE_BREAKS = '\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029'


def _check_word(kind: str, word: str) -> None:
    if any(i in word for i in _LINE_BREAKS):
        warnings.warn(
            f'{kind} {word!r} contains a line break, '
            'the serialized document would not parse back.')


class Scfg(MutableMapping[str, list['Directive']]):
    """An scfg document, or the child block of a directive.

    Names iterate sorted by default. Set `preserve_order=True`
    (or the class attribute, for every new document)
    to iterate them in order of their first appearance instead.
    Directives under the same name always keep insertion order.
    """
    preserve_order = consts.PRESERVE_ORDER

    def __init__(self, *, preserve_order: bool | None = None) -> None:
        if preserve_order is not None:
            self.preserve_order = preserve_order
        self.__data: dict[str, list[Directive]] = {}

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, 'Directive']], *,
        preserve_order: bool | None = None
    ) -> 'Scfg':
        ret = cls(preserve_order=preserve_order)
        for name, directive in pairs:
            ret.add_directive(name, directive)
        return ret

    # a bucket emptied in place (`get_all_mut(...).clear()`)
    # reads as a missing name everywhere.
    def __getitem__(self, name: str) -> list['Directive']:
        if not (bucket := self.__data.get(name)):
            raise KeyError(name)
        return bucket

    def __setitem__(
        self, name: str, value: 'Directive | Sequence[Directive]'
    ) -> None:
        if isinstance(value, Directive):
            value = [value]
        # a name never maps to an empty bucket.
        if not value:
            self.__data.pop(name, None)
            return
        _check_word('directive name', name)
        self.__data[name] = list(value)
        for i in self.__data[name]:
            i._order = self.preserve_order

    def __delitem__(self, name: str) -> None:
        if not self.__data.pop(name, None):
            raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return bool(self.__data.get(name))

    def __iter__(self) -> Iterator[str]:
        names = [k for k, v in self.__data.items() if v]
        if self.preserve_order:
            return iter(names)
        return iter(sorted(names))

    def __len__(self) -> int:
        return sum(1 for i in self.__data.values() if i)

    def get(self, name: str, default=None) -> 'Directive | None':
        """The first directive named `name`, or `default`.

        Note: unlike `dict.get()`, this is NOT the whole bucket.
        Use `get_all()` or `self[name]` for that.
        """
        if not (bucket := self.__data.get(name)):
            return default
        return bucket[0]

    def get_all(self, name: str) -> 'tuple[Directive, ...] | None':
        if not (bucket := self.__data.get(name)):
            return None
        return tuple(bucket)

    def get_all_mut(self, name: str) -> 'list[Directive] | None':
        """Same as `get_all()`, but the list itself, editable in place."""
        if not (bucket := self.__data.get(name)):
            return None
        return bucket

    def contains(self, name: str) -> bool:
        return name in self

    def add(self, name: str) -> 'Directive':
        """Append an empty directive under `name` and return it.

        Note: `name` is not validated. A name with line breaks
        is accepted (with a warning) but won't survive serializing.
        """
        return self.add_directive(name, Directive())

    def add_directive(self, name: str, directive: 'Directive') -> 'Directive':
        if name not in self.__data:
            _check_word('directive name', name)
        bucket = self.__data.setdefault(name, [])
        # children created later follow this document's ordering mode.
        directive._order = self.preserve_order
        bucket.append(directive)
        return directive

    def remove(self, name: str) -> 'list[Directive] | None':
        return self.__data.pop(name, None) or None

    def remove_entry(
        self, name: str
    ) -> 'tuple[str, list[Directive]] | None':
        if not (bucket := self.remove(name)):
            return None
        return name, bucket

    def write(self, buf: TextIO) -> None:
        """Serialize into a text stream.

        Quoting gets normalized (`"a b"` -> `'a b'`),
        and comments of a parsed document are already gone.
        """
        self.__write(buf, 0)

    def __write(self, buf: TextIO, depth: int) -> None:
        indent = consts.INDENT * depth
        # blank line between a closed block and whatever follows it.
        prefix = ''
        for name in self:
            for directive in self.__data[name]:
                buf.write(prefix)
                prefix = ''
                buf.write(indent + quote(name))
                for param in directive.params:
                    buf.write(' ' + quote(param))
                if directive.child is not None:
                    buf.write(f' {consts.BLOCK_OPEN}\n')
                    directive.child.__write(buf, depth + 1)
                    buf.write(indent + consts.BLOCK_CLOSE)
                    prefix = '\n'
                buf.write('\n')

    def __str__(self) -> str:
        buf = StringIO()
        self.write(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return 'Scfg { .names = %d, .directives = %d }' % (
            len(self),
            sum(len(i) for i in self.__data.values()))


@dataclass
class Directive:
    """One scfg line: parameters, and maybe a child block.

    The name is not kept here, it is the key in the owning `Scfg`.
    """
    params: list[str] = field(default_factory=list)
    child: Scfg | None = None
    # ordering mode of the owning document, set by `Scfg.add_directive()`.
    _order: bool | None = field(
        default=None, init=False, repr=False, compare=False)

    def append_param(self, param: str) -> 'Directive':
        """Append a parameter, returning `self` for chaining.

        Note: like `Scfg.add()`, `param` is not validated.
        """
        _check_word('parameter', param)
        self.params.append(param)
        return self

    def clear_params(self) -> None:
        self.params.clear()

    def take_child(self) -> Scfg | None:
        """Detach the child block and return it."""
        child, self.child = self.child, None
        return child

    def get_or_create_child(self) -> Scfg:
        """The child block, created empty on first call.

        A new child takes the ordering mode of the document owning
        this directive, or the `Scfg` default for a free directive.
        """
        if self.child is None:
            self.child = Scfg(preserve_order=self._order)
        return self.child
