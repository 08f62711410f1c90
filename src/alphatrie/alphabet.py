#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from collections.abc import Iterable
from typing import Optional, Protocol, runtime_checkable

MAX_ALPHABET_SIZE = 256


@runtime_checkable
class Alphabet(Protocol):
    """字母表：固定的符号数量，以及符号到槽位的映射

    ord 对字母表以外的符号返回 None。
    """
    @property
    def size(self) -> int: ...
    def ord(self, symbol: str) -> Optional[int]: ...


def _check_size(size: int) -> int:
    if size <= 0:
        raise ValueError('alphabet must not be empty')
    if size > MAX_ALPHABET_SIZE:
        raise ValueError(f'alphabet size {size} exceeds {MAX_ALPHABET_SIZE}')
    return size


class SymbolAlphabet:
    """由显式给出的单字符符号组成，槽位即符号的位置"""
    def __init__(self, symbols: Iterable[str], name: Optional[str] = None) -> None:
        self._symbols = tuple(symbols)
        self._index: dict[str, int] = {}
        for i, s in enumerate(self._symbols):
            if not isinstance(s, str) or len(s) != 1:
                raise ValueError(f'symbol must be a single character: {s!r}')
            if s in self._index:
                raise ValueError(f'duplicate symbol: {s!r}')
            self._index[s] = i
        self._size = _check_size(len(self._symbols))
        self.name = name

    @property
    def size(self) -> int:
        return self._size

    def ord(self, symbol: str) -> Optional[int]:
        return self._index.get(symbol)

    def symbol(self, index: int) -> str:
        return self._symbols[index]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __repr__(self) -> str:
        if self.name is not None:
            return f'{self.__class__.__qualname__}({self.name})'
        return f'{self.__class__.__qualname__}({"".join(self._symbols)!r})'


class RangeAlphabet:
    """连续码位区间组成的字母表，两端都包含在内"""
    def __init__(self, first: str, last: str, name: Optional[str] = None) -> None:
        if len(first) != 1 or len(last) != 1:
            raise ValueError('range bounds must be single characters')
        if first > last:
            raise ValueError(f'empty range {first!r}-{last!r}')
        self.first = first
        self.last = last
        self._base = ord(first)
        self._size = _check_size(ord(last) - self._base + 1)
        self.name = name

    @property
    def size(self) -> int:
        return self._size

    def ord(self, symbol: str) -> Optional[int]:
        if not isinstance(symbol, str) or len(symbol) != 1:
            return None
        i = ord(symbol) - self._base
        if 0 <= i < self._size:
            return i
        return None

    def symbol(self, index: int) -> str:
        if not 0 <= index < self._size:
            raise IndexError(index)
        return chr(self._base + index)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.ord(symbol) is not None

    def __repr__(self) -> str:
        if self.name is not None:
            return f'{self.__class__.__qualname__}({self.name})'
        return f'{self.__class__.__qualname__}({self.first!r}, {self.last!r})'


LOWERCASE = RangeAlphabet('a', 'z', name='lowercase')
UPPERCASE = RangeAlphabet('A', 'Z', name='uppercase')
DIGITS = RangeAlphabet('0', '9', name='digits')
LETTERS = SymbolAlphabet('ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz', name='letters')
ALPHANUMERIC = SymbolAlphabet('0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz', name='alphanumeric')
BINARY = SymbolAlphabet('01', name='binary')
DNA = SymbolAlphabet('ACGT', name='dna')

_named: dict[str, Alphabet] = {
    a.name: a  # type: ignore
    for a in (LOWERCASE, UPPERCASE, DIGITS, LETTERS, ALPHANUMERIC, BINARY, DNA)
}


def get_alphabet(name: str) -> Alphabet:
    try:
        return _named[name.lower()]
    except KeyError:
        raise KeyError(f'unknown alphabet {name!r}, choose from {", ".join(sorted(_named))}') from None


def alphabet_names() -> list[str]:
    return sorted(_named)
