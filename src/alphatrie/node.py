#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
import weakref
from typing import Generic, Optional, Self, TypeVar

from alphatrie.alphabet import Alphabet
from alphatrie.errors import AlphabetError

_VT = TypeVar('_VT')


class _Empty:
    """节点上没有值"""
    __slots__ = ()
    def __repr__(self) -> str:
        return '<empty>'

EMPTY = _Empty()


@dataclass(eq=False, repr=False)
class Node(Generic[_VT]):
    """trie 中 key 的一个位置

    节点持有自己的子节点和值；父节点只是弱引用，丢掉一个节点就会连带丢掉整棵子树。
    """
    alphabet: Alphabet
    key: Optional[str] = None
    _parent: Optional['weakref.ReferenceType[Node[_VT]]'] = None
    children: list[Optional['Node[_VT]']] = field(init=False)
    _value: '_VT | _Empty' = field(default=EMPTY, init=False)

    def __post_init__(self) -> None:
        self.children = [None] * self.alphabet.size

    def _slot(self, symbol: str) -> int:
        i = self.alphabet.ord(symbol)
        if i is None:
            raise AlphabetError(None, symbol)
        return i

    @property
    def parent(self) -> Optional[Self]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def value(self) -> Optional[_VT]:
        if isinstance(self._value, _Empty):
            return None
        return self._value

    def child(self, symbol: str) -> Optional[Self]:
        return self.children[self._slot(symbol)]

    def children_items(self) -> Iterator[tuple[str, Self]]:
        for c in self.children:
            if c is not None:
                yield c.key, c  # type: ignore

    def has_value(self) -> bool:
        return not isinstance(self._value, _Empty)

    def has_children(self) -> bool:
        return any(c is not None for c in self.children)

    def has_parent(self) -> bool:
        return self.parent is not None

    def set_value(self, value: _VT) -> None:
        self._value = value

    def set_default_value(self, factory: Optional[Callable[[], _VT]] = None) -> None:
        self._value = None if factory is None else factory()  # type: ignore

    def remove_value(self) -> None:
        self._value = EMPTY

    def create_child(self, symbol: str) -> Self:
        i = self._slot(symbol)
        if self.children[i] is not None:
            raise ValueError(f'slot for {symbol!r} is already occupied')
        c = self.__class__(self.alphabet, symbol, weakref.ref(self))
        self.children[i] = c
        return c

    def remove_child(self, node: 'Node[_VT]') -> bool:
        for i, c in enumerate(self.children):
            if c is node:
                self.children[i] = None
                return True
        return False

    def remove_children(self) -> None:
        for i in range(len(self.children)):
            self.children[i] = None

    def get_path(self, key: str) -> list[Optional[Self]]:
        """从当前节点出发沿 key 走下去，返回经过的节点

        路径缺失时末尾补一个 None 并提前结束，所以只有长度为 len(key)+1
        且最后一个元素不是 None 时 key 对应的节点才存在。
        """
        node: Optional[Self] = self
        path: list[Optional[Self]] = [node]
        for c in key:
            node = node.child(c)  # type: ignore
            path.append(node)
            if node is None:
                break
        return path

    def __repr__(self) -> str:
        return f'{self.__class__.__qualname__}(key={self.key!r}, value={self._value!r})'
