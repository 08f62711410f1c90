#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import copy
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from io import StringIO
from typing import Any, Generic, Optional, Self, TextIO, TypeVar, overload

from alphatrie.alphabet import Alphabet
from alphatrie.errors import AlphabetError, KeyNotFoundError
from alphatrie.node import Node
from alphatrie.util import dot_escape, logger

_T = TypeVar('_T')
_VT = TypeVar('_VT')


class Trie(MutableMapping[str, _VT], Generic[_VT]):
    """固定字母表上的前缀树，把字符串映射到值

    所有接受 key 的操作都会先检查每个符号是否属于字母表，否则在改动树之前抛出
    AlphabetError。插入时按需建节点，删除时立即剪枝，所以既没有值又没有子节点的
    节点只可能是根。
    """
    def __init__(
        self,
        alphabet: Alphabet,
        init: 'Optional[Mapping[str, _VT] | Iterable[tuple[str, _VT]]]' = None,
        *,
        default_factory: Optional[Callable[[], _VT]] = None,
    ) -> None:
        self._alphabet = alphabet
        self._root: Node[_VT] = Node(alphabet)
        self.default_factory = default_factory
        if isinstance(init, Trie):
            self._copy_from(init)
        elif isinstance(init, Mapping):
            for k, v in init.items():
                self.insert(k, v)
        elif init is not None:
            for k, v in init:
                self.insert(k, v)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def root(self) -> Node[_VT]:
        return self._root

    def _check_key(self, key: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f'trie keys must be str, not {type(key).__name__}')
        for i, c in enumerate(key):
            if self._alphabet.ord(c) is None:
                raise AlphabetError(key, c, i)

    def _find(self, key: str) -> Optional[Node[_VT]]:
        self._check_key(key)
        path = self._root.get_path(key)
        if len(path) == len(key) + 1:
            return path[-1]
        return None

    def empty(self) -> bool:
        return not (self._root.has_value() or self._root.has_children())

    @overload
    def search(self, key: str) -> Optional[_VT]: ...
    @overload
    def search(self, key: str, default: _T) -> _VT | _T: ...
    def search(self, key: str, default: Any = None) -> Any:
        node = self._find(key)
        if node is None or not node.has_value():
            return default
        return node.value

    def at(self, key: str) -> _VT:
        node = self._find(key)
        if node is None or not node.has_value():
            raise KeyNotFoundError(key)
        return node.value  # type: ignore

    def insert(self, key: str, value: _VT) -> bool:
        """key 上还没有值时存入 value，返回是否存入；已有的值不会被覆盖"""
        node = self._walk_or_create(key)
        if node.has_value():
            return False
        node.set_value(value)
        return True

    def _walk_or_create(self, key: str) -> Node[_VT]:
        self._check_key(key)
        node = self._root
        for c in key:
            nxt = node.child(c)
            if nxt is None:
                nxt = node.create_child(c)
            node = nxt
        return node

    def remove(self, key: str) -> None:
        """删掉 key 上的值，并向上剪掉只为它存在的分支；key 不存在时什么也不做"""
        self._check_key(key)
        node = self._root.get_path(key)[-1]
        if node is None:
            return
        node.remove_value()
        while not (node.has_value() or node.has_children()):
            parent = node.parent
            if parent is None:
                return
            parent.remove_child(node)
            logger.debug('pruned node %r of %r', node.key, key)
            node = parent

    def get_or_insert(self, key: str) -> _VT:
        """取 key 对应的值，不存在时先插入 default_factory() 的结果"""
        node = self._walk_or_create(key)
        if not node.has_value():
            node.set_default_value(self.default_factory)
        return node.value  # type: ignore

    def clear(self) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('clearing %d keys', len(self))
        self._root.remove_children()
        self._root.remove_value()

    # 遍历
    def _nodes(self) -> Iterator[tuple[str, Node[_VT]]]:
        """按槽位顺序深度优先（先序）遍历所有节点"""
        stack: list[tuple[str, Node[_VT]]] = [('', self._root)]
        while stack:
            key, node = stack.pop()
            yield key, node
            stack.extend((key + c, n) for c, n in reversed(list(node.children_items())))

    def items(self) -> list[tuple[str, _VT]]:  # type: ignore[override]
        return [(k, n.value) for k, n in self._nodes() if n.has_value()]  # type: ignore

    def keys(self) -> list[str]:  # type: ignore[override]
        return [k for k, n in self._nodes() if n.has_value()]

    def values(self) -> list[_VT]:  # type: ignore[override]
        return [n.value for _, n in self._nodes() if n.has_value()]  # type: ignore

    # 复制
    def _copy_from(self, other: 'Trie[_VT]', memo: Optional[dict[int, Any]] = None) -> None:
        if other is self:
            return
        if other._alphabet is not self._alphabet:
            # 中间节点都是某个有值 key 的前缀，检查这些 key 就覆盖了所有符号
            for key in other.keys():
                self._check_key(key)
        if memo is None:
            memo = {}
        copied = 0
        stack: list[tuple[Node[_VT], Node[_VT]]] = [(self._root, other._root)]
        while stack:
            dst, src = stack.pop()
            copied += 1
            if not dst.has_value() and src.has_value():
                dst.set_value(copy.deepcopy(src.value, memo))
            for c, child in src.children_items():
                stack.append((dst.child(c) or dst.create_child(c), child))
        logger.debug('copied %d nodes', copied)

    def copy(self) -> Self:
        new = self.__class__(self._alphabet, default_factory=self.default_factory)
        new._copy_from(self)
        return new

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        new = self.__class__(self._alphabet, default_factory=self.default_factory)
        memo[id(self)] = new
        new._copy_from(self, memo)
        return new

    # MutableMapping
    def __getitem__(self, __key: str) -> _VT:
        return self.at(__key)

    def __setitem__(self, __key: str, __value: _VT) -> None:
        self._walk_or_create(__key).set_value(__value)

    def __delitem__(self, __key: str) -> None:
        node = self._find(__key)
        if node is None or not node.has_value():
            raise KeyNotFoundError(__key)
        self.remove(__key)

    def __contains__(self, __key: object) -> bool:
        if not isinstance(__key, str):
            return False
        node = self._find(__key)
        return node is not None and node.has_value()

    def __iter__(self) -> Iterator[str]:
        return (k for k, n in self._nodes() if n.has_value())

    def __len__(self) -> int:
        return sum(1 for _, n in self._nodes() if n.has_value())

    # 导出
    def _draw(self, sio: StringIO) -> None:
        # 先序编号，每条边写在子节点的标签之前
        nid = 0
        stack: list[tuple[Node[_VT], Optional[int]]] = [(self._root, None)]
        while stack:
            node, parent_id = stack.pop()
            if parent_id is not None:
                sio.write(f'"{parent_id}" -> "{nid}" [label="{dot_escape(node.key)}"]\n')
            sio.write(f'"{nid}" [label="')
            if node.has_value():
                sio.write(dot_escape(node.value))
            sio.write('"]\n')
            stack.extend((child, nid) for _, child in reversed(list(node.children_items())))
            nid += 1

    def draw(self, output: TextIO) -> None:
        """把树写成 graphviz 的 digraph，仅用于调试"""
        sio = StringIO()
        sio.write('digraph {\n')
        self._draw(sio)
        sio.write('}\n')
        output.write(sio.getvalue())

    def to_dot(self) -> str:
        sio = StringIO()
        self.draw(sio)
        return sio.getvalue()

    def __repr__(self) -> str:
        return f'{self.__class__.__qualname__}({self._alphabet!r}, {dict(self.items())!r})'
