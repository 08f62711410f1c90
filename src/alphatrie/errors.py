#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from typing import Optional


class AlphabetError(ValueError):
    """key 中含有字母表以外的符号"""
    def __init__(self, key: Optional[str], symbol: object, position: Optional[int] = None) -> None:
        self.key = key
        self.symbol = symbol
        self.position = position
        if position is None:
            msg = f'Incorrect key: {symbol!r} is not a member of the alphabet'
        else:
            msg = f'Incorrect key {key!r}: {symbol!r} at position {position} is not a member of the alphabet'
        super().__init__(msg)


class KeyNotFoundError(KeyError):
    """key 对应的节点或值不存在"""
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f'Key not found: {self.key!r}'
