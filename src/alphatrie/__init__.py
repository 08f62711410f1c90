#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from alphatrie.alphabet import (
    ALPHANUMERIC, BINARY, DIGITS, DNA, LETTERS, LOWERCASE, MAX_ALPHABET_SIZE, UPPERCASE,
    Alphabet, RangeAlphabet, SymbolAlphabet, get_alphabet,
)
from alphatrie.errors import AlphabetError, KeyNotFoundError
from alphatrie.node import Node
from alphatrie.trie import Trie

__all__ = [
    'Alphabet', 'SymbolAlphabet', 'RangeAlphabet', 'get_alphabet', 'MAX_ALPHABET_SIZE',
    'LOWERCASE', 'UPPERCASE', 'DIGITS', 'LETTERS', 'ALPHANUMERIC', 'BINARY', 'DNA',
    'AlphabetError', 'KeyNotFoundError', 'Node', 'Trie',
]
