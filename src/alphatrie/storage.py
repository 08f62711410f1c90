#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import os
from collections.abc import Iterator
from typing import Optional

import chardet

from alphatrie.util import logger


def guess_encoding(path: os.PathLike | str, default: str = 'utf-8') -> str:
    encoding = default
    try:
        with open(path, 'rb') as f:
            header = f.read(1000)
        guess = chardet.detect(header)['encoding']
        if isinstance(guess, str):
            if guess in ('ascii', 'Windows-1254'):
                guess = 'utf-8'
            encoding = guess
    except OSError as e:
        logger.warning(e)
    return encoding


def filein(path: os.PathLike | str, encoding: Optional[str] = None):
    if encoding is None:
        encoding = guess_encoding(path)
    logger.debug('reading %s as %s', path, encoding)
    return open(path, 'r', encoding=encoding)


def parse_line(line: str) -> Optional[tuple[str, Optional[str]]]:
    """一行一个 key，可以用制表符带上值；空行返回 None"""
    line = line.rstrip('\r\n')
    if not line:
        return None
    key, sep, value = line.partition('\t')
    if not sep:
        return key, None
    return key, value


def read_keys(lines) -> Iterator[tuple[int, str, Optional[str]]]:
    for lineno, line in enumerate(lines, 1):
        parsed = parse_line(line)
        if parsed is not None:
            yield lineno, *parsed
