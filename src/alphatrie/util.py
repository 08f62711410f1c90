#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import logging
import sys

logger = logging.Logger('alphatrie', 'INFO')
def __init():
    fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d: %(message)s', None, '%')
    if not logger.hasHandlers():
        logger.addHandler(logging.StreamHandler(sys.stdout))
    h = None
    for h in logger.handlers:
        h.setFormatter(fmt)
__init()
del __init

logger_levels = ('DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL', 'FATAL')


def set_level(level: str | None = None, verbose: bool = False) -> None:
    if isinstance(level, str) and level.upper() in logger_levels:
        logger.setLevel(level.upper())
    elif verbose:
        logger.setLevel('DEBUG')


def dot_escape(s: object) -> str:
    """dot 标签里的反斜杠和双引号需要转义"""
    return str(s).replace('\\', '\\\\').replace('"', '\\"')
