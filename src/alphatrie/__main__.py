#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from alphatrie.alphabet import Alphabet, SymbolAlphabet, alphabet_names, get_alphabet
from alphatrie.errors import AlphabetError
from alphatrie.storage import filein, read_keys
from alphatrie.trie import Trie
from alphatrie.util import logger, set_level


def _alphabet_arg(name: str) -> Alphabet:
    try:
        return get_alphabet(name)
    except KeyError as e:
        raise argparse.ArgumentTypeError(e.args[0]) from e


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='alphatrie', description='build a trie from key files and dump it')
    # fmt: off
    parser.add_argument('files', nargs='*', default=[],
                        help='key files, one key per line, optionally followed by a tab and a value ("-" or none for stdin)')
    parser.add_argument('-a', '--alphabet', type=_alphabet_arg, default=None,
                        help='predefined alphabet: {} [default: lowercase]'.format(', '.join(alphabet_names())))
    parser.add_argument('-s', '--symbols', type=SymbolAlphabet, default=None,
                        help='custom alphabet given as a string of distinct symbols')
    parser.add_argument('-r', '--remove', action='append', default=[], metavar='KEY',
                        help='remove KEY after loading, may be repeated')
    parser.add_argument('-d', '--draw', action='store_true',
                        help='print the graphviz digraph of the trie')
    parser.add_argument('-i', '--items', action='store_true',
                        help='print key/value pairs (the default when nothing else is asked for)')
    parser.add_argument('-o', '--output', metavar='FILE',
                        help='write the digraph to FILE instead of stdout')
    parser.add_argument('--encoding',
                        help='encoding of key files [default: guessed]')
    parser.add_argument('--strict', action='store_true',
                        help='stop at the first key outside the alphabet')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='verbose logging')
    parser.add_argument('--level',
                        help='log level')
    # fmt: on
    return parser


def load(trie: Trie, lines: Iterable[str], strict: bool = False) -> int:
    """把每一行读进 trie，返回被跳过的行数

    没有值的 key 计数，有值的 key 保留第一次出现的值。
    """
    skipped = 0
    for lineno, key, value in read_keys(lines):
        try:
            if value is None:
                current = trie.get_or_insert(key)
                if isinstance(current, int):
                    trie[key] = current + 1
                else:
                    logger.info('line %d: %r already holds %r, not counted', lineno, key, current)
            elif not trie.insert(key, value):
                logger.info('line %d: %r already set, keeping first value', lineno, key)
        except AlphabetError as e:
            if strict:
                raise
            logger.warning('line %d: %s, skipped', lineno, e)
            skipped += 1
    return skipped


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    set_level(args.level, args.verbose)
    alphabet = args.symbols or args.alphabet or get_alphabet('lowercase')
    trie: Trie = Trie(alphabet, default_factory=int)
    try:
        for name in args.files or ['-']:
            if name == '-':
                name = '<stdin>'
                skipped = load(trie, sys.stdin, args.strict)
            else:
                with filein(name, args.encoding) as f:
                    skipped = load(trie, f, args.strict)
            if skipped:
                logger.warning('%s: %d keys skipped', name, skipped)
        for key in args.remove:
            trie.remove(key)
    except AlphabetError as e:
        logger.error(e)
        return 2
    except OSError as e:
        logger.error(e)
        return 1

    draw = args.draw or args.output is not None
    if draw:
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                trie.draw(f)
            logger.info('digraph written to %s', args.output)
        else:
            trie.draw(sys.stdout)
    if args.items or not draw:
        for key, value in trie.items():
            print(f'{key}\t{value}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
