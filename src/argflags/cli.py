from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence, Tuple

from argflags.constants import END_OF_OPTIONS
from argflags.logging.factory import DefaultLoggerFactory
from argflags.logging.helpers import BASE_LOGGER, get_logger, reset_base_logger
from argflags.parsing.tokenizer import FlagTokenizer


logger = get_logger('argflags')


def _configure_logging(enable_json: bool, verbose: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev == mode and logging.getLogger(BASE_LOGGER).handlers:
        return
    reset_base_logger()
    factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.DEBUG if verbose else logging.INFO)
    lg = factory.get_logger('argflags')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', mode)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='argflags',
        description='Split command-line tokens into flags and positional arguments and print them as JSON.',
        epilog='Tokens after a bare "--" are parsed verbatim, including ones that start with "-".',
    )
    p.add_argument('tokens', nargs='*', metavar='TOKEN', help='tokens to parse')
    p.add_argument('--json-logs', action='store_true', help='emit log records as JSON')
    p.add_argument('-v', '--verbose', action='store_true', help='log at debug level')
    p.add_argument('--indent', type=int, default=2, metavar='N', help='JSON indentation (default: 2, 0 for compact)')
    p.add_argument('--sort-keys', action='store_true', help='sort flag names in the output')
    return p


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split *argv* at the first END_OF_OPTIONS marker into (options, tokens)."""
    items = list(argv)
    if END_OF_OPTIONS in items:
        idx = items.index(END_OF_OPTIONS)
        return (items[:idx], items[idx + 1:])
    return (items, [])


class ArgFlags:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Parse *argv* and return the JSON rendering of the parse result."""
        own, tail = _split_argv(argv)
        ns = _build_parser().parse_intermixed_args(own)

        json_logs = ns.json_logs or os.getenv('ARGFLAGS_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        tokens = [*ns.tokens, *tail]
        result = FlagTokenizer(logger=get_logger('parsing')).parse(tokens)
        logger.debug('parsed %d token(s) into %d flag(s) and %d positional(s)',
                     len(tokens), len(result.flags), len(result.args))

        indent: Optional[int] = ns.indent if ns.indent > 0 else None
        return json.dumps(result.to_dict(), indent=indent, sort_keys=ns.sort_keys, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `argflags` script and `python -m argflags`."""
    try:
        out = ArgFlags.run(sys.argv[1:] if argv is None else argv)
        sys.stdout.write(out + '\n')
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
