from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence, TextIO

from jsminify.engine.compressor import compress, minify
from jsminify.errors import CompressionError
from jsminify.logging.helpers import get_logger, setup_base_logger
from jsminify.parsing.parser import _build_parser


logger = get_logger('jsminify')

STDIN_TOKEN = '-'


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == (bool(enable_json), level):
        return
    global logger
    logger = setup_base_logger(json_logs=enable_json, level=level)
    setattr(_configure_logging, '_configured_mode', (bool(enable_json), level))


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _read_input(token: str, ns: argparse.Namespace, stdin: TextIO) -> str:
    if token == STDIN_TOKEN:
        return stdin.read()
    path = Path(token)
    try:
        return path.read_text(encoding=ns.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        _fatal(f'cannot read {path}: {exc}')


class JsMinify:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdin: Optional[TextIO] = None) -> str:
        """Minify the inputs named in argv and return the combined text.

        When -o/--output is given the text is also written to that file.
        """
        return JsMinify.execute(_build_parser().parse_args(list(argv)), stdin=stdin)

    @staticmethod
    def execute(ns: argparse.Namespace, *, stdin: Optional[TextIO] = None) -> str:
        """Run an already parsed namespace (see `run`)."""
        json_logs = ns.json_logs or os.getenv('JSMINIFY_JSON_LOGS') == '1'
        _configure_logging(json_logs, logging.DEBUG if ns.verbose else logging.INFO)

        transform = compress if ns.no_trim else minify
        tokens = ns.files or [STDIN_TOKEN]
        outputs: List[str] = []

        for token in tokens:
            label = '<stdin>' if token == STDIN_TOKEN else token
            text = _read_input(token, ns, stdin or sys.stdin)
            try:
                outputs.append(transform(text, logger=get_logger('engine')))
            except CompressionError as exc:
                _fatal(f'cannot minify {label}: {exc}')
            logger.debug('minified %s: %d -> %d chars', label, len(text), len(outputs[-1]))

        result = '\n'.join(outputs)

        if ns.output:
            out_path = Path(ns.output)
            try:
                out_path.write_text(result, encoding=ns.encoding)
            except OSError as exc:
                _fatal(f'cannot write {out_path}: {exc}')
            logger.info('✔ output written → %s', out_path)

        return result


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `jsminify` console script and `python -m jsminify`."""
    ns = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    try:
        result = JsMinify.execute(ns)
        if not ns.output:
            sys.stdout.write(result)
            sys.stdout.write('\n')
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
