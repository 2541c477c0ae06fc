# jsminify/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Every FILE is minified on its own; results are joined with a newline.
        - '-' (or no FILE at all) reads from standard input.
    """
    p = argparse.ArgumentParser(
        prog="jsminify",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "jsminify – strip comments and insignificant whitespace from JavaScript\n"
            "String and regular expression literals are copied verbatim."
        ),
    )

    g_io = p.add_argument_group("Input & output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_io.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Source files to minify. Use '-' or omit to read standard input.",
    )
    g_io.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the result to FILE instead of standard output.",
    )
    g_io.add_argument(
        "--encoding",
        metavar="NAME",
        dest="encoding",
        default="utf-8",
        help="Text encoding used for FILE inputs and the -o output (default: utf-8).",
    )
    g_io.add_argument(
        "--no-trim",
        action="store_true",
        dest="no_trim",
        help="Emit raw engine output, keeping the leading newline and trailing whitespace.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also enabled by JSMINIFY_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log at DEBUG level; combine with JSMINIFY_TRACE_IO=1 for engine traces.",
    )
    return p
