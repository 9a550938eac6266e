"""
Command-line entrypoint for one-off rewrites.

Architectural role:
- Terminal adapter over `text_rewriter.core.engine.rewrite_text`, parallel to
  the HTTP adapter.

Input handling:
- Positional `text` arguments are joined with single spaces.
- Without arguments, the whole of stdin is read and used verbatim.

Output and exit codes:
- Success: rewritten text on stdout, exit 0.
- Any `RewriteError`: message on stderr, exit 1.

Logging:
- Diagnostics go to stderr at `WARNING` by default; `--verbose` lowers it to `INFO`.
"""

import argparse
import logging
import sys

from text_rewriter.core.engine import rewrite_text
from text_rewriter.core.errors import RewriteError
from text_rewriter.llm.provider_config import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-rewriter-cli",
        description="Rewrite text in a more polished and professional way",
    )
    parser.add_argument("text", nargs="*", help="Text to rewrite (reads stdin when omitted)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline diagnostics")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = " ".join(args.text) if args.text else sys.stdin.read()

    try:
        rewritten = rewrite_text(text, load_settings())
    except RewriteError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(rewritten)
    return 0


if __name__ == "__main__":
    sys.exit(main())
