"""Command-line entry point: ``argline tokenize LINE`` or ``argline serve``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from argline.config import TokenizerConfig
from argline.server import create_argline_server
from argline.tokenizer import tokenize, tokenize_with_meta

logger = logging.getLogger("argline")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argline",
        description="Lossless command-line tokenizer and argument extractor",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--separators",
        default="",
        help="Extra separator characters besides whitespace, e.g. '='",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tok = sub.add_parser("tokenize", help="Print the tokens of LINE as JSON")
    tok.add_argument("line", help="Raw command line (quote it for your shell)")
    tok.add_argument("--meta", action="store_true", help="Include token kinds")

    sub.add_parser("serve", help="Run the argline MCP server over stdio")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = TokenizerConfig(separators=args.separators)
    except ValueError as exc:
        logger.error("invalid --separators: %s", exc)
        return 2

    if args.command == "tokenize":
        if args.meta:
            payload = [
                {"text": t.text, "argument": t.is_argument}
                for t in tokenize_with_meta(args.line, config)
            ]
        else:
            payload = tokenize(args.line, config)
        print(json.dumps(payload, ensure_ascii=False))
        return 0

    logger.info("starting argline MCP server on stdio")
    create_argline_server(config=config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
