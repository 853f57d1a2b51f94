#!/usr/bin/env python
"""Write the token stream of a YAML file, one token per line."""

import argparse
from pathlib import Path

from yamlipy.lexer import Token, tokenize
from yamlipy.result import Err
from yamlipy.text import line_column


def format_token(idx: int, token: Token, source: str) -> str:
    line, column = line_column(source, token.range.start)
    return (
        f"[{idx}] kind={token.kind.name} "
        f"text={token.text!r} "
        f"span={token.range.as_tuple()} "
        f"at={line}:{column}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump yamlipy tokens for a file")
    parser.add_argument("path", type=Path, help="YAML file to tokenize")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    outcome = tokenize(text)
    if isinstance(outcome, Err):
        line, column = line_column(text, outcome.error.range.start)
        raise SystemExit(f"{args.path}:{line}:{column}: {outcome.error.code} {outcome.error}")

    lines = [format_token(idx, token, text) for idx, token in enumerate(outcome.value)]
    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {len(lines)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
