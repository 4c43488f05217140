#!/usr/bin/env python
"""Write the token stream of a .java file to out/<name>_tokens.txt."""

import argparse
from pathlib import Path

from beanschema.lexer import Lexer, format_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump lexer tokens, including whitespace and newlines.")
    parser.add_argument("input", type=Path, help="Path to a .java file")
    parser.add_argument("--out", type=Path, default=Path("out"), help="Output directory (defaults to ./out).")
    args = parser.parse_args()

    input_path: Path = args.input
    output_path = args.out / f"{input_path.stem}_tokens.txt"

    text = input_path.read_text(encoding="utf-8")
    tokens = Lexer(text).lex()

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token) + "\n")

    print(f"Wrote {len(tokens)} tokens to {output_path}")


if __name__ == "__main__":
    main()
