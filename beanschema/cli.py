"""`beanschema` command line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from jsonschema.exceptions import SchemaError
from tqdm import tqdm

from beanschema.diagnostics import format_diagnostic
from beanschema.lexer import dump_tokens, tokenize
from beanschema.options import CommentStyle, ParseOptions, RequiredFieldStrategy
from beanschema.pipeline import run, validate
from beanschema.schema import SCHEMA_SUFFIXES, render_schema, validate_schema, write_schema

logger = logging.getLogger(__name__)


def _collect_sources(path: Path) -> list[Path]:
    if path.is_dir():
        return sorted(p for p in path.rglob("*.java") if p.is_file())
    return [path]


def _options_from_args(args: argparse.Namespace) -> ParseOptions:
    return ParseOptions(
        include_private_fields=not args.exclude_private,
        required_field_strategy=RequiredFieldStrategy(args.required_strategy),
        comment_style=CommentStyle(args.comment_style),
    )


def _convert_one(
    path: Path,
    options: ParseOptions,
    *,
    out_dir: Path | None,
    fmt: str,
    validate_output: bool,
) -> bool:
    text = path.read_text(encoding="utf-8")
    result = run(text, options)

    for warning in result.warnings:
        print(f"{path}: warning: {warning}", file=sys.stderr)
    for error in result.errors:
        print(format_diagnostic(error, path=str(path)), file=sys.stderr)

    schema = result.schema
    if schema is None:
        return False

    if validate_output:
        try:
            validate_schema(schema)
        except SchemaError as exc:
            print(f"{path}: invalid schema: {exc.message}", file=sys.stderr)
            return False

    if out_dir is None:
        print(render_schema(schema, fmt))  # type: ignore[arg-type]
        return True

    record = result.parse.class_record
    name = record.class_name if record is not None else path.stem
    target = write_schema(schema, out_dir / f"{name}{SCHEMA_SUFFIXES[fmt]}", fmt)  # type: ignore[arg-type]
    logger.info("Wrote %s", target)
    return True


def _cmd_convert(args: argparse.Namespace) -> int:
    sources = _collect_sources(args.path)
    if not sources:
        print(f"No .java files found under {args.path}", file=sys.stderr)
        return 1

    options = _options_from_args(args)
    show_progress = not args.no_progress and len(sources) > 1
    iterator = tqdm(sources, desc="convert", unit="file") if show_progress else sources

    failures = 0
    for path in iterator:
        ok = _convert_one(
            path,
            options,
            out_dir=args.out,
            fmt=args.format,
            validate_output=not args.no_validate,
        )
        if not ok:
            failures += 1

    if failures:
        print(f"{failures} of {len(sources)} file(s) failed", file=sys.stderr)
        return 1
    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    dump_tokens(tokenize(args.path.read_text(encoding="utf-8")))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    exit_code = 0
    for path in _collect_sources(args.path):
        report = validate(path.read_text(encoding="utf-8"), options)
        print(json.dumps({"path": str(path), **report.to_dict()}, indent=2, ensure_ascii=False))
        if not report.valid:
            exit_code = 1
    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beanschema", description="Convert Java bean classes into JSON schemas.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    option_flags = argparse.ArgumentParser(add_help=False)
    option_flags.add_argument("--exclude-private", action="store_true", help="Drop private fields.")
    option_flags.add_argument(
        "--required-strategy",
        choices=[strategy.value for strategy in RequiredFieldStrategy],
        default=RequiredFieldStrategy.ANNOTATION.value,
        help="Fallback when neither annotations, comments nor primitive types decide (default: annotation).",
    )
    option_flags.add_argument(
        "--comment-style",
        choices=[style.value for style in CommentStyle],
        default=CommentStyle.JAVADOC.value,
        help="Informational comment style hint (default: javadoc).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", parents=[option_flags], help="Convert a .java file or directory.")
    convert_parser.add_argument("path", type=Path, help="A .java file or a directory searched for *.java.")
    convert_parser.add_argument("--out", type=Path, default=None, help="Output directory (defaults to stdout).")
    convert_parser.add_argument("--format", choices=sorted(SCHEMA_SUFFIXES), default="json", help="Output format.")
    convert_parser.add_argument("--no-validate", action="store_true", help="Skip OpenAPI 3.1 schema validation.")
    convert_parser.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar.")
    convert_parser.set_defaults(handler=_cmd_convert)

    tokens_parser = subparsers.add_parser("tokens", help="Dump the token stream of a .java file.")
    tokens_parser.add_argument("path", type=Path)
    tokens_parser.set_defaults(handler=_cmd_tokens)

    check_parser = subparsers.add_parser("check", parents=[option_flags], help="Report parse errors and warnings.")
    check_parser.add_argument("path", type=Path)
    check_parser.set_defaults(handler=_cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"beanschema: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
