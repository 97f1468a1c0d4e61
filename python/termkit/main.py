"""termkit CLI - Language-tagged term utilities.

Usage:
    python -m termkit.main parse earth@en terre@fr
    python -m termkit.main compare "night" "nacht"
    python -m termkit.main index terms.txt --default-language en
    python -m termkit.main date 2015-06-01T14:30:00+0100 --utc
    python -m termkit.main languages
    python -m termkit.main delete build/tmp
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from . import config as cfg
from . import dates, fileutil, termlist
from .language import Language
from .matcher import compare_strings
from .term import Term


def _label(language: Optional[str]) -> str:
    if language is None:
        return "-"
    known = Language.from_code(language)
    return f"{language} ({known})" if known else language


def cmd_parse(args: argparse.Namespace) -> int:
    for text in args.terms:
        term = Term.parse(text)
        print(f"{term.qualified}")
        print(f"  string:   {term.string}")
        print(f"  language: {_label(term.language)}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    score = compare_strings(args.first, args.second)
    verdict = "MATCH" if score >= args.threshold else "NO MATCH"
    print(f"{score:.4f} {verdict} (threshold {args.threshold})")
    return 0


def cmd_languages(args: argparse.Namespace) -> int:
    for language in Language:
        print(f"{language.code}  {language.display_name}")
    return 0


def cmd_date(args: argparse.Namespace) -> int:
    if args.text:
        try:
            date = dates.from_iso_string(args.text)
        except dates.ParseError as e:
            print(f"ERROR - {e}")
            return 1
    else:
        date = datetime.now(timezone.utc)

    use_utc = args.utc or cfg.default_timezone().lower() == "utc"
    tz = timezone.utc if use_utc else None
    print(dates.to_iso_string(date, cfg.default_date_format(), tz))
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    try:
        result = termlist.load(
            args.file,
            comment_char=cfg.default_comment_prefix(),
            default_language=args.default_language,
        )
    except OSError as e:
        print(f"ERROR - {e}")
        return 1

    terms = result.terms
    print(f"Source: {result.source_path}")
    print(f"  Lines read: {result.total_raw:,}")
    print(f"  Key terms: {terms.get_num_key_terms():,}")
    print(f"  Strings: {len(terms.get_key_term_strings()):,}")
    print(f"  Duplicates: {result.total_duplicates:,}")

    print("\n  By language:")
    by_language: dict[str, int] = {}
    for term in terms.get_key_terms():
        key = term.language if term.language is not None else "-"
        by_language[key] = by_language.get(key, 0) + 1
    for language, count in sorted(by_language.items()):
        print(f"    {language}: {count:,}")

    if args.verbose:
        print("\n  Terms:")
        for term in sorted(terms.get_key_terms()):
            lines = ", ".join(str(n) for n in terms.get_values(term))
            print(f"    {term.qualified}: {lines}")
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    status = 0
    for path in args.paths:
        if fileutil.delete(path):
            print(f"  {path}: OK")
        else:
            print(f"  {path}: ERROR - not fully deleted")
            status = 1
    return status


def build_parser() -> argparse.ArgumentParser:
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        description="termkit - Language-tagged term utilities"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging and detailed output",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Parse qualified terms (value@lang)")
    p.add_argument("terms", nargs="+", help="Qualified terms")
    p.set_defaults(func=cmd_parse)

    p = sub.add_parser("compare", help="Bigram similarity of two strings")
    p.add_argument("first")
    p.add_argument("second")
    p.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=defaults.get("similarity_threshold", 0.5),
        help=f"Match threshold (default: {defaults.get('similarity_threshold', 0.5)})",
    )
    p.set_defaults(func=cmd_compare)

    p = sub.add_parser("languages", help="List the language catalog")
    p.set_defaults(func=cmd_languages)

    p = sub.add_parser("date", help="Parse and re-render an ISO date")
    p.add_argument("text", nargs="?", help="ISO date (default: now)")
    p.add_argument("--utc", action="store_true", help="Render in UTC")
    p.set_defaults(func=cmd_date)

    p = sub.add_parser("index", help="Index a plain text term list")
    p.add_argument("file", type=Path, help="Term list, one qualified term per line")
    p.add_argument(
        "--default-language",
        "-l",
        type=str,
        help="Language for terms written without one",
    )
    p.set_defaults(func=cmd_index)

    p = sub.add_parser("delete", help="Recursively delete files and directories")
    p.add_argument("paths", nargs="+", type=Path)
    p.set_defaults(func=cmd_delete)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
