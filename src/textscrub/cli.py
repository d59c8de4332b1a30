"""CLI interface for textscrub.

Usage:
    # Censor text (stdin: plain text, stdout: JSON result)
    echo 'mail me at bob@example.net' | \
        python -m textscrub censor --types email

    # Show the severity registered for a word
    python -m textscrub lookup moron

Configuration can be supplied with --config (YAML) or the TEXTSCRUB_CONFIG
environment variable.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys

from .config import create_redactor, load_from_yaml
from .redactor import Redactor


DEFAULT_CONFIG = os.environ.get("TEXTSCRUB_CONFIG", "")


def _build_redactor(args: argparse.Namespace) -> Redactor:
    if args.config:
        return create_redactor(load_from_yaml(args.config))
    return Redactor()


def _split(value: str) -> list[str]:
    return [v for v in value.split(",") if v.strip()]


def cmd_censor(args: argparse.Namespace) -> int:
    """Censor plain text on stdin."""
    redactor = _build_redactor(args)
    text = sys.stdin.read()
    if text.endswith("\n"):
        text = text[:-1]

    result = redactor.censor(text, _split(args.types), args.custom_pattern)

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Print the severity names registered for a word."""
    redactor = _build_redactor(args)
    severity = redactor.dictionary.lookup(args.word)
    if severity is None:
        sys.stderr.write(f"{args.word!r} is not in the dictionary\n")
        return 1
    json.dump({"word": args.word, "severity": severity.names()}, sys.stdout)
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="textscrub",
        description="Mask links, IPs, emails and vulgar words in text",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config path")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)
    p_censor = sub.add_parser("censor", help="Censor plain text (stdin)")
    p_censor.add_argument("--types", default="", help="Comma-separated: link,ip,email,custom")
    p_censor.add_argument("--custom-pattern", default=None, help="Regex for the custom pass")
    p_lookup = sub.add_parser("lookup", help="Look up a word in the dictionary")
    p_lookup.add_argument("word")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cmds = {
        "censor": cmd_censor,
        "lookup": cmd_lookup,
    }
    try:
        return cmds[args.command](args)
    except ValueError as e:  # CensorError included
        sys.stderr.write(f"error: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
