"""Command line front end: hash files, text or stdin and run the known-answer checks."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from sha1stream.constants import DEFAULT_CHUNK_SIZE
from sha1stream.hasher import hash_stream, sha1_text
from sha1stream.selftest import run_selftest

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Chunk size must be an integer") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("Chunk size must be positive")
    return number


# --- Command handlers ---------------------------------------------------------


def _cmd_hash(args: argparse.Namespace) -> int:
    if args.text is not None:
        print(f"{sha1_text(args.text)}  -")
        return 0

    status = 0
    for name in args.files or ["-"]:
        if name == "-":
            hex_digest = hash_stream(sys.stdin.buffer, args.chunk_size).hexdigest()
        else:
            try:
                with open(name, "rb") as src:
                    hex_digest = hash_stream(src, args.chunk_size).hexdigest()
            except OSError as exc:
                logger.error("cannot read %s: %s", name, exc)
                print(f"sha1stream: {name}: {exc.strerror or exc}", file=sys.stderr)
                status = 1
                continue
        print(f"{hex_digest}  {name}")
    return status


def _cmd_selftest(args: argparse.Namespace) -> int:
    results = run_selftest()
    for result in results:
        label = result.message.decode("ascii", errors="replace") or "<empty>"
        print(f"{'PASS' if result.passed else 'FAIL'}  {result.actual}  {label}")
    passed = all(result.passed for result in results)
    print(f"SHA1 tests: {'SUCCEEDED' if passed else 'FAILED'}")
    return 0 if passed else 1


# --- CLI ----------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sha1stream", description="Streaming SHA-1 digests.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser("hash", help="Print SHA-1 digests of files or stdin.")
    hash_parser.add_argument("files", nargs="*", help="Files to hash ('-' or nothing reads stdin).")
    hash_parser.add_argument("--text", help="Hash this UTF-8 string instead of files.")
    hash_parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Read size in bytes (default: {DEFAULT_CHUNK_SIZE}).",
    )
    hash_parser.set_defaults(func=_cmd_hash)

    selftest_parser = subparsers.add_parser("selftest", help="Run the known-answer vectors.")
    selftest_parser.set_defaults(func=_cmd_selftest)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
