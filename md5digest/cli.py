from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List

from .md5 import digest_lower, digest_upper
from .verify import KNOWN_VECTORS, check_vectors, is_md5_hex, normalize_md5_hex


def default_engine() -> str:
    # "numpy" (default): lane-parallel batch.digest_many
    # "python": one md5.digest_lower call per line
    engine = os.getenv("MD5DIGEST_ENGINE", "numpy").strip().lower()
    if engine not in ("numpy", "python"):
        engine = "numpy"
    return engine


def cmd_verify_core(_: argparse.Namespace) -> int:
    ok_all, mismatches = check_vectors()
    bad = {text for text, _, _ in mismatches}
    for text in KNOWN_VECTORS:
        shown = text[:20] + ("..." if len(text) > 20 else "")
        print(f"MD5('{shown}') -> {'FAIL' if text in bad else 'OK'}")
    for text, ours, expected in mismatches:
        print(f"  ours={ours}\n  ref ={expected}")
    print("verify-core:", "PASS" if ok_all else "FAIL")
    return 0 if ok_all else 1


def cmd_digest(ns: argparse.Namespace) -> int:
    try:
        h = digest_upper(ns.text) if ns.upper else digest_lower(ns.text)
    except ValueError as exc:
        print(f"digest: {exc}")
        return 1
    print(h)
    return 0


def _read_lines(source: str | None) -> List[str]:
    if source is None or source == "-":
        raw = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise ValueError(f"input file not found: {path}")
        raw = path.read_text(encoding="utf-8")
    # only "\n" ends a line; other Unicode line breaks belong to the password
    lines = raw.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def cmd_batch(ns: argparse.Namespace) -> int:
    try:
        lines = _read_lines(ns.file)
    except ValueError as exc:
        print(f"batch: {exc}")
        return 1
    engine = ns.engine or default_engine()
    try:
        if engine == "numpy":
            from .batch import digest_many

            digests = digest_many(lines, upper=ns.upper)
        else:
            fn = digest_upper if ns.upper else digest_lower
            digests = [fn(line) for line in lines]
    except ValueError as exc:
        print(f"batch: {exc}")
        return 1
    for h in digests:
        print(h)
    if ns.verbose:
        print(f"batch: engine={engine} lines={len(lines)}", file=sys.stderr)
    return 0


def cmd_check(ns: argparse.Namespace) -> int:
    value = ns.value.strip()
    if ns.case is not None and not is_md5_hex(value, case=ns.case):
        print(f"check: not a {ns.case}case MD5 hex digest")
        return 1
    try:
        print(normalize_md5_hex(value))
    except ValueError as exc:
        print(f"check: {exc}")
        return 1
    return 0


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="md5digest")
    sub = p.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("verify-core", help="recompute the RFC 1321 vectors and compare with hashlib")
    s1.set_defaults(func=cmd_verify_core)

    s2 = sub.add_parser("digest", help="MD5 of the UTF-8 bytes of TEXT")
    s2.add_argument("text")
    s2.add_argument("--upper", "-u", action="store_true", help="uppercase hex (pwd_md5 form)")
    s2.set_defaults(func=cmd_digest)

    s3 = sub.add_parser("batch", help="one digest per input line")
    s3.add_argument("file", nargs="?", default=None, help="input file (default: stdin)")
    s3.add_argument("--upper", "-u", action="store_true")
    s3.add_argument("--engine", choices=["numpy", "python"], default=None, help="digest engine (or use MD5DIGEST_ENGINE)")
    s3.add_argument("--verbose", "-v", action="store_true")
    s3.set_defaults(func=cmd_batch)

    s4 = sub.add_parser("check", help="validate a 32-char hex digest and print it uppercased")
    s4.add_argument("value")
    s4.add_argument("--case", choices=["lower", "upper"], default=None)
    s4.set_defaults(func=cmd_check)

    args = p.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
