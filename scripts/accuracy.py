#!/usr/bin/env python3
"""Accuracy checks for the digest pipeline against hashlib."""
from __future__ import annotations

import argparse
import hashlib
import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from md5digest.batch import digest_many
from md5digest.md5 import digest_lower, digest_upper
from md5digest.verify import check_vectors


def check_md5_vectors() -> bool:
    ok, mismatches = check_vectors()
    for text, ours, expected in mismatches:
        print(f"MD5 mismatch: {text!r} ours={ours} ref={expected}")
    print(f"md5_vectors: {'PASS' if ok else 'FAIL'}")
    return ok


def check_boundaries() -> bool:
    ok = True
    for n in (55, 56, 64, 119):
        for ch in ("a", "é", "密"):
            text = "a" * (n - len(ch.encode("utf-8"))) + ch
            ref = hashlib.md5(text.encode("utf-8")).hexdigest()
            if digest_lower(text) != ref:
                print(f"boundary mismatch: len={n} char={ch!r}")
                ok = False
    print(f"block_boundaries: {'PASS' if ok else 'FAIL'}")
    return ok


def random_text(rng: random.Random, max_len: int) -> str:
    # mix of ASCII, BMP and astral code points, no surrogates
    pools = [(0x20, 0x7E), (0xA0, 0x7FF), (0x4E00, 0x9FFF), (0x1F300, 0x1FAFF)]
    out = []
    for _ in range(rng.randrange(max_len + 1)):
        lo, hi = rng.choice(pools)
        out.append(chr(rng.randint(lo, hi)))
    return "".join(out)


def check_random(samples: int, seed: int, max_len: int) -> bool:
    rng = random.Random(seed)
    texts = [random_text(rng, max_len) for _ in range(samples)]
    refs = [hashlib.md5(t.encode("utf-8")).hexdigest() for t in texts]
    ok = True
    bad = sum(1 for t, r in zip(texts, refs) if digest_lower(t) != r)
    if bad:
        print(f"random: {bad}/{samples} single-call mismatches")
        ok = False
    if digest_many(texts) != refs:
        print("random: batch mismatch")
        ok = False
    if any(digest_upper(t) != r.upper() for t, r in zip(texts[:50], refs)):
        print("random: uppercase mismatch")
        ok = False
    print(f"random_texts: {'PASS' if ok else 'FAIL'} samples={samples}")
    return ok


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--samples", type=int, default=500)
    ap.add_argument("--max-len", type=int, default=80)
    ap.add_argument("--seed", type=int, default=2024)
    args = ap.parse_args()

    ok = True
    ok &= check_md5_vectors()
    ok &= check_boundaries()
    ok &= check_random(args.samples, args.seed, args.max_len)
    print("accuracy:", "PASS" if ok else "FAIL")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
