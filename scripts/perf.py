#!/usr/bin/env python3
"""Throughput micro-benchmarks for single-call and batch digests."""
from __future__ import annotations

import argparse
import hashlib
import random
import time
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from md5digest.batch import digest_many
from md5digest.md5 import digest_lower


def make_passwords(count: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%"
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(6, 24))) for _ in range(count)]


def bench_single(texts: list[str]) -> None:
    start = time.time()
    for t in texts:
        digest_lower(t)
    elapsed = time.time() - start
    rate = len(texts) / elapsed if elapsed else 0.0
    print(f"single: n={len(texts)} time={elapsed:.3f}s rate={rate:.2f}/s")


def bench_batch(texts: list[str]) -> None:
    start = time.time()
    digest_many(texts)
    elapsed = time.time() - start
    rate = len(texts) / elapsed if elapsed else 0.0
    print(f"batch: n={len(texts)} time={elapsed:.3f}s rate={rate:.2f}/s")


def bench_hashlib(texts: list[str]) -> None:
    start = time.time()
    for t in texts:
        hashlib.md5(t.encode("utf-8")).hexdigest()
    elapsed = time.time() - start
    rate = len(texts) / elapsed if elapsed else 0.0
    print(f"hashlib: n={len(texts)} time={elapsed:.3f}s rate={rate:.2f}/s")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--count", type=int, default=2000)
    ap.add_argument("--seed", type=int, default=2024)
    args = ap.parse_args()

    texts = make_passwords(args.count, args.seed)
    bench_single(texts)
    bench_batch(texts)
    bench_hashlib(texts)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
