#!/usr/bin/env python3
"""
determinism_check.py
Determinism verification: proves the seed contract works both ways

Tests:
1. Same seed → identical pixels (reproducibility)
2. Different seed → different pixels (seed actually affects output)

Usage:
    python scripts/determinism_check.py
    python scripts/determinism_check.py --seed-a alice --seed-b bob --size 12
"""

import argparse
import hashlib
import sys

from blockicon import build_icon, to_png_bytes

DETERMINISM_SENTINEL_OK = "BLOCKICON_DETERMINISM_OK"
DETERMINISM_SENTINEL_FAIL = "BLOCKICON_DETERMINISM_FAIL"


def png_hash(seed: str, size: int, scale: int) -> str:
    """Hash the PNG bytes of one icon."""
    icon = build_icon(seed=seed, size=size, scale=scale)
    return hashlib.sha256(to_png_bytes(icon)).hexdigest()


def main() -> int:
    parser = argparse.ArgumentParser(description="blockicon determinism check")
    parser.add_argument("--seed-a", default="0xfb6916095ca1df60bb79ce92ce3ea74c37c5d359")
    parser.add_argument("--seed-b", default="0x4bbeeb066ed09b7aed07bf39eee0460dfa261520")
    parser.add_argument("--size", type=int, default=8)
    parser.add_argument("--scale", type=int, default=4)
    args = parser.parse_args()

    print("=" * 60)
    print("BLOCKICON DETERMINISM CHECK")
    print("=" * 60)
    print()

    results = {}

    print("[1/2] Testing: Same seed → identical output")
    print("-" * 40)
    hash1 = png_hash(args.seed_a, args.size, args.scale)
    hash2 = png_hash(args.seed_a, args.size, args.scale)
    if hash1 == hash2:
        print(f"  PASS: Identical PNG ({hash1[:16]}...)")
        results["reproducible"] = True
    else:
        print("  FAIL: Different PNG!")
        print(f"    build1: {hash1[:16]}...")
        print(f"    build2: {hash2[:16]}...")
        results["reproducible"] = False
    print()

    print("[2/2] Testing: Different seed → different output")
    print("-" * 40)
    hash3 = png_hash(args.seed_b, args.size, args.scale)
    if hash3 != hash1:
        print("  PASS: Different PNG")
        print(f"    {args.seed_a}: {hash1[:16]}...")
        print(f"    {args.seed_b}: {hash3[:16]}...")
        results["seed_sensitive"] = True
    else:
        print("  FAIL: Identical PNG despite different seeds!")
        results["seed_sensitive"] = False
    print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    for name, passed in results.items():
        print(f"  {name}: {'PASS' if passed else 'FAIL'}")
    print()

    if all(results.values()):
        print("✓ Determinism contract verified")
        print(DETERMINISM_SENTINEL_OK)
        return 0

    print("✗ Determinism contract FAILED")
    print(DETERMINISM_SENTINEL_FAIL)
    return 1


if __name__ == "__main__":
    sys.exit(main())
