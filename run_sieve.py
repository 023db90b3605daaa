#!/usr/bin/env python3
"""
Print every prime below the configured bound.

Usage:
    python run_sieve.py
    python run_sieve.py --config config/default.yaml
    python run_sieve.py --config config/custom.yaml --verbose
"""

import argparse
import sys
import time

from eratosthenes.bitset_sieve import compute_primes_packed
from eratosthenes.config import load_config
from eratosthenes.primes import InvalidArgument, compute_primes
from eratosthenes.report import format_report


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Sieve of Eratosthenes')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: bound 10000)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print a banner and timing around the listing')
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    bound = config['bound']
    sieve = compute_primes_packed if config['packed'] else compute_primes

    if args.verbose:
        print("=" * 60)
        print("Sieve of Eratosthenes")
        print("=" * 60)
        print(f"  bound = {bound:,}")
        print(f"  packed = {config['packed']}")
        print()

    t0 = time.time()
    try:
        primes = sieve(bound)
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(bound, primes))

    if args.verbose:
        print(f"\nCompleted in {time.time() - t0:.3f}s")

    return 0


if __name__ == '__main__':
    sys.exit(main())
