#!/usr/bin/env python3
"""
Run both sides of one exchange in a single process and check consistency.
Parameters come from DH_GENERATOR / DH_MODULUS (.env supported), or the
command line.
"""
import argparse
import logging
import sys
import os
# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dhexchange.common.config import load_params, parse_int
from dhexchange.crypto.dh import DHExchange, InvalidParameter
from dhexchange.crypto.rng import seeded_random, system_random


def main(argv=None):
    ap = argparse.ArgumentParser(description="Local Diffie-Hellman exchange demo")
    ap.add_argument("--env-file", default=None, help="path to a .env file")
    ap.add_argument("-g", "--generator", default=None)
    ap.add_argument("-p", "--modulus", default=None)
    ap.add_argument("--seed", type=int, default=None, help="deterministic exponents (demo only)")
    ap.add_argument("--tamper", action="store_true", help="substitute r1 before verifying")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        params = load_params(args.env_file)
        if args.generator or args.modulus:
            g = parse_int("generator", args.generator) if args.generator else params.g
            p = parse_int("modulus", args.modulus) if args.modulus else params.p
            dh = DHExchange(g, p)
        else:
            dh = DHExchange.from_params(params)
    except InvalidParameter as e:
        print(f"❌ {e}")
        return 2

    rng = seeded_random(args.seed) if args.seed is not None else system_random()
    a = dh.generate_private_exponent(rng)
    b = dh.generate_private_exponent(rng)

    r1, r2 = dh.compute_pair(a, b)
    sk = dh.secret_key(a, b)
    if args.tamper:
        # offset in [1, p-1], so the substitute never equals the real r1
        r1 = (r1 + 1 + dh.generate_random_number_below(dh.modulus - 1, rng)) % dh.modulus

    print("=" * 60)
    print(f"Group fingerprint: {dh.fingerprint()}")
    print(f"Modulus size:      {dh.modulus.bit_length()} bits")
    print(f"r1 (g^a mod p):    {r1}")
    print(f"r2 (g^b mod p):    {r2}")
    print("=" * 60)

    if dh.verify(a, b, r1, r2, sk):
        if args.tamper:
            # r1'^b mod p happens to reproduce the real secret
            print("⚠ Substituted r1 collides with the real one under b")
            return 3
        print("✓ Both sides derived the same secret")
        return 0
    print("❌ Inconsistent exchange")
    return 1


if __name__ == "__main__":
    sys.exit(main())
