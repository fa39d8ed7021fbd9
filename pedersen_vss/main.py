import argparse
import logging
import random
import sys

from .ecc import DEFAULT_CURVE, CurveGroup
from .pedersen import PedersenVSS

_logger = logging.getLogger(__name__)


# === Helper Functions ===
def parse_subset(value):
    try:
        return [int(v) for v in value.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid share index list: {value!r}")


def point_str(P):
    if P.is_point_at_infinity():
        return "Point(infinity)"
    return f"Point({int(P.x)}, {int(P.y)})"


def build_parser():
    parser = argparse.ArgumentParser(description="Pedersen Verifiable Secret Sharing Demo")
    parser.add_argument("-n", "--num-shares", type=int, default=5, help="Number of shares to generate (default: 5)")
    parser.add_argument("-t", "--threshold", type=int, default=3, help="Threshold for secret reconstruction, must be <= shares (default: 3)")
    parser.add_argument("--curve", default=DEFAULT_CURVE, choices=CurveGroup.SUPPORTED_CURVES, help=f"Elliptic curve (default: {DEFAULT_CURVE})")
    parser.add_argument("--seed", type=int, default=None, help="Seed a deterministic, insecure RNG (testing only)")
    parser.add_argument("--subset", type=parse_subset, default=None, help="Comma separated share indices used for reconstruction (default: first t)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


# === Main Demo ===
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    t = args.threshold
    n = args.num_shares
    if t < 1:
        parser.error("Threshold must be at least 1.")
    if t > n:
        parser.error("Threshold cannot be greater than the number of shares.")
    if args.subset is not None:
        if len(args.subset) < t:
            parser.error(f"--subset needs at least {t} indices.")
        if len(set(args.subset)) != len(args.subset):
            parser.error("--subset indices must be distinct.")
        if any(i < 1 or i > n for i in args.subset):
            parser.error(f"--subset indices must be between 1 and {n}.")

    rng = None
    if args.seed is not None:
        _logger.warning("Using a seeded, non-cryptographic RNG (seed=%d)", args.seed)
        rng = random.Random(args.seed)

    group = CurveGroup(args.curve)
    g, h = group.default_generators()
    vss = PedersenVSS(group, g, h, rng=rng)

    print(f"=== Pedersen VSS Demo ({args.curve}) ===")
    print(f"Generator g: {point_str(g)}")
    print(f"Generator h: {point_str(h)}\n")

    secret = group.random_nonzero(rng)
    shares = vss.share_secret(secret, t, n)

    for share in shares:
        is_valid = vss.verify_share(share)
        print(f"Share Index: {share.index}")
        print(f"Value1 (f_x): {int(share.value1)}")
        print(f"Value2 (g_x): {int(share.value2)}")
        print(f"Commitment: [{', '.join(point_str(c) for c in share.commitment)}]")
        print(f"Validation Result: {'valid' if is_valid else 'invalid'}")
        print("---------------------------")

    if args.subset is None:
        selected = shares[:t]
    else:
        selected = [shares[i - 1] for i in args.subset]
    recovered = vss.reconstruct(selected, t, n)

    print(f"Original Secret: {int(secret)}")
    print(f"Reconstructed Secret from shares {[s.index for s in selected]}: {int(recovered)}")

    if recovered == secret:
        print("Secret reconstruction: success")
        return 0
    print("Secret reconstruction: failure")
    return 1


if __name__ == "__main__":
    sys.exit(main())
