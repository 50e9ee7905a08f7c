import sys
from argparse import ArgumentParser

from base1.shared.config import VERIFY_MAX_LENGTH, VERIFY_SAMPLES, VERIFY_SEED, VERIFY_UNARY_MAX_LENGTH
from base1.verify.roundtrip import random_samples, run_roundtrip_check

def main() -> None:
    parser = ArgumentParser(description="Round-trip random byte strings through every Base1 path")
    parser.add_argument("--samples", type=int, default=VERIFY_SAMPLES, help=f"Random samples (default {VERIFY_SAMPLES})")
    parser.add_argument("--max-length", type=int, default=VERIFY_MAX_LENGTH, help=f"Longest sample in bytes (default {VERIFY_MAX_LENGTH})")
    parser.add_argument("--unary-max-length", type=int, default=VERIFY_UNARY_MAX_LENGTH, help=f"Longest sample sent through the unary path (default {VERIFY_UNARY_MAX_LENGTH})")
    parser.add_argument("--seed", type=int, default=VERIFY_SEED, help=f"Random seed (default {VERIFY_SEED})")
    args = parser.parse_args()

    samples = random_samples(args.samples, args.max_length, args.seed)
    report = run_roundtrip_check(samples, args.unary_max_length)

    print(f"\nChecked {report['checked']} samples, {len(report['failures'])} failures.")
    for failure in report["failures"]:
        print(f"  {failure['check']}: {failure['sample']!r} -> {failure['got']!r}")

    if report["failures"]:
        sys.exit(1)

if __name__ == "__main__":
    main()
