from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import kurdical
from kurdical import Dialect, Epoch


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_epochs(s: str) -> List[Epoch]:
    # "median,nineveh" -> [Epoch.MEDIAN_KINGDOM, Epoch.FALL_OF_NINEVEH]
    return [kurdical.parse_epoch(x) for x in s.split(",") if x.strip()]


def roundtrip_test(
    epoch: Epoch,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    dialects = list(Dialect)

    for _ in range(N):
        d0 = random_date(start, end)
        dialect = random.choice(dialects)

        k = kurdical.gregorian_to_kurdish(d0, dialect, epoch)
        back = kurdical.kurdish_to_gregorian(k)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("epoch:", epoch.name)
            print("d0:", d0)
            print("kurdish:", k)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> kurdish -> gregorian.")
    p.add_argument("--epochs", type=str, default="median,nineveh", help="Comma-separated epoch list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per epoch.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per epoch.")
    args = p.parse_args(argv)

    epochs = parse_epochs(args.epochs)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for ep in epochs:
        print(f"Testing {ep.name} ...")
        f = roundtrip_test(ep, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
