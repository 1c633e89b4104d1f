from __future__ import annotations

from datetime import date
import argparse

import kurdical
from kurdical import Epoch


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Newroz (Kurdish New Year) date table.")
    p.add_argument("--from-year", type=int, default=2720, help="First Kurdish year.")
    p.add_argument("--to-year", type=int, default=2750, help="Last Kurdish year.")
    p.add_argument("--epoch", default="median", help="median|nineveh (default: median)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    epoch = kurdical.parse_epoch(args.epoch)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    other = Epoch.FALL_OF_NINEVEH if epoch is Epoch.MEDIAN_KINGDOM else Epoch.MEDIAN_KINGDOM
    headers = ["Year", other.name.title().replace("_", ""), "Newroz", "Days", "Leap"]
    colw = [6, max(6, len(headers[1])), 10, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        d = kurdical.new_year_day(Y, epoch=epoch)
        other_year = Y - epoch.offset + other.offset
        leap = "L" if kurdical.is_leap_year(Y, epoch=epoch) else ""
        row = [str(Y), str(other_year), fmt(d), str(kurdical.days_in_year(Y, epoch=epoch)), leap]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
