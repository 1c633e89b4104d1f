from __future__ import annotations

from datetime import timedelta
import argparse

import kurdical
from kurdical import KurdishDate


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def kurdish_month_calendar(Y: int, M: int, dialect: kurdical.Dialect, epoch: kurdical.Epoch) -> None:
    d0 = kurdical.kurdish_to_gregorian(KurdishDate(Y, M, 1, epoch=epoch))
    n_days = kurdical.days_in_month(Y, M, epoch=epoch)
    first = kurdical.gregorian_to_kurdish(d0, dialect, epoch)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday - 1  # Saturday=1
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(n_days):
        d = d0 + timedelta(days=i)
        wk.append(cell(f"{i + 1:2d}", f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    d1 = d0 + timedelta(days=n_days - 1)
    title = f"{first.month_name}  Y={Y}  M={M}  {epoch.name}   ({d0} .. {d1})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Kurdish month as a Saturday-first week grid.")
    p.add_argument("year", type=int, help="Kurdish year (e.g. 2726)")
    p.add_argument("month", type=int, help="Kurdish month 1..12")
    p.add_argument("--dialect", default="sorani")
    p.add_argument("--epoch", default="median", help="median|nineveh (default: median)")
    args = p.parse_args(argv)

    kurdish_month_calendar(
        args.year,
        args.month,
        kurdical.parse_dialect(args.dialect),
        kurdical.parse_epoch(args.epoch),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
