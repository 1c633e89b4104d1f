from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

logger = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_kurdish_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import kurdical

    p = argparse.ArgumentParser(prog="kurdical day", description="Gregorian -> Kurdish date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--dialect", default="sorani")
    p.add_argument("--epoch", default="median", help="median|nineveh (default: median)")
    p.add_argument("--all", action="store_true", help="print every dialect/epoch pair")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    d = _parse_ymd(args.date)
    if args.all:
        pairs = [(dl, ep) for ep in kurdical.Epoch for dl in kurdical.Dialect]
    else:
        pairs = [(kurdical.parse_dialect(args.dialect), kurdical.parse_epoch(args.epoch))]

    print(f"Gregorian: {d.isoformat()}")
    for dialect, epoch in pairs:
        k = kurdical.gregorian_to_kurdish(d, dialect, epoch)
        label = f"{epoch.name}, {dialect.name}"
        print(f"Kurdish ({label}): {kurdical.format_date(k)}  weekday={k.weekday}")
    return 0


def cmd_greg(argv: list[str]) -> int:
    import kurdical

    p = argparse.ArgumentParser(prog="kurdical greg", description="Kurdish -> Gregorian date")
    p.add_argument("date", help="Kurdish Y-M-D, e.g. 2723-1-1")
    p.add_argument("--epoch", default="median", help="median|nineveh (default: median)")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    y, m, d = _parse_kurdish_ymd(args.date)
    k = kurdical.KurdishDate(y, m, d, epoch=kurdical.parse_epoch(args.epoch))
    try:
        g = kurdical.kurdish_to_gregorian(k)
    except kurdical.KurdicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Kurdish ({k.epoch.name}): {y}-{m}-{d}")
    print(f"Gregorian: {g.isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `kurdical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="kurdical", description="Kurdish calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Kurdish date", add_help=False)
    sub.add_parser("greg", help="Kurdish -> Gregorian date", add_help=False)
    sub.add_parser("month", help="Print a Kurdish month grid (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Newroz table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "newroz-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logger.debug("command %s, args %s", args.cmd, rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "greg":
        return cmd_greg(rest)

    if args.cmd == "month":
        return _run_month(rest)

    if args.cmd == "new-years":
        return _run_module_main("kurdical.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "kurdical.diagnostics.round_trip",
            "newroz-drift": "kurdical.diagnostics.newroz_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def _run_month(argv: list[str]) -> int:
    import kurdical

    try:
        return _run_module_main("kurdical.diagnostics.pretty_month", argv)
    except kurdical.KurdicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
