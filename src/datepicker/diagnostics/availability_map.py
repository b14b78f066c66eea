#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from datepicker.cli import add_constraint_args, config_from_args
from datepicker.core.time import iter_month_days
from datepicker.core.types import Month, YearMonth
from datepicker.engines.config import PickerConfig


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "datepicker-core[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "datepicker-core[diagnostics]"') from e


def forbidden_mask(np, config: PickerConfig, year: int):
    """
    12 x 31 float array for one year: 1.0 forbidden, 0.0 selectable,
    NaN where the day does not exist (e.g. Feb 30).
    """
    mask = np.full((12, 31), np.nan, dtype=float)
    for m in range(1, 13):
        for d in iter_month_days(year, m):
            mask[m - 1, d.day - 1] = 1.0 if config.is_day_forbidden(d) else 0.0
    return mask


def month_summary(np, mask) -> List[int]:
    """Selectable day count per month."""
    return [int(np.nansum(1.0 - row)) for row in mask]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="datepicker availability-map",
        description="Heat map of forbidden days over one year.",
    )
    p.add_argument("year", type=int)
    p.add_argument("--outbase", default="availability_map", help="Output base name (writes .png)")
    add_constraint_args(p)
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    config = config_from_args(args)
    mask = forbidden_mask(np, config, args.year)

    fig, ax = plt.subplots(figsize=(9.2, 4.0), constrained_layout=True)
    ax.imshow(np.ma.masked_invalid(mask), cmap="Greys", vmin=0.0, vmax=1.0, aspect="auto")
    ax.set_yticks(range(12))
    ax.set_yticklabels([m.label for m in Month])
    ax.set_xticks(range(0, 31, 5))
    ax.set_xticklabels([str(d) for d in range(1, 32, 5)])
    ax.set_xlabel("Day of month")
    ax.set_title(f"Forbidden days in {args.year} (dark = forbidden)")

    out = f"{args.outbase}.png"
    fig.savefig(out, dpi=150)
    print(f"Wrote {out}")

    for m, n in zip(Month, month_summary(np, mask)):
        flag = "  (forbidden)" if config.is_month_forbidden(YearMonth(args.year, m)) else ""
        print(f"  {m.label}: {n:2d} selectable{flag}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
