import argparse
import logging
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd

from config import Assumptions, ConfigError, load_config
from model.inputs import FinancialMetrics
from pipeline.roi_runner import RoiInputs, run_roi
from pipeline.time_tracking import (
    TimeEntry,
    category_breakdown,
    filter_entries,
    time_metrics_from_breakdown,
    top_opportunity,
)


logger = logging.getLogger("demo.time_tracking")


def read_entries(path: str) -> List[TimeEntry]:
    """Read tracked sessions from a CSV with id, category_id, duration_seconds, date, productivity and ai_used columns."""
    df = pd.read_csv(path, dtype={"id": str, "category_id": str})
    required = {"id", "category_id", "duration_seconds", "date"}
    missing = required - set(df.columns)
    if missing:
        raise ValueError("Missing columns: " + ", ".join(sorted(missing)))
    df["date"] = pd.to_datetime(df["date"], errors="raise").dt.date
    entries = []
    for row in df.to_dict(orient="records"):
        productivity = row.get("productivity")
        description = row.get("description")
        entries.append(
            TimeEntry(
                id=row["id"],
                category_id=row["category_id"],
                duration_seconds=float(row["duration_seconds"]),
                date=row["date"],
                productivity=3 if pd.isna(productivity) else int(productivity),
                ai_used=_parse_flag(row.get("ai_used")),
                description=None if pd.isna(description) else str(description),
            )
        )
    return entries


def _parse_flag(value: object) -> bool:
    if value is None or pd.isna(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "y"}
    return bool(value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate AI savings from tracked time.")
    parser.add_argument("entries", help="CSV of tracked sessions.")
    parser.add_argument("--range", dest="date_range", default="week", choices=["today", "week", "month", "year"])
    parser.add_argument("--today", help="Reference date (YYYY-MM-DD); defaults to the current date.")
    parser.add_argument("--hourly-rate", type=float, default=50.0)
    parser.add_argument("--tool-cost", type=float, default=100.0)
    parser.add_argument("--env", default=".env")
    args = parser.parse_args(argv)

    try:
        config = load_config(env_path=args.env)
        assumptions = Assumptions.from_env()
    except ConfigError as exc:
        print(str(exc))
        return 1
    logging.basicConfig(level=config.log_level, format="%(message)s")

    today = date.fromisoformat(args.today) if args.today else date.today()
    try:
        entries = read_entries(args.entries)
        financials = FinancialMetrics(hourly_value=args.hourly_rate, monthly_tool_cost=args.tool_cost)
    except (OSError, ValueError) as exc:
        print(f"Invalid input: {exc}")
        return 1

    breakdown = category_breakdown(filter_entries(entries, args.date_range, today))
    if breakdown.empty:
        print("No tracked time in range.")
        return 0
    print(breakdown.to_string(index=False))

    metrics = time_metrics_from_breakdown(
        breakdown,
        args.date_range,
        assumptions.work_days_per_week,
        config.weeks_per_month,
    )
    result = run_roi(
        RoiInputs(time_metrics=metrics, financials=financials, assumptions=assumptions),
        horizon_months=config.horizon_months,
        weeks_per_month=config.weeks_per_month,
    )
    best = top_opportunity(metrics)
    if best is not None:
        logger.info("Start with %s (%.1f hours/week).", best.label.lower(), best.hours_saved_weekly)
    print(
        "SAVINGS OK "
        f"hours_saved_weekly={result.summary.hours_saved_weekly:.1f} "
        f"value_yearly={result.summary.dollar_value_yearly:.0f} "
        f"roi={result.summary.roi_percentage:.0f}%"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
