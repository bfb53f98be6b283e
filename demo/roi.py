import argparse
import json
import logging
from typing import Optional, Sequence

from config import Assumptions, ConfigError, load_config, safe_config_summary
from model.breakeven import describe_break_even
from model.inputs import DEFAULT_FINANCIALS, DEFAULT_TIME_METRICS
from model.validation import InputValidationError
from pipeline.normalize_inputs import normalize_assumptions, normalize_financials, normalize_time_metrics
from pipeline.roi_runner import RoiInputs, run_roi
from report.export import ReportError, build_report, write_report
from scenarios import describe_scenario
from scenarios.compare import comparison_frame


logger = logging.getLogger("demo.roi")


def _load_inputs(path: Optional[str], base: Assumptions) -> RoiInputs:
    if not path:
        return RoiInputs(time_metrics=DEFAULT_TIME_METRICS, financials=DEFAULT_FINANCIALS, assumptions=base)
    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)
    metrics, metric_warnings = normalize_time_metrics(raw.get("timeMetrics", []))
    financials, financial_warnings = normalize_financials(raw.get("financialMetrics", []))
    assumptions, setting_warnings = normalize_assumptions(raw.get("settings", {}), base=base)
    warnings = metric_warnings + financial_warnings + setting_warnings
    if warnings:
        logger.info("Adjusted %d input value(s).", len(warnings))
    return RoiInputs(time_metrics=metrics, financials=financials, assumptions=assumptions)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Project AI tool ROI from time-allocation inputs.")
    parser.add_argument("--inputs", help="JSON file with timeMetrics, financialMetrics and settings.")
    parser.add_argument("--horizon", type=int, help="Projection horizon in months.")
    parser.add_argument("--export", action="store_true", help="Write the JSON report to the export directory.")
    parser.add_argument("--env", default=".env", help="Path to an env file.")
    args = parser.parse_args(argv)

    try:
        config = load_config(env_path=args.env)
        base = Assumptions.from_env()
    except ConfigError as exc:
        print(str(exc))
        return 1
    logging.basicConfig(level=config.log_level, format="%(message)s")
    logger.debug("Loaded config: %s", safe_config_summary(config))

    try:
        inputs = _load_inputs(args.inputs, base)
    except (OSError, json.JSONDecodeError, InputValidationError) as exc:
        print(f"Invalid inputs: {exc}")
        return 1

    horizon = args.horizon if args.horizon is not None else config.horizon_months
    result = run_roi(inputs, horizon_months=horizon, weeks_per_month=config.weeks_per_month)
    summary = result.summary
    print(
        "ROI OK "
        f"hours_saved_weekly={summary.hours_saved_weekly:.1f} "
        f"hours_saved_monthly={summary.hours_saved_monthly:.1f} "
        f"value_yearly={summary.dollar_value_yearly:.0f} "
        f"net_yearly={summary.net_roi_yearly:.0f} "
        f"roi={summary.roi_percentage:.0f}% "
        f"break_even={describe_break_even(summary.break_even_days)} "
        f"payback_months={summary.payback_period_months:.1f}"
    )
    print(comparison_frame(result.comparison).to_string(index=False))
    for scenario_result in result.comparison:
        name = scenario_result.scenario.name
        print(f"  {name.value}: {describe_scenario(name)}")

    if args.export:
        try:
            path = write_report(build_report(result), export_dir=config.export_dir)
        except ReportError as exc:
            print(str(exc))
            return 1
        print(f"REPORT OK path={path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
