from report.export import (
    ReportError,
    build_report,
    inputs_from_report,
    load_report,
    report_to_json,
    report_to_payload,
    write_report,
)
from report.schema import RoiReport

__all__ = [
    "ReportError",
    "RoiReport",
    "build_report",
    "inputs_from_report",
    "load_report",
    "report_to_json",
    "report_to_payload",
    "write_report",
]
