"""Logging helpers."""

from .logger import HumanLogger
from .report_sink import JsonlReportSink, generate_html_report, load_reports

__all__ = ["HumanLogger", "JsonlReportSink", "generate_html_report", "load_reports"]
