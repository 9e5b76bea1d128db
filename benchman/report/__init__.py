from benchman.report.report import Report, ReportEntry
from benchman.report.report_builder import ReportBuilder
from benchman.report.report_exporter import ReportExporter
from benchman.report.report_renderer import ReportRenderer

__all__ = ["Report", "ReportEntry", "ReportBuilder", "ReportExporter", "ReportRenderer"]
