import sys
from io import StringIO
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from benchman.config import ReportConfig
from benchman.report.report import Report, ReportEntry

TAG_STYLE = "blue"
LABEL_STYLE = "yellow"
HIGHLIGHT_STYLE = "bold red"
NO_DATA_STR = "no data"


class ReportRenderer:
    """
    Turns a report into terminal text.

    The output only depends on the report and the color flag, the computed
    statistics are never touched.
    """

    def __init__(self, config: ReportConfig) -> None:
        self._config = config
        self._time_unit = config.get_time_unit()

    def _create_console(self, file: TextIO, color: bool) -> Console:
        return Console(
            file=file,
            force_terminal=color,
            color_system="standard" if color else None,
            no_color=not color,
            highlight=False,
            soft_wrap=True,
            width=200,
        )

    def _format_duration(self, value: float) -> str:
        return f"{value * self._time_unit.scale:.3f}{str(self._time_unit)}"

    def _get_entry_lines(self, entry: ReportEntry):
        indent = " " * (entry.depth * self._config.indent)
        style = HIGHLIGHT_STYLE if entry.highlighted else LABEL_STYLE
        summary = entry.summary

        header = Text(indent)
        header.append(f"{entry.label} ({summary.count} samples)", style=style)

        if not summary.has_data:
            return header, Text(f"{indent}{NO_DATA_STR}")

        stats = (
            f"[ave.] {self._format_duration(summary.mean)},"
            f" [med.] {self._format_duration(summary.median)},"
            f" [p95] {self._format_duration(summary.p95)},"
            f" [p99] {self._format_duration(summary.p99)}"
        )
        return header, Text(f"{indent}{stats}")

    def _write(self, console: Console, report: Report) -> None:
        console.print(Text(report.tag, style=TAG_STYLE))
        for entry in report:
            for line in self._get_entry_lines(entry):
                console.print(line)

    def render(self, report: Report, color: Optional[bool] = None) -> str:
        if color is None:
            color = self._config.color

        buffer = StringIO()
        self._write(self._create_console(buffer, color), report)
        return buffer.getvalue()

    def print(
        self,
        report: Report,
        file: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ) -> None:
        if color is None:
            color = self._config.color

        self._write(self._create_console(file or sys.stdout, color), report)
