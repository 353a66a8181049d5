"""
Report rendering for the typosquat checker.

Three presentations of a ScanReport:
- human: column-aligned table, no rule line under the header
- csv: every field quoted, header row, newline-separated rows
- json: the report's boundary document

By default only the filtered results are rendered; show_invalid lists
every record instead.
"""

import csv
import io
import json
from typing import Optional, Union

from termcolor import colored

from .enums import OutputFormat
from .models import ScanReport

COLUMNS = ("Typo Type", "Typo Domain", "IP", "NameServer", "MailServer")

_ROW_KEYS = ("type", "name", "ip", "nameserver", "mailserver")


class Colorizer:
    """Highlighting applied to human-readable output."""

    def header(self, text: str) -> str:
        raise NotImplementedError

    def strategy(self, text: str) -> str:
        raise NotImplementedError


class NoColor(Colorizer):
    """Plain output."""

    def header(self, text: str) -> str:
        return text

    def strategy(self, text: str) -> str:
        return text


class AnsiColor(Colorizer):
    """ANSI escapes via termcolor, emitted even when stdout is not a terminal."""

    def header(self, text: str) -> str:
        return colored(text, attrs=["bold"], force_color=True)

    def strategy(self, text: str) -> str:
        return colored(text, "cyan", force_color=True)


def colorizer_for(enabled: bool) -> Colorizer:
    return AnsiColor() if enabled else NoColor()


def _rows(report: ScanReport, show_invalid: bool) -> list[list[str]]:
    document = report.to_dict(show_invalid=show_invalid)
    return [[item[key] for key in _ROW_KEYS] for item in document["items"]]


def render_human(
    report: ScanReport,
    colorizer: Optional[Colorizer] = None,
    show_invalid: bool = False,
) -> str:
    """Column-aligned table; each column is padded to its widest cell plus two."""
    colorizer = colorizer or NoColor()
    rows = _rows(report, show_invalid)

    widths = [
        max([len(heading)] + [len(row[i]) for row in rows]) + 2
        for i, heading in enumerate(COLUMNS)
    ]

    lines = []
    lines.append("".join(
        colorizer.header(heading) + " " * (widths[i] - len(heading))
        for i, heading in enumerate(COLUMNS)
    ))
    for row in rows:
        cells = []
        for i, cell in enumerate(row):
            text = colorizer.strategy(cell) if i == 0 else cell
            cells.append(text + " " * (widths[i] - len(cell)))
        lines.append("".join(cells))

    return "\n".join(lines) + "\n\n"


def render_csv(report: ScanReport, show_invalid: bool = False) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(COLUMNS)
    writer.writerows(_rows(report, show_invalid))
    return buffer.getvalue()


def render_json(report: ScanReport, show_invalid: bool = False) -> str:
    return json.dumps(report.to_dict(show_invalid=show_invalid), ensure_ascii=False) + "\n"


def render(
    report: ScanReport,
    fmt: Union[OutputFormat, str] = OutputFormat.HUMAN,
    colorizer: Optional[Colorizer] = None,
    show_invalid: bool = False,
) -> str:
    """
    Render a report in the requested format.

    Args:
        report: Report to render
        fmt: OutputFormat or its string value
        colorizer: Highlighting for the human format (ignored otherwise)
        show_invalid: List every record instead of the filtered results

    Raises:
        ValueError: If the format is unknown
    """
    if not isinstance(fmt, OutputFormat):
        fmt = OutputFormat(str(fmt).lower())

    if fmt is OutputFormat.CSV:
        return render_csv(report, show_invalid=show_invalid)
    if fmt is OutputFormat.JSON:
        return render_json(report, show_invalid=show_invalid)
    return render_human(report, colorizer=colorizer, show_invalid=show_invalid)
