"""
Property-based tests for report rendering.
"""

import csv
import io
import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from typosquat_checker.enums import OutputFormat, StrategyTag
from typosquat_checker.models import Candidate, Domain, ResolutionRecord, ScanReport
from typosquat_checker.output import (
    COLUMNS,
    AnsiColor,
    NoColor,
    colorizer_for,
    render,
    render_csv,
    render_human,
    render_json,
)


DOMAIN = Domain(raw="example.com", extension="com", registered_name="example", is_valid=True)


def make_record(strategy: StrategyTag, name: str, addresses=(), ns="", mx="", valid=True) -> ResolutionRecord:
    return ResolutionRecord(
        candidate=Candidate(strategy=strategy, name=name, is_valid=valid),
        addresses=tuple(addresses),
        name_server=ns,
        mail_exchange=mx,
    )


def sample_report() -> ScanReport:
    return ScanReport(
        domain=DOMAIN,
        records=[
            make_record(StrategyTag.ORIGINAL, "example.com", ["93.184.216.34"], "a.iana-servers.net.", ""),
            make_record(StrategyTag.CHARACTER_OMISSION, "exmple.com"),
            make_record(StrategyTag.CHARACTER_SWAP, "examlpe.com", ["1.2.3.4", "2001:db8::1"], "ns1.parking.test.", "mx.parking.test."),
            make_record(StrategyTag.HOMOGLYPHS, "exarnple.com", ["5.6.7.8"], valid=False),
        ],
    )


@st.composite
def report_strategy(draw) -> ScanReport:
    """Generate reports with arbitrary resolved records."""
    records = draw(st.lists(
        st.builds(
            make_record,
            strategy=st.sampled_from(list(StrategyTag)),
            name=st.text(alphabet="abcdefghij-", min_size=1, max_size=15).map(lambda s: s + ".com"),
            addresses=st.lists(st.sampled_from(["192.0.2.1", "198.51.100.7", "2001:db8::1"]), max_size=2, unique=True),
            ns=st.sampled_from(["", "ns1.example.net."]),
            mx=st.sampled_from(["", "mail.example.net."]),
        ),
        max_size=15,
    ))
    return ScanReport(domain=DOMAIN, records=records)


class TestHumanFormat:
    """Column-aligned table."""

    def test_sample_table(self) -> None:
        text = render_human(sample_report())
        lines = text.split("\n")

        assert text.endswith("\n\n")
        assert lines[0].startswith("Typo Type")
        assert "---" not in text
        assert len([line for line in lines if line]) == 3
        assert "exarnple.com" not in text
        assert "1.2.3.4 2001:db8::1" in text

    @given(report=report_strategy())
    @settings(max_examples=50)
    def test_columns_are_aligned(self, report: ScanReport) -> None:
        text = render_human(report, show_invalid=True)
        lines = text[:-2].split("\n")

        assert len(lines) == len(report.records) + 1
        starts = [lines[0].index(heading) for heading in COLUMNS]
        for line in lines:
            assert len(line) == len(lines[0])
        for record, line in zip(report.records, lines[1:]):
            assert line[starts[0]:].startswith(record.candidate.strategy.value)
            assert line[starts[1]:].startswith(record.candidate.name)

    def test_empty_report_is_header_only(self) -> None:
        text = render_human(ScanReport(domain=DOMAIN))

        assert text.split("\n")[0].split() == ["Typo", "Type", "Typo", "Domain", "IP", "NameServer", "MailServer"]
        assert text.count("\n") == 2

    def test_color_wraps_header_and_strategy(self) -> None:
        plain = render_human(sample_report(), colorizer=NoColor())
        colored = render_human(sample_report(), colorizer=AnsiColor())

        assert "\x1b[" not in plain
        assert "\x1b[" in colored
        stripped = colored
        for code in ("\x1b[1m", "\x1b[36m", "\x1b[0m"):
            stripped = stripped.replace(code, "")
        assert stripped == plain

    def test_colorizer_for(self) -> None:
        assert isinstance(colorizer_for(True), AnsiColor)
        assert isinstance(colorizer_for(False), NoColor)


class TestCsvFormat:
    """Quoted CSV."""

    def test_sample_csv(self) -> None:
        text = render_csv(sample_report())

        assert text.split("\n")[0] == '"Typo Type","Typo Domain","IP","NameServer","MailServer"'
        assert '"Character Swap","examlpe.com","1.2.3.4 2001:db8::1","ns1.parking.test.","mx.parking.test."' in text
        assert text.endswith("\n")
        assert "\r" not in text

    @given(report=report_strategy())
    @settings(max_examples=50)
    def test_csv_parses_back(self, report: ScanReport) -> None:
        rows = list(csv.reader(io.StringIO(render_csv(report))))

        assert tuple(rows[0]) == COLUMNS
        assert rows[1:] == [
            [item["type"], item["name"], item["ip"], item["nameserver"], item["mailserver"]]
            for item in report.to_dict()["items"]
        ]


class TestJsonFormat:
    """Boundary document."""

    def test_sample_json(self) -> None:
        document = json.loads(render_json(sample_report()))

        assert document["domain"] == "example.com"
        assert document["tld"] == "com"
        assert [item["name"] for item in document["items"]] == ["example.com", "examlpe.com"]
        assert document["items"][1]["ip"] == "1.2.3.4 2001:db8::1"

    def test_show_invalid_lists_everything(self) -> None:
        document = json.loads(render_json(sample_report(), show_invalid=True))

        assert len(document["items"]) == 4
        assert document["items"][1] == {
            "type": "Character Omission",
            "name": "exmple.com",
            "ip": "",
            "nameserver": "",
            "mailserver": "",
        }


class TestDispatch:
    """render() picks the format."""

    @pytest.mark.parametrize("fmt", ["human", "csv", "json", OutputFormat.JSON, "JSON"])
    def test_known_formats(self, fmt) -> None:
        assert render(sample_report(), fmt)

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            render(sample_report(), "yaml")

    def test_unresolved_report_lists_every_record(self) -> None:
        report = sample_report()
        report.resolved = False

        document = json.loads(render(report, OutputFormat.JSON))

        assert len(document["items"]) == 4
