"""
Property-based tests for the Scan Logger module.

Uses Hypothesis to verify dual-format output, level filtering and error
context capture.
"""

import json
from io import StringIO

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from typosquat_checker.enums import LogLevel
from typosquat_checker.exceptions import InputError
from typosquat_checker.scan_logger import ScanLogger


@st.composite
def component_name_strategy(draw) -> str:
    """Generate valid component names."""
    return draw(st.text(
        alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"),
        min_size=1,
        max_size=30,
    ))


@st.composite
def message_strategy(draw) -> str:
    """Generate single-line log messages."""
    return draw(st.text(
        alphabet=st.characters(
            whitelist_categories=('L', 'N', 'P', 'S', 'Z'),
            blacklist_characters='\x00\n\r',
        ),
        min_size=1,
        max_size=100,
    ))


@st.composite
def log_data_strategy(draw) -> dict:
    """Generate flat JSON-compatible data dicts."""
    return draw(st.dictionaries(
        keys=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12),
        values=st.one_of(
            st.integers(),
            st.booleans(),
            st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20),
        ),
        max_size=5,
    ))


class TestJsonFormat:
    """JSON lines output."""

    @given(
        level=st.sampled_from(list(LogLevel)),
        component=component_name_strategy(),
        message=message_strategy(),
        data=log_data_strategy(),
    )
    @settings(max_examples=100)
    def test_json_line_has_all_fields(self, level: LogLevel, component: str, message: str, data: dict) -> None:
        stream = StringIO()
        logger = ScanLogger(output_format="json", output_stream=stream, level=LogLevel.DEBUG)

        logger.log(level, component, message, data)

        lines = stream.getvalue().split("\n")
        assert lines[1:] == [""]
        parsed = json.loads(lines[0])
        assert parsed["level"] == level.value
        assert parsed["component"] == component
        assert parsed["message"] == message
        assert parsed["data"] == data
        assert "timestamp" in parsed


class TestTextFormat:
    """Human-readable output."""

    @given(component=component_name_strategy(), message=message_strategy())
    @settings(max_examples=50)
    def test_text_line_shape(self, component: str, message: str) -> None:
        stream = StringIO()
        logger = ScanLogger(output_format="text", output_stream=stream, level=LogLevel.DEBUG)

        logger.warn(component, message)

        line = stream.getvalue().rstrip("\n")
        assert f" WARN [{component}] {message}" in line
        assert line.startswith("[")

    def test_data_is_appended_as_json(self) -> None:
        stream = StringIO()
        logger = ScanLogger(output_stream=stream)

        logger.info("TypoGenerator", "Generated", {"count": 3})

        assert stream.getvalue().rstrip("\n").endswith('Generated {"count": 3}')

    def test_both_formats(self) -> None:
        stream = StringIO()
        logger = ScanLogger(output_format="both", output_stream=stream)

        logger.info("Pipeline", "done")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["message"] == "done"
        assert "INFO [Pipeline] done" in lines[1]

    def test_invalid_format_rejected(self) -> None:
        with pytest.raises(ValueError):
            ScanLogger(output_format="xml")


class TestLevelFiltering:
    """Entries below the threshold are dropped."""

    @given(
        threshold=st.sampled_from(list(LogLevel)),
        level=st.sampled_from(list(LogLevel)),
    )
    @settings(max_examples=50)
    def test_threshold(self, threshold: LogLevel, level: LogLevel) -> None:
        stream = StringIO()
        logger = ScanLogger(output_format="json", output_stream=stream, level=threshold)

        entry = logger.log(level, "Component", "message")

        if level.severity >= threshold.severity:
            assert entry is not None
            assert logger.entries == [entry]
            assert stream.getvalue()
        else:
            assert entry is None
            assert logger.entries == []
            assert stream.getvalue() == ""

    def test_from_config(self) -> None:
        logger = ScanLogger.from_config("warn", "json", output_stream=StringIO())

        assert logger.level is LogLevel.WARN
        assert logger.output_format == "json"
        assert logger.debug("Component", "hidden") is None

    def test_clear_entries(self) -> None:
        logger = ScanLogger(output_stream=StringIO())
        logger.info("Component", "one")

        logger.clear_entries()

        assert logger.entries == []


class TestErrorContext:
    """log_error captures the exception."""

    def test_exception_type_and_message(self) -> None:
        logger = ScanLogger(output_format="json", output_stream=StringIO())
        error = InputError(code="invalid_domain", message="bad input")

        entry = logger.log_error("ScanOrchestrator", "Scan failed", error=error, additional_data={"domain": "x"})

        assert entry.level is LogLevel.ERROR
        assert entry.data == {
            "domain": "x",
            "error_message": "bad input",
            "error_type": "InputError",
        }

    def test_additional_data_is_not_mutated(self) -> None:
        logger = ScanLogger(output_stream=StringIO())
        extra = {"name": "a.com"}

        logger.log_error("ResolutionPipeline", "failed", error=RuntimeError("x"), additional_data=extra)

        assert extra == {"name": "a.com"}

    def test_error_without_exception(self) -> None:
        logger = ScanLogger(output_stream=StringIO())

        entry = logger.log_error("Component", "plain")

        assert entry.data == {}
