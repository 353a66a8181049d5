"""
Tests for the command-line interface.

Scans run either without resolution or in simulation mode, so no DNS
traffic leaves the test process.
"""

import json

import pytest

from typosquat_checker import cli
from typosquat_checker.cli import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_OK, create_parser, main
from typosquat_checker.config import config_to_dict, create_default_config
from typosquat_checker.enums import StrategyTag


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TYPOSQUAT_LAYOUT",
        "TYPOSQUAT_WORKERS",
        "TYPOSQUAT_DNS_TIMEOUT",
        "TYPOSQUAT_NAMESERVERS",
        "TYPOSQUAT_LOG_LEVEL",
        "TYPOSQUAT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestParser:
    """Argument parsing."""

    def test_scan_defaults(self) -> None:
        args = create_parser().parse_args(["scan", "example.com"])

        assert args.domain == "example.com"
        assert args.layout is None
        assert args.no_resolve is False
        assert args.strategy is None

    def test_repeatable_options(self) -> None:
        args = create_parser().parse_args([
            "scan", "example.com", "-n", "1.1.1.1", "-n", "9.9.9.9", "-s", "wrong-tld", "-s", "vowel-swap",
        ])

        assert args.nameserver == ["1.1.1.1", "9.9.9.9"]
        assert args.strategy == ["wrong-tld", "vowel-swap"]

    def test_unknown_layout_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["scan", "example.com", "--layout", "colemak"])

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == EXIT_OK
        assert "typosquat-checker" in capsys.readouterr().out


class TestStrategiesCommand:
    def test_lists_every_strategy(self, capsys) -> None:
        assert main(["strategies"]) == EXIT_OK

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(StrategyTag) - 1
        assert lines[0].split()[0] == "character-omission"
        assert any(line.startswith("wrong-tld") and line.endswith("Wrong TLD") for line in lines)


class TestScanCommand:
    """End-to-end scans."""

    def test_no_resolve_json(self, capsys) -> None:
        assert main(["scan", "Example.com", "--no-resolve", "--format", "json"]) == EXIT_OK

        document = json.loads(capsys.readouterr().out)
        assert document["domain"] == "example.com"
        assert document["items"][0] == {
            "type": "Original",
            "name": "example.com",
            "ip": "",
            "nameserver": "",
            "mailserver": "",
        }
        assert "examlpe.com" in {item["name"] for item in document["items"]}

    def test_dry_run(self, capsys) -> None:
        assert main(["scan", "resolved-shop.com", "--dry-run", "--format", "json"]) == EXIT_OK

        captured = capsys.readouterr()
        assert "Simulation mode" in captured.err
        document = json.loads(captured.out)
        assert document["items"][0]["name"] == "resolved-shop.com"
        assert document["items"][0]["ip"] == "192.0.2.1"
        assert all(item["name"].startswith("resolved-") for item in document["items"])

    def test_strategy_filter(self, capsys) -> None:
        code = main(["scan", "example.com", "--no-resolve", "-f", "json", "-s", "missing-dot", "-s", "wrong-tld"])

        assert code == EXIT_OK
        types = {item["type"] for item in json.loads(capsys.readouterr().out)["items"]}
        assert types == {"Original", "Wrong TLD"}

    def test_unknown_strategy_fails(self, capsys) -> None:
        assert main(["scan", "example.com", "--no-resolve", "-s", "teleport"]) == EXIT_ERROR
        assert "teleport" in capsys.readouterr().err

    def test_invalid_domain_reports_error(self, capsys) -> None:
        assert main(["scan", "not a domain", "--no-resolve"]) == EXIT_OK

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Original" in captured.out

    def test_csv_to_file(self, tmp_path, capsys) -> None:
        output = tmp_path / "reports" / "scan.csv"

        code = main(["scan", "example.com", "--no-resolve", "-f", "csv", "-o", str(output)])

        assert code == EXIT_OK
        assert output.read_text(encoding="utf-8").startswith('"Typo Type","Typo Domain"')
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Results written to" in captured.err

    def test_config_file(self, tmp_path, capsys) -> None:
        config = create_default_config()
        config.generator.strategies = ["vowel-swap"]
        config.output.format = "json"
        path = tmp_path / "config.json"
        path.write_text(json.dumps(config_to_dict(config)), encoding="utf-8")

        assert main(["scan", "example.com", "--no-resolve", "-c", str(path)]) == EXIT_OK

        types = {item["type"] for item in json.loads(capsys.readouterr().out)["items"]}
        assert types == {"Original", "Vowel Swap"}

    def test_missing_config_file(self, tmp_path, capsys) -> None:
        assert main(["scan", "example.com", "-c", str(tmp_path / "absent.json")]) == EXIT_ERROR
        assert "not found" in capsys.readouterr().err

    def test_verbose_logs_to_stderr(self, capsys) -> None:
        assert main(["scan", "example.com", "--no-resolve", "-f", "json", "--verbose"]) == EXIT_OK

        captured = capsys.readouterr()
        assert "[ScanOrchestrator]" in captured.err
        assert "[TypoGenerator]" in captured.err
        json.loads(captured.out)

    def test_interrupt_returns_partial_report(self, monkeypatch, capsys) -> None:
        async def interrupted_scan(orchestrator, domain, resolve):
            await orchestrator.scan(domain, resolve=resolve)
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_scan", interrupted_scan)

        code = main(["scan", "resolved-shop.com", "--dry-run", "-f", "json"])

        captured = capsys.readouterr()
        assert code == EXIT_INTERRUPTED
        assert "partial" in captured.err
        assert json.loads(captured.out)["items"][0]["name"] == "resolved-shop.com"

    def test_interrupt_before_resolution(self, monkeypatch, capsys) -> None:
        async def interrupted_scan(orchestrator, domain, resolve):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_scan", interrupted_scan)

        assert main(["scan", "example.com", "--dry-run"]) == EXIT_INTERRUPTED
        assert "Interrupted" in capsys.readouterr().err


class TestConfigCommand:
    """config init/show/validate."""

    def test_init_show_validate(self, tmp_path, capsys) -> None:
        path = str(tmp_path / "cfg" / "config.json")

        assert main(["config", "init", "--path", path]) == EXIT_OK
        assert main(["config", "init", "--path", path]) == EXIT_ERROR
        assert main(["config", "init", "--path", path, "--force"]) == EXIT_OK
        assert main(["config", "show", "--path", path]) == EXIT_OK
        assert main(["config", "validate", "--path", path]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Use --force to overwrite." in out
        assert "Keyboard layout: qwerty" in out
        assert "Strategies: all" in out
        assert "is valid" in out

    def test_show_missing(self, tmp_path, capsys) -> None:
        assert main(["config", "show", "--path", str(tmp_path / "absent.json")]) == EXIT_ERROR
        assert "config init" in capsys.readouterr().out

    def test_validate_reports_every_error(self, tmp_path, capsys) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"resolver": {"workers": 0}, "output": {"format": "yaml"}}), encoding="utf-8")

        assert main(["config", "validate", "--path", str(path)]) == EXIT_ERROR

        err = capsys.readouterr().err
        assert "workers" in err
        assert "yaml" in err
