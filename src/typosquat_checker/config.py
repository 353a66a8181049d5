"""
Configuration dataclasses for the typosquat checker.

This module defines all configuration structures used throughout the system,
covering typo generation, DNS resolution, logging and output, together with
loading from JSON files and environment overrides.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .enums import KeyboardLayout, LogLevel, OutputFormat, StrategyTag
from .exceptions import ConfigError


# Upper bound on homoglyph candidates per algorithm run. A name with n
# occurrences of a pattern has 2**n keep/replace vectors; enumeration stops
# at this many results.
DEFAULT_HOMOGLYPH_LIMIT = 4096

DEFAULT_CONFIG_PATH = Path.home() / ".typosquat_checker" / "config.json"


@dataclass
class GeneratorConfig:
    """Typo generation settings."""

    keyboard_layout: str = KeyboardLayout.QWERTY.value
    strategies: Optional[list[str]] = None  # None runs every strategy
    homoglyph_limit: int = DEFAULT_HOMOGLYPH_LIMIT
    affix_directory: Optional[Path] = None

    def strategy_tags(self) -> Optional[list[StrategyTag]]:
        """Resolve configured strategy names to tags."""
        if self.strategies is None:
            return None
        return [StrategyTag.from_name(name) for name in self.strategies]


@dataclass
class ResolverConfig:
    """DNS resolution settings."""

    timeout_seconds: float = 2.0
    workers: int = 32
    nameservers: list[str] = field(default_factory=list)
    max_retries: int = 0
    base_delay_seconds: float = 0.2
    max_delay_seconds: float = 2.0
    simulation_mode: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = LogLevel.INFO.value
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class OutputConfig:
    """Presentation configuration."""

    format: str = OutputFormat.HUMAN.value
    color: bool = False
    show_invalid: bool = False


@dataclass
class SystemConfig:
    """Main system configuration combining all sub-configurations."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def create_default_config(simulation_mode: bool = False) -> SystemConfig:
    """
    Create a default system configuration.

    Args:
        simulation_mode: Enable simulation mode (no real DNS queries)

    Returns:
        SystemConfig with default settings
    """
    return SystemConfig(resolver=ResolverConfig(simulation_mode=simulation_mode))


def config_from_dict(data: dict) -> SystemConfig:
    """
    Build a SystemConfig from its JSON form. Missing keys take defaults.

    Raises:
        ConfigError: If a section has the wrong shape or a value is invalid
    """
    if not isinstance(data, dict):
        raise ConfigError(
            code="invalid_config",
            message="Configuration root must be an object",
            details={"type": type(data).__name__},
        )

    try:
        generator_data = data.get("generator", {})
        affix_directory = generator_data.get("affix_directory")
        generator = GeneratorConfig(
            keyboard_layout=generator_data.get("keyboard_layout", KeyboardLayout.QWERTY.value),
            strategies=generator_data.get("strategies"),
            homoglyph_limit=int(generator_data.get("homoglyph_limit", DEFAULT_HOMOGLYPH_LIMIT)),
            affix_directory=Path(affix_directory) if affix_directory else None,
        )

        resolver_data = data.get("resolver", {})
        resolver = ResolverConfig(
            timeout_seconds=float(resolver_data.get("timeout_seconds", 2.0)),
            workers=int(resolver_data.get("workers", 32)),
            nameservers=list(resolver_data.get("nameservers", [])),
            max_retries=int(resolver_data.get("max_retries", 0)),
            base_delay_seconds=float(resolver_data.get("base_delay_seconds", 0.2)),
            max_delay_seconds=float(resolver_data.get("max_delay_seconds", 2.0)),
            simulation_mode=bool(resolver_data.get("simulation_mode", False)),
        )

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=logging_data.get("level", LogLevel.INFO.value),
            output_format=logging_data.get("output_format", "text"),
        )

        output_data = data.get("output", {})
        output = OutputConfig(
            format=output_data.get("format", OutputFormat.HUMAN.value),
            color=bool(output_data.get("color", False)),
            show_invalid=bool(output_data.get("show_invalid", False)),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigError(
            code="invalid_config",
            message=f"Invalid configuration value: {e}",
            details={"error": str(e)},
        )

    config = SystemConfig(
        generator=generator,
        resolver=resolver,
        logging=logging_config,
        output=output,
    )
    validate_config(config)
    return config


def validate_config(config: SystemConfig) -> None:
    """
    Check enumerated and numeric settings.

    Raises:
        ConfigError: On the first invalid setting
    """
    errors = []
    layouts = {layout.value for layout in KeyboardLayout}
    if config.generator.keyboard_layout not in layouts:
        errors.append(f"keyboard_layout must be one of {sorted(layouts)}")
    if config.generator.homoglyph_limit < 1:
        errors.append("homoglyph_limit must be positive")
    if config.generator.strategies is not None:
        try:
            config.generator.strategy_tags()
        except ValueError as e:
            errors.append(str(e))
    if config.resolver.workers < 1:
        errors.append("workers must be at least 1")
    if config.resolver.timeout_seconds <= 0:
        errors.append("timeout_seconds must be positive")
    if config.resolver.max_retries < 0:
        errors.append("max_retries cannot be negative")
    if config.logging.level not in {level.value for level in LogLevel}:
        errors.append(f"Unknown log level: {config.logging.level}")
    if config.logging.output_format not in ("json", "text", "both"):
        errors.append(f"Unknown log format: {config.logging.output_format}")
    if config.output.format not in {fmt.value for fmt in OutputFormat}:
        errors.append(f"Unknown output format: {config.output.format}")

    if errors:
        raise ConfigError(
            code="invalid_config",
            message=errors[0],
            details={"errors": errors},
        )


def config_to_dict(config: SystemConfig) -> dict:
    """Convert a SystemConfig to its JSON form."""
    data = asdict(config)
    affix_directory = config.generator.affix_directory
    data["generator"]["affix_directory"] = str(affix_directory) if affix_directory else None
    return data


def load_config_from_file(config_path: Path) -> SystemConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        The parsed SystemConfig

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(
            code="config_not_found",
            message=f"Configuration file not found: {config_path}",
            details={"path": str(config_path)},
        )
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(
            code="config_unreadable",
            message=f"Error loading config: {e}",
            details={"path": str(config_path)},
        )

    return config_from_dict(data)


def save_config_to_file(config: SystemConfig, config_path: Path) -> bool:
    """
    Save configuration to a JSON file.

    Returns:
        True if successful, False otherwise
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config_to_dict(config), f, indent=2, ensure_ascii=False)
        return True
    except OSError:
        return False


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def apply_environment(config: SystemConfig, dotenv_path: Optional[Path] = None) -> SystemConfig:
    """
    Apply TYPOSQUAT_* environment overrides, reading a .env file first.

    Recognised variables: TYPOSQUAT_LAYOUT, TYPOSQUAT_WORKERS,
    TYPOSQUAT_DNS_TIMEOUT, TYPOSQUAT_NAMESERVERS (comma or space separated),
    TYPOSQUAT_LOG_LEVEL and TYPOSQUAT_LOG_FORMAT.
    """
    load_dotenv(dotenv_path=dotenv_path)

    layout = os.getenv("TYPOSQUAT_LAYOUT")
    if layout:
        config.generator.keyboard_layout = layout.strip().lower()

    config.resolver.workers = _int_env("TYPOSQUAT_WORKERS", config.resolver.workers)
    config.resolver.timeout_seconds = _float_env(
        "TYPOSQUAT_DNS_TIMEOUT", config.resolver.timeout_seconds
    )

    nameservers = os.getenv("TYPOSQUAT_NAMESERVERS", "")
    if nameservers.strip():
        config.resolver.nameservers = [
            ns for chunk in nameservers.split(",") for ns in chunk.split() if ns
        ]

    log_level = os.getenv("TYPOSQUAT_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.strip().lower()
    log_format = os.getenv("TYPOSQUAT_LOG_FORMAT")
    if log_format:
        config.logging.output_format = log_format.strip().lower()

    return config
