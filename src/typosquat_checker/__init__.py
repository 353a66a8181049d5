"""
Typosquat Checker - typo domain generation and DNS resolution.

This package generates typosquatting candidates for a domain with a set of
mutation strategies, resolves them concurrently and reports the valid
candidates that are live in DNS.
"""

__version__ = "0.1.0"
__author__ = "Typosquat Checker Team"

from typosquat_checker.exceptions import (
    TyposquatCheckerError,
    InputError,
    ResolutionError,
    ResolutionTimeout,
    ResourceMissingError,
    ConfigError,
)
from typosquat_checker.enums import (
    StrategyTag,
    KeyboardLayout,
    LogLevel,
    RecordType,
    ResolutionErrorCode,
    OutputFormat,
)
from typosquat_checker.config import (
    GeneratorConfig,
    ResolverConfig,
    LoggingConfig,
    OutputConfig,
    SystemConfig,
    create_default_config,
    load_config_from_file,
    save_config_to_file,
    apply_environment,
)
from typosquat_checker.models import (
    Domain,
    Candidate,
    ResolutionRecord,
    ScanReport,
)
from typosquat_checker.scan_logger import (
    ScanLogger,
    LogEntry,
)
from typosquat_checker.tld_registry import (
    TLDEntry,
    DEFAULT_TLDS,
)
from typosquat_checker.registry_oracle import (
    RegistryOracle,
)
from typosquat_checker.keyboard import (
    KeyboardModel,
)
from typosquat_checker.dictionaries import (
    MutationDictionaries,
    load_word_list,
)
from typosquat_checker.inflector import (
    pluralize,
    singularize,
)
from typosquat_checker.homoglyphs import (
    replace_permutations,
    homoglyph_variants,
)
from typosquat_checker.typo_generator import (
    TypoGenerator,
    catalog_by_strategy,
)
from typosquat_checker.retry_manager import (
    RetryManager,
)
from typosquat_checker.dns_resolver import (
    Resolver,
    DNSResolver,
    LookupResult,
    DNSLookupError,
)
from typosquat_checker.pipeline import (
    ResolutionPipeline,
)
from typosquat_checker.orchestrator import (
    ScanOrchestrator,
)
from typosquat_checker.output import (
    Colorizer,
    NoColor,
    AnsiColor,
    render,
    render_human,
    render_csv,
    render_json,
)
from typosquat_checker.cli import (
    main as cli_main,
    create_parser,
)

__all__ = [
    # Exceptions
    "TyposquatCheckerError",
    "InputError",
    "ResolutionError",
    "ResolutionTimeout",
    "ResourceMissingError",
    "ConfigError",
    # Enums
    "StrategyTag",
    "KeyboardLayout",
    "LogLevel",
    "RecordType",
    "ResolutionErrorCode",
    "OutputFormat",
    # Configuration
    "GeneratorConfig",
    "ResolverConfig",
    "LoggingConfig",
    "OutputConfig",
    "SystemConfig",
    "create_default_config",
    "load_config_from_file",
    "save_config_to_file",
    "apply_environment",
    # Models
    "Domain",
    "Candidate",
    "ResolutionRecord",
    "ScanReport",
    # Logging
    "ScanLogger",
    "LogEntry",
    # Registry
    "TLDEntry",
    "DEFAULT_TLDS",
    "RegistryOracle",
    # Generation
    "KeyboardModel",
    "MutationDictionaries",
    "load_word_list",
    "pluralize",
    "singularize",
    "replace_permutations",
    "homoglyph_variants",
    "TypoGenerator",
    "catalog_by_strategy",
    # Resolution
    "RetryManager",
    "Resolver",
    "DNSResolver",
    "LookupResult",
    "DNSLookupError",
    "ResolutionPipeline",
    # Orchestrator
    "ScanOrchestrator",
    # Output
    "Colorizer",
    "NoColor",
    "AnsiColor",
    "render",
    "render_human",
    "render_csv",
    "render_json",
    # CLI
    "cli_main",
    "create_parser",
]
