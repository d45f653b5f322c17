#!/usr/bin/env python3
"""
Configuration Management for Order Match

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production) so that tests
never touch a real rule set.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class RulesConfig:
    """Matching rule and category persistence settings."""

    rules_file: Path
    categories_file: Path
    backup_dir: Path


@dataclass
class ExportConfig:
    """CSV export settings."""

    output_dir: Path
    result_suffix: str = "_매칭결과"
    default_basename: str = "처리결과"


@dataclass
class Config:
    """
    Main configuration class for the order matching application.

    Loads configuration from environment variables with defaults suitable for
    a single-user desktop install.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    rules: RulesConfig
    export: ExportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("ORDERMATCH_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_ordermatch"
            base_dir = Path(os.getenv("ORDERMATCH_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("ORDERMATCH_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        rules_dir = data_dir / "rules"
        output_dir = Path(os.getenv("ORDERMATCH_EXPORT_DIR", str(data_dir / "exports")))

        # Ensure directories exist
        for directory in [data_dir, rules_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        rules = RulesConfig(
            rules_file=Path(os.getenv("ORDERMATCH_RULES_FILE", str(rules_dir / "matching_rules.json"))),
            categories_file=Path(os.getenv("ORDERMATCH_CATEGORIES_FILE", str(rules_dir / "categories.json"))),
            backup_dir=rules_dir / "backups",
        )

        export = ExportConfig(output_dir=output_dir)

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            rules=rules,
            export=export,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        # Check required directories
        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        for name, path in [
            ("rules_file", self.rules.rules_file),
            ("categories_file", self.rules.categories_file),
        ]:
            if path.is_dir():
                errors.append(f"{name} points at a directory: {path}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                # Nested dataclass
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    if isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value
                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_output_dir() -> Path:
    """Get the CSV export directory path."""
    return get_config().output_dir


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST
