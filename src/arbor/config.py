"""Configuration management for arbor parsing and extraction."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".arbor"


@dataclass
class ParserConfig:
    """Configuration for parsing and entity extraction.

    Attributes:
        max_decorator_depth: Maximum number of decorated_definition wrappers
            climbed when resolving decorators.
        typed_default_parameters: Recognize ``x: int = 5`` parameters. When
            False such parameters are left out of extracted parameter lists.
        report_missing_nodes: Report nodes the grammar had to insert as
            "warning" diagnostics in addition to "error" ones.
    """
    max_decorator_depth: int = 32
    typed_default_parameters: bool = False
    report_missing_nodes: bool = False


def _flag(section: dict, key: str, default: bool) -> bool:
    """Read a YAML boolean, ignoring values that are not true booleans."""
    value = section.get(key, default)
    if not isinstance(value, bool):
        logger.warning(f"Ignoring non-boolean value for {key}: {value!r}")
        return default
    return value


def load_parser_config(repo_root: Path | None = None) -> ParserConfig:
    """Load parser configuration from .arbor file in repository root.

    Args:
        repo_root: Path to repository root. If None, uses current directory.

    Returns:
        ParserConfig object with loaded or default values.

    Notes:
        If .arbor file doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        parser:
          max_decorator_depth: 32
          typed_default_parameters: false
          report_missing_nodes: false
        ```
    """
    if repo_root is None:
        repo_root = Path.cwd()

    config_path = repo_root / CONFIG_FILE_NAME

    if not config_path.exists():
        return ParserConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return ParserConfig()

        parser_config = data.get("parser", {})
        if not isinstance(parser_config, dict):
            return ParserConfig()

        max_depth = int(parser_config.get(
            "max_decorator_depth",
            ParserConfig.max_decorator_depth
        ))
        if max_depth < 1:
            raise ValueError(f"max_decorator_depth must be positive, got {max_depth}")

        return ParserConfig(
            max_decorator_depth=max_depth,
            typed_default_parameters=_flag(
                parser_config,
                "typed_default_parameters",
                ParserConfig.typed_default_parameters
            ),
            report_missing_nodes=_flag(
                parser_config,
                "report_missing_nodes",
                ParserConfig.report_missing_nodes
            ),
        )
    except (yaml.YAMLError, OSError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring invalid config at {config_path}: {e}")
        return ParserConfig()
