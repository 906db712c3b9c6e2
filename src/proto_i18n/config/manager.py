"""Configuration manager for proto-i18n.

This module loads optional YAML configuration files, validates them with
the Pydantic schema and layers command-line overrides on top.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import GeneratorConfig


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Builds the single GeneratorConfig used for a run.

    Precedence is defaults, then the YAML file (if any), then explicit
    command-line values.
    """

    @staticmethod
    def load_config_data(config_path: Path) -> dict[str, object]:
        """
        Load raw configuration values from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            dict[str, object]: Top-level mapping from the file (empty for an empty file)

        Raises:
            ConfigurationError: If the file is missing, unreadable, not valid
                YAML or not a mapping
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}", path=config_path
            )

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML syntax in {config_path}: {e}", path=config_path
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file {config_path}: {e}",
                path=config_path,
            ) from e

        if raw_config_data is None:
            return {}
        if not isinstance(raw_config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
                path=config_path,
            )
        return {str(k): v for k, v in raw_config_data.items()}  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]

    @staticmethod
    def build_config(
        config_path: Path | None = None,
        overrides: Mapping[str, object] | None = None,
    ) -> GeneratorConfig:
        """
        Build and validate the configuration for a run.

        Args:
            config_path: Optional YAML file with base values
            overrides: Values given explicitly on the command line; None
                values are ignored

        Returns:
            GeneratorConfig: Validated configuration object

        Raises:
            ConfigurationError: If loading or validation fails
        """
        config_data: dict[str, object] = {}
        if config_path is not None:
            config_data.update(ConfigManager.load_config_data(config_path))
            logger.debug(f"Loaded configuration from {config_path}")

        if overrides:
            config_data.update(
                {key: value for key, value in overrides.items() if value is not None}
            )

        try:
            return GeneratorConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", path=config_path
            ) from e
