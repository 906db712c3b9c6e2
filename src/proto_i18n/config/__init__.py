"""Configuration loading and validation for proto-i18n."""

from .manager import ConfigManager
from .schema import GeneratorConfig

__all__ = ["ConfigManager", "GeneratorConfig"]
