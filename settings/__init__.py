"""Per-project configuration."""

from .config import CONFIG_FILENAME, DetectiveConfig, ParsingRules, load_config, parse_config

__all__ = ["CONFIG_FILENAME", "DetectiveConfig", "ParsingRules", "load_config", "parse_config"]
