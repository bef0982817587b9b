"""Loading of per-project configuration from detective.toml."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

try:
    import tomllib
    TOMLDecodeError = tomllib.TOMLDecodeError
except ImportError:
    import toml as tomllib  # type: ignore
    TOMLDecodeError = tomllib.TomlDecodeError  # type: ignore

from scanner.discovery import DEFAULT_TARGETS, normalize_targets
from scanner.errors import ConfigParseError

logger = logging.getLogger(__name__)


CONFIG_FILENAME = "detective.toml"

MISSING_RULES_WARNING = "Config file found but no [rules] section defined. Using defaults."


@dataclass(frozen=True)
class ParsingRules:
    """The [rules] table of the configuration file."""

    filenames: Tuple[str, ...] = DEFAULT_TARGETS


@dataclass(frozen=True)
class DetectiveConfig:
    """
    Project configuration.

    `path` is None when no configuration file exists. `rules` is None when
    the file exists but has no [rules] table.
    """

    path: Optional[Path] = None
    rules: Optional[ParsingRules] = None

    def target_filenames(self, override: Optional[str] = None) -> Tuple[str, ...]:
        """
        Select the filenames that mark source files.

        A command-line override replaces the configured set entirely.
        Otherwise the configured filenames apply, falling back to the
        built-in default. Falling back because the file lacks a [rules]
        table logs a warning.
        """
        if override:
            return (override,)

        if self.rules is not None:
            return normalize_targets(self.rules.filenames)

        if self.path is not None:
            logger.warning(MISSING_RULES_WARNING)
        return DEFAULT_TARGETS


def load_config(root: Path) -> DetectiveConfig:
    """
    Load the configuration file from a project root.

    Args:
        root: Project root directory.

    Returns:
        DetectiveConfig; the default config if the file does not exist.

    Raises:
        ConfigParseError: If the file cannot be read, is not valid TOML, or
                          does not match the expected schema.
    """
    config_path = root / CONFIG_FILENAME

    try:
        exists = config_path.exists()
    except OSError as e:
        raise ConfigParseError(config_path, str(e)) from e

    if not exists:
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, root)
        return DetectiveConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(config_path, str(e)) from e

    return parse_config(content, config_path)


def parse_config(content: str, config_path: Path) -> DetectiveConfig:
    """
    Parse configuration text.

    Args:
        content: TOML text.
        config_path: Where the text came from, for error messages.

    Returns:
        DetectiveConfig with `path` set to config_path.

    Raises:
        ConfigParseError: If the text is not valid TOML or the [rules]
                          table is malformed.
    """
    try:
        data = tomllib.loads(content)
    except TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    rules = data.get("rules")
    if rules is None:
        return DetectiveConfig(path=config_path)

    if not isinstance(rules, dict):
        raise ConfigParseError(config_path, "'rules' must be a table")

    filenames = rules.get("filenames")
    if filenames is None:
        raise ConfigParseError(config_path, "missing field 'filenames' in [rules]")

    if not isinstance(filenames, list) or not all(isinstance(name, str) for name in filenames):
        raise ConfigParseError(config_path, "'rules.filenames' must be a list of strings")

    return DetectiveConfig(path=config_path, rules=ParsingRules(tuple(filenames)))
