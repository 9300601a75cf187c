"""Configuration management for pathedit."""

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from pathedit.config.aliases import DEFAULT_ALIASES, AliasValidationError, VariableAliases
from pathedit.config.file_ops import write_text_file
from pathedit.config.paths import default_config_path, default_log_file
from pathedit.platform.logging import logger

DELIMITER_DEFAULT = ":"

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed or validated."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Separator between path components
    delimiter: str = DELIMITER_DEFAULT

    # Raise instead of ignoring out-of-range indices on remove
    strict_indices: bool = False

    # Log file path; file logging is disabled when unset
    log_file: Path | None = _path_field()

    # Short variable name -> real variable name
    aliases: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate scalar settings."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if self.log_file is not None and not isinstance(self.log_file, Path):
            raise ConfigError("log_file must be a path string")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigError(f"delimiter must be a single character, got {self.delimiter!r}")
        if not isinstance(self.strict_indices, bool):
            raise ConfigError("strict_indices must be true or false")

    @property
    def variable_aliases(self) -> VariableAliases:
        """Alias table built from the ``[aliases]`` section."""
        try:
            return VariableAliases(self.aliases)
        except AliasValidationError as e:
            raise ConfigError(str(e)) from e

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Returns:
            Path: The file that was written.
        """
        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.debug("Configuration saved to %s", target)
        return target

    def _render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathedit configuration file")
        lines.append("")

        lines.append("# Separator between path components (single character)")
        lines.append(f"delimiter = {self._format_toml_value(self.delimiter)}")
        lines.append("")

        lines.append("# Set to true to make `remove N` fail when N is out of range")
        lines.append(f"strict_indices = {self._format_toml_value(self.strict_indices)}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append(f'# Example: log_file = "{default_log_file()}"')
        if self.log_file is not None:
            lines.append(f"log_file = {self._format_toml_value(self.log_file)}")
        lines.append("")

        lines.append("# Short names accepted in place of VARNAME")
        lines.append("[aliases]")
        for name, target in self.aliases.items():
            lines.append(f"{self._format_toml_key(name)} = {self._format_toml_value(target)}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_key(self, key: str) -> str:
        """Quote a table key unless it is a bare TOML key."""
        if _BARE_KEY.fullmatch(key):
            return key
        return self._format_toml_value(key)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one if missing.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = path or default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            config = cls()
            try:
                _ = config.save(config_file)
                logger.info("Created default configuration at %s", config_file)
            except OSError as e:
                logger.warning("Using built-in defaults; could not write %s: %s", config_file, e)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{config_file}: {e}") from e

        known = {"delimiter", "strict_indices", "log_file", "aliases"}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        aliases = config_dict.get("aliases", dict(DEFAULT_ALIASES))
        if not isinstance(aliases, dict):
            raise ConfigError("[aliases] must be a table of name = \"VARIABLE\" entries")

        instance = cls(
            delimiter=config_dict.get("delimiter", DELIMITER_DEFAULT),
            strict_indices=config_dict.get("strict_indices", False),
            log_file=config_dict.get("log_file"),
            aliases=aliases,
        )
        # Surface alias problems at load time rather than on first lookup.
        _ = instance.variable_aliases

        logger.debug("Configuration loaded from %s", config_file)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config", "ConfigError", "DELIMITER_DEFAULT"]
