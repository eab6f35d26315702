"""Configuration management for portafs."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from portafs.config.paths import default_config_path
from portafs.features.filesystem.domain.models import (
    DEFAULT_DIRECTORY_MODE,
    DEFAULT_REMOVE_ALL_PATH_LIMIT,
    DEFAULT_SEPARATOR,
    Backend,
    FileSystemSettings,
    PortafsError,
)
from portafs.platform.logging import logger


class ConfigError(PortafsError):
    """Raised when the configuration file cannot be read or is invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _parse_mode(value: object) -> int:
    """Accept ``493``, ``"0o755"`` or ``"755"`` and return the integer mode."""

    if isinstance(value, bool):
        raise ConfigError(f"directory_mode must be an integer or octal string; received {value!r}")
    if isinstance(value, int):
        mode = value
    elif isinstance(value, str):
        text = value.strip().lower().removeprefix("0o")
        try:
            mode = int(text, 8)
        except ValueError as e:
            raise ConfigError(f"directory_mode is not a valid octal string: {value!r}") from e
    else:
        raise ConfigError(f"directory_mode must be an integer or octal string; received {value!r}")

    if not 0 <= mode <= 0o7777:
        raise ConfigError(f"directory_mode out of range: {oct(mode)}")
    return mode


@dataclass
class Config:
    """Application configuration."""

    # Diagnostic verbosity; anything above zero reports non-fatal conditions
    verbosity: int = 0

    # Backend selection: auto, native or manual
    backend: str = Backend.AUTO.value

    # Default permission bits for new directories
    directory_mode: int = DEFAULT_DIRECTORY_MODE

    # Separator used by the manual directory walk
    separator: str = DEFAULT_SEPARATOR

    # Longest path remove_all accepts on the manual backend (0 disables)
    remove_all_path_limit: int = DEFAULT_REMOVE_ALL_PATH_LIMIT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate scalar fields."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.directory_mode = _parse_mode(self.directory_mode)

        if not isinstance(self.verbosity, int) or isinstance(self.verbosity, bool) or self.verbosity < 0:
            raise ConfigError(f"verbosity must be a non-negative integer; received {self.verbosity!r}")
        if not isinstance(self.remove_all_path_limit, int) or self.remove_all_path_limit < 0:
            raise ConfigError(
                f"remove_all_path_limit must be a non-negative integer; received {self.remove_all_path_limit!r}"
            )
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ConfigError(f"separator must be a single character; received {self.separator!r}")
        try:
            self.backend = Backend.from_user_input(self.backend).value
        except (AttributeError, ValueError) as e:
            raise ConfigError(str(e)) from e

    def to_settings(self, *, verbosity: int | None = None, backend: str | None = None) -> FileSystemSettings:
        """Build backend settings, optionally overriding verbosity or backend."""

        return FileSystemSettings(
            verbosity=self.verbosity if verbosity is None else verbosity,
            backend=Backend.from_user_input(backend or self.backend),
            directory_mode=self.directory_mode,
            separator=self.separator,
            remove_all_path_limit=self.remove_all_path_limit or None,
        )

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""

        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# portafs Configuration File")
        lines.append("")

        lines.append("# Diagnostic verbosity (0 = quiet, 1+ = report non-fatal conditions)")
        lines.append(f"verbosity = {self._format_toml_value(config['verbosity'])}")
        lines.append("")

        lines.append("# Filesystem backend: auto, native or manual")
        lines.append(f"backend = {self._format_toml_value(config['backend'])}")
        lines.append("")

        lines.append("# Permission bits for newly created directories")
        lines.append(f'directory_mode = "{oct(config["directory_mode"])}"')
        lines.append("")

        lines.append("# Path separator used by the manual backend")
        lines.append(f"separator = {self._format_toml_value(config['separator'])}")
        lines.append("")

        lines.append("# Longest path accepted by remove_all on the manual backend (0 disables)")
        lines.append(
            f"remove_all_path_limit = {self._format_toml_value(config['remove_all_path_limit'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/portafs.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is unreadable, malformed or invalid.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Cannot read configuration {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            try:
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            except ConfigError as e:
                logger.error("Invalid configuration in %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
