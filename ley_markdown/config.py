"""Configuration loading and management."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

CONFIG_TABLE = "ley-markdown"
PARSERS = ("html.parser", "lxml", "html5lib")
MAX_FILE_SIZE_ENV_VAR = "LEY_MARKDOWN_MAX_FILE_SIZE"

# File name and candidate tables, in lookup order within one directory
CONFIG_SOURCES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("pyproject.toml", (("tool", CONFIG_TABLE),)),
    (f".{CONFIG_TABLE}.toml", ((CONFIG_TABLE,), ("tool", CONFIG_TABLE))),
)


@dataclass
class ConverterConfig:
    """Configuration for converting legal HTML documents to Markdown.

    Attributes:
        title_tag: HTML tag carrying the document title.
        heading_tag: HTML tag carrying section, chapter and part headings.
        encoding: Source encoding handed to the HTML parser; None lets
            BeautifulSoup detect it.
        parser: BeautifulSoup tree builder (``"html.parser"``, ``"lxml"`` or
            ``"html5lib"``).
        max_file_size: Maximum input file size in bytes.
        report_skipped: Whether the CLI reports nodes that matched no rule.

    Examples:
        ConverterConfig(title_tag="h1", heading_tag="h3", encoding="iso-8859-1")
    """

    # Tag mapping
    title_tag: str = "h2"
    heading_tag: str = "h4"

    # Parsing
    encoding: str | None = None
    parser: str = "html.parser"

    # Limits
    max_file_size: int = 10 * 1024 * 1024

    # Diagnostics
    report_skipped: bool = False


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`title_tag` and `heading_tag` must differ")
    """


def load_config(search_path: Path) -> ConverterConfig:
    """Load configuration from the nearest config file.

    Starting at `search_path` and moving up to the filesystem root, each
    directory is checked for a ``[tool.ley-markdown]`` table in
    `pyproject.toml`, then for a ``[ley-markdown]`` or ``[tool.ley-markdown]``
    table in `.ley-markdown.toml`. The first table found wins, even an empty
    one. Files that cannot be read or are not valid TOML are ignored.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ConverterConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If the table found is not a mapping or names unknown settings.

    Examples:
        load_config(Path("leyes"))
    """
    start = search_path.resolve()
    for directory in (start, *start.parents):
        for filename, tables in CONFIG_SOURCES:
            config_file = directory / filename
            found = _find_table(config_file, tables)
            if found is not None:
                table_name, settings = found
                return _config_from_settings(settings, f"[{table_name}] in {config_file}")
    return ConverterConfig()


def _find_table(
    config_file: Path, tables: tuple[tuple[str, ...], ...]
) -> tuple[str, object] | None:
    try:
        document = tomllib.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return None

    for keys in tables:
        value: object = document
        for key in keys:
            value = value.get(key) if isinstance(value, dict) else None
        if value is not None:
            return ".".join(keys), value
    return None


def _config_from_settings(settings: object, origin: str) -> ConverterConfig:
    if not isinstance(settings, dict):
        raise ConfigError(f"Expected a table of settings for {origin}")

    known = {field.name for field in fields(ConverterConfig)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigError(f"Unknown settings {', '.join(unknown)} in {origin}")
    return ConverterConfig(**settings)


def environment_overrides(environ: Mapping[str, str] | None = None) -> dict[str, object]:
    """Read configuration overrides from environment variables.

    Only `LEY_MARKDOWN_MAX_FILE_SIZE` is recognized; it replaces `max_file_size`.

    Raises:
        ConfigError: If the variable is set but is not an integer.

    Examples:
        environment_overrides({"LEY_MARKDOWN_MAX_FILE_SIZE": "2048"})  # {"max_file_size": 2048}
    """
    environ = os.environ if environ is None else environ
    raw_size = environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_size is None:
        return {}
    try:
        return {"max_file_size": int(raw_size)}
    except ValueError as error:
        raise ConfigError(
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw_size!r}"
        ) from error


def validate_config(config: ConverterConfig) -> None:
    """Validate a `ConverterConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If tag names are empty or identical, the parser is
            unsupported, the encoding is not a string, or the size limit is not
            a positive integer.

    Examples:
        validate_config(ConverterConfig(heading_tag="h3"))
    """
    for key in ("title_tag", "heading_tag"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"`{key}` must be a non-empty tag name")
    if config.title_tag.lower() == config.heading_tag.lower():
        raise ConfigError("`title_tag` and `heading_tag` must differ")

    if config.parser not in PARSERS:
        raise ConfigError(f"`parser` must be one of: {', '.join(PARSERS)}")
    if config.encoding is not None and (
        not isinstance(config.encoding, str) or not config.encoding
    ):
        raise ConfigError("`encoding` must be a non-empty string")
    if not isinstance(config.report_skipped, bool):
        raise ConfigError("`report_skipped` must be a boolean")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def build_config(search_path: Path, **overrides: object) -> ConverterConfig:
    """Load, override, and validate configuration.

    Settings are layered from lowest to highest precedence: defaults, the
    nearest config file, environment variables, then `overrides`.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Values keyed by `ConverterConfig` field name; None values
            are ignored.

    Returns:
        ConverterConfig: Validated configuration.

    Raises:
        ConfigError: If loading fails, an override names an unknown setting,
            or validation fails.

    Examples:
        config = build_config(Path.cwd(), parser="lxml")
    """
    changes = environment_overrides()
    changes.update((key, value) for key, value in overrides.items() if value is not None)

    try:
        config = replace(load_config(search_path), **changes)
    except TypeError as error:
        raise ConfigError(f"Unknown setting in overrides: {error}") from error

    validate_config(config)
    return config
