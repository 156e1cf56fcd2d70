# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""YAML configuration store for named connections and connection options.

Two files live in the pgconn config directory:

``config.yml``
    Named connection configs under a top-level ``config`` mapping::

        config:
          local:
            host: localhost
            port: 5432

``options.yml``
    Options added to every connection under a top-level ``options`` mapping::

        options:
          connect_timeout: 10
          application_name: pgconn

Both are bootstrapped from the templates shipped in ``pgconn/templates`` the
first time they are needed.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Values are never logged; only file paths and config names are
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Final

import yaml

from pgconn.errors import ConfigurationError, ModelPgConnErrorContext
from pgconn.runtime.model_pgconn_settings import ModelPgConnSettings
from pgconn.types import PathInput

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME: Final[str] = "config.yml"
OPTIONS_FILE_NAME: Final[str] = "options.yml"

CONFIG_SECTION: Final[str] = "config"
OPTIONS_SECTION: Final[str] = "options"

# Maximum config file size (1 MB)
MAX_CONFIG_SIZE_BYTES: Final[int] = 1024 * 1024

_TEMPLATES_DIR: Final[Path] = Path(__file__).parent.parent / "templates"


def _settings(settings: ModelPgConnSettings | None) -> ModelPgConnSettings:
    return settings if settings is not None else ModelPgConnSettings.from_env()


def config_dir(settings: ModelPgConnSettings | None = None) -> Path:
    """Return the directory holding the pgconn config files."""
    return _settings(settings).config_dir


def config_path(settings: ModelPgConnSettings | None = None) -> Path:
    """Return the path of the named connection config file."""
    return config_dir(settings) / CONFIG_FILE_NAME


def options_path(settings: ModelPgConnSettings | None = None) -> Path:
    """Return the path of the connection options file."""
    return config_dir(settings) / OPTIONS_FILE_NAME


def template_path(name: str) -> Path:
    """Return the path of a packaged template file (config.yml, options.yml)."""
    return _TEMPLATES_DIR / name


def init_config_files(settings: ModelPgConnSettings | None = None) -> Path:
    """Create the config directory and copy in any missing template files.

    Existing files are left untouched.

    Args:
        settings: Settings to resolve the config directory from. Defaults to
            ``ModelPgConnSettings.from_env()``.

    Returns:
        The config directory.
    """
    directory = config_dir(settings)
    directory.mkdir(parents=True, exist_ok=True)

    for name in (CONFIG_FILE_NAME, OPTIONS_FILE_NAME):
        target = directory / name
        if target.exists():
            continue
        shutil.copyfile(template_path(name), target)
        logger.info(
            "Created %s from template",
            name,
            extra={"path": str(target)},
        )

    return directory


def _read_yaml(path: Path, operation: str) -> object:
    """Read a YAML file with size and syntax checks."""
    context = ModelPgConnErrorContext.with_correlation(
        operation=operation,
        target_name=path.name,
    )

    if not path.exists():
        raise ConfigurationError(
            f"Config file not found: {path}",
            context=context,
            path=str(path),
        )

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigurationError(
            f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=context,
            path=str(path),
        )

    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {path}: {e}",
            context=context,
            path=str(path),
        ) from e


def _stringify_mapping(
    raw: object,
    *,
    label: str,
    path: Path,
    operation: str,
) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"{label} in {path} must be a mapping, got {type(raw).__name__}",
            context=ModelPgConnErrorContext.with_correlation(
                operation=operation,
                target_name=path.name,
            ),
            path=str(path),
        )
    return {str(key): str(value) for key, value in raw.items() if value is not None}


def _load_section(path: Path, section: str, operation: str) -> object:
    data = _read_yaml(path, operation)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            context=ModelPgConnErrorContext.with_correlation(
                operation=operation,
                target_name=path.name,
            ),
            path=str(path),
        )
    return data.get(section)


def load_connection_configs(
    path: PathInput | None = None,
    *,
    settings: ModelPgConnSettings | None = None,
) -> dict[str, dict[str, str]]:
    """Load the named connection configs.

    Args:
        path: Config file to read. Defaults to ``config.yml`` in the config
            directory, which is created from the template if missing.
        settings: Settings used to resolve the default path.

    Returns:
        Mapping of config name to its connection parameters, with every value
        converted to ``str``.

    Raises:
        ConfigurationError: If the file is missing (explicit path only), too
            large, not valid YAML, or not shaped as ``config: {name: {...}}``.
    """
    if path is None:
        resolved = config_path(settings)
        if not resolved.exists():
            init_config_files(settings)
    else:
        resolved = Path(path)

    section = _load_section(resolved, CONFIG_SECTION, "load_connection_configs")
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{CONFIG_SECTION}' section in {resolved} must be a mapping, "
            f"got {type(section).__name__}",
            context=ModelPgConnErrorContext.with_correlation(
                operation="load_connection_configs",
                target_name=resolved.name,
            ),
            path=str(resolved),
        )

    result: dict[str, dict[str, str]] = {
        str(name): _stringify_mapping(
            entry,
            label=f"Config '{name}'",
            path=resolved,
            operation="load_connection_configs",
        )
        for name, entry in section.items()
    }

    logger.debug(
        "Loaded connection configs",
        extra={"path": str(resolved), "configs": sorted(result)},
    )
    return result


def load_connection_options(
    path: PathInput | None = None,
    *,
    settings: ModelPgConnSettings | None = None,
) -> dict[str, str]:
    """Load the connection options applied to every connection.

    Args:
        path: Options file to read. Defaults to ``options.yml`` in the config
            directory, which is created from the template if missing.
        settings: Settings used to resolve the default path.

    Returns:
        Mapping of option name to value, with every value converted to ``str``.

    Raises:
        ConfigurationError: If the file is missing (explicit path only), too
            large, not valid YAML, or ``options`` is not a mapping.
    """
    if path is None:
        resolved = options_path(settings)
        if not resolved.exists():
            init_config_files(settings)
    else:
        resolved = Path(path)

    section = _load_section(resolved, OPTIONS_SECTION, "load_connection_options")
    options = _stringify_mapping(
        section,
        label=f"'{OPTIONS_SECTION}' section",
        path=resolved,
        operation="load_connection_options",
    )
    logger.debug(
        "Loaded connection options",
        extra={"path": str(resolved), "options": sorted(options)},
    )
    return options


def use_config(
    path: PathInput,
    *,
    overwrite: bool = False,
    settings: ModelPgConnSettings | None = None,
) -> Path:
    """Install a YAML file as the active named connection config.

    The file is parsed first, so a broken file never replaces a working one.

    Args:
        path: YAML file to install.
        overwrite: Replace an existing ``config.yml``. Defaults to False.
        settings: Settings used to resolve the config directory.

    Returns:
        Path of the active config file.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or a config
            file already exists and ``overwrite`` is False.
    """
    source = Path(path)
    context = ModelPgConnErrorContext.with_correlation(
        operation="use_config",
        target_name=CONFIG_FILE_NAME,
    )

    try:
        data = _read_yaml(source, "use_config")
    except ConfigurationError as e:
        raise ConfigurationError(
            f"Failed reading yaml at path: {source} ... with message: {e.message}",
            context=context,
            path=str(source),
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Failed reading yaml at path: {source} ... with message: "
            f"expected a mapping, got {type(data).__name__}",
            context=context,
            path=str(source),
        )

    target = config_path(settings)
    target.parent.mkdir(parents=True, exist_ok=True)

    if target.exists() and not overwrite:
        raise ConfigurationError(
            f"Failed to overwrite existing config at {target}; "
            "pass overwrite=True to replace it",
            context=context,
            path=str(target),
        )

    target.write_text(
        yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
    logger.info(
        "Installed connection config",
        extra={"source": str(source), "path": str(target)},
    )
    return target


__all__: list[str] = [
    "CONFIG_FILE_NAME",
    "OPTIONS_FILE_NAME",
    "config_dir",
    "config_path",
    "init_config_files",
    "load_connection_configs",
    "load_connection_options",
    "options_path",
    "template_path",
    "use_config",
]
