"""Load generator settings from an optional TOML file into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from .._constants import SETTINGS_FILENAME
from ..errors import GeneratorConfigError
from .models import GeneratorConfig, NavigationConfig, UpdateDefaults

logger = logging.getLogger(__name__)

_PATH_KEYS = {
    "examples_dir": "examples_dir",
    "docs_dir": "docs_dir",
    "workflows_dir": "workflows_dir",
    "mkdocs": "mkdocs_path",
    "dependabot": "dependabot_path",
}


def load_generator_config(
    root_dir: Path,
    *,
    settings_path: Path | None = None,
    templates_dir: Path | None = None,
) -> GeneratorConfig:
    """Build the configuration for a project rooted at ``root_dir``.

    Parameters
    ----------
    root_dir : Path
        Root of the project receiving the new example.
    settings_path : Path, optional
        Explicit TOML settings file. When ``None`` the loader looks for
        ``.examplegen.toml`` inside ``root_dir`` and falls back to the
        built-in defaults if it is absent.
    templates_dir : Path, optional
        Template directory override; wins over the settings file.

    Returns
    -------
    GeneratorConfig
        Defaults merged with any values found in the settings file. Relative
        paths in the file are resolved against ``root_dir``.

    Raises
    ------
    GeneratorConfigError
        If an explicit ``settings_path`` does not exist, the TOML cannot be
        parsed, or a value has the wrong shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_generator_config(Path("/work/project"))  # doctest: +SKIP
    >>> config.layout.mkdocs_path  # doctest: +SKIP
    PosixPath('/work/project/mkdocs.yml')
    """
    config = GeneratorConfig.for_root(root_dir)
    path = settings_path or root_dir / SETTINGS_FILENAME
    if settings_path is None and not path.exists():
        logger.debug("no settings file at %s, using defaults", path)
    else:
        _apply_settings(config, _read_settings(path))
    if templates_dir is not None:
        config.templates_dir = templates_dir
    return config


def _read_settings(path: Path) -> dict[str, typ.Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Settings file '{path}' not found."
        raise GeneratorConfigError(msg) from exc
    try:
        document = tomlkit.parse(text)
    except ParseError as exc:
        msg = f"Unable to parse settings TOML at {path}: {exc}"
        raise GeneratorConfigError(msg) from exc
    logger.debug("loaded settings from %s", path)
    return document.unwrap()


def _apply_settings(config: GeneratorConfig, raw: dict[str, typ.Any]) -> None:
    root_dir = config.layout.root_dir

    templates_dir = raw.get("templates_dir")
    if templates_dir is not None:
        config.templates_dir = _resolve(root_dir, templates_dir, "templates_dir")
    templates = raw.get("templates")
    if templates is not None:
        config.templates = _string_tuple(templates, "templates")

    paths = _table(raw, "paths")
    for key, attribute in _PATH_KEYS.items():
        if key in paths:
            setattr(
                config.layout,
                attribute,
                _resolve(root_dir, paths[key], f"paths.{key}"),
            )

    navigation = _table(raw, "navigation")
    base_nav = config.navigation
    config.navigation = NavigationConfig(
        section=_string(navigation, "section", base_nav.section),
        prefix=_string(navigation, "prefix", base_nav.prefix),
        index_page=_string(navigation, "index_page", base_nav.index_page),
    )

    updates = _table(raw, "dependabot")
    base = config.updates
    limit = updates.get("open_pull_requests_limit", base.open_pull_requests_limit)
    if not isinstance(limit, int) or isinstance(limit, bool):
        msg = "dependabot.open_pull_requests_limit must be an integer"
        raise GeneratorConfigError(msg)
    pinned = base.pinned_directories
    if "pinned_directories" in updates:
        pinned = _string_tuple(
            updates["pinned_directories"], "dependabot.pinned_directories"
        )
    config.updates = UpdateDefaults(
        package_ecosystem=_string(updates, "package_ecosystem", base.package_ecosystem),
        schedule_interval=_string(updates, "schedule_interval", base.schedule_interval),
        schedule_day=updates.get("schedule_day", base.schedule_day) or None,
        open_pull_requests_limit=limit,
        rebase_strategy=updates.get("rebase_strategy", base.rebase_strategy) or None,
        pinned_directories=pinned,
    )


def _table(raw: dict[str, typ.Any], key: str) -> dict[str, typ.Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"[{key}] must be a table"
        raise GeneratorConfigError(msg)
    return value


def _string(table: dict[str, typ.Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str) or not value:
        msg = f"'{key}' must be a non-empty string"
        raise GeneratorConfigError(msg)
    return value


def _string_tuple(value: object, label: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(
        isinstance(item, str) and item for item in value
    ):
        msg = f"'{label}' must be a list of non-empty strings"
        raise GeneratorConfigError(msg)
    if not value:
        msg = f"'{label}' must not be empty"
        raise GeneratorConfigError(msg)
    return tuple(value)


def _resolve(root_dir: Path, value: object, label: str) -> Path:
    if not isinstance(value, str) or not value:
        msg = f"'{label}' must be a non-empty path string"
        raise GeneratorConfigError(msg)
    path = Path(value)
    return path if path.is_absolute() else root_dir / path


__all__ = ["load_generator_config"]
