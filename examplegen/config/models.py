"""Typed dataclasses describing the example generator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_TEMPLATES,
    EXAMPLES_NAV_PREFIX,
    EXAMPLES_NAV_SECTION,
    INDEX_PAGE,
    PINNED_DIRECTORIES,
)

PACKAGED_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


@dc.dataclass(slots=True)
class LayoutConfig:
    """Filesystem locations inside the target project."""

    root_dir: Path
    examples_dir: Path
    docs_dir: Path
    workflows_dir: Path
    mkdocs_path: Path
    dependabot_path: Path

    @classmethod
    def for_root(cls, root_dir: Path) -> LayoutConfig:
        """Return the conventional layout for a project rooted at ``root_dir``."""
        return cls(
            root_dir=root_dir,
            examples_dir=root_dir / "examples",
            docs_dir=root_dir / "docs" / "examples",
            workflows_dir=root_dir / ".github" / "workflows",
            mkdocs_path=root_dir / "mkdocs.yml",
            dependabot_path=root_dir / ".github" / "dependabot.yml",
        )


@dc.dataclass(slots=True)
class NavigationConfig:
    """Where example pages live in the MkDocs navigation tree."""

    section: str = EXAMPLES_NAV_SECTION
    prefix: str = EXAMPLES_NAV_PREFIX
    index_page: str = INDEX_PAGE


@dc.dataclass(slots=True)
class UpdateDefaults:
    """Field values written into a freshly added Dependabot update entry."""

    package_ecosystem: str = "gomod"
    schedule_interval: str = "monthly"
    schedule_day: str | None = "sunday"
    open_pull_requests_limit: int = 3
    rebase_strategy: str | None = "disabled"
    pinned_directories: tuple[str, ...] = PINNED_DIRECTORIES


@dc.dataclass(slots=True)
class GeneratorConfig:
    """Everything one generation run needs besides the example itself.

    Attributes
    ----------
    layout : LayoutConfig
        Project paths receiving generated files and holding the manifests.
    templates_dir : Path
        Directory holding ``<template>.jinja`` files.
    templates : tuple[str, ...]
        Names of the templates rendered for every example.
    navigation : NavigationConfig
        MkDocs navigation section settings.
    updates : UpdateDefaults
        Dependabot entry defaults and pinned module directories.
    """

    layout: LayoutConfig
    templates_dir: Path = PACKAGED_TEMPLATES_DIR
    templates: tuple[str, ...] = DEFAULT_TEMPLATES
    navigation: NavigationConfig = dc.field(default_factory=NavigationConfig)
    updates: UpdateDefaults = dc.field(default_factory=UpdateDefaults)

    @classmethod
    def for_root(cls, root_dir: Path) -> GeneratorConfig:
        """Return the default configuration for ``root_dir``."""
        return cls(layout=LayoutConfig.for_root(root_dir))


__all__ = [
    "PACKAGED_TEMPLATES_DIR",
    "GeneratorConfig",
    "LayoutConfig",
    "NavigationConfig",
    "UpdateDefaults",
]
