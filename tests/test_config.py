"""Unit tests for loading generator settings."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from examplegen.config import PACKAGED_TEMPLATES_DIR, load_generator_config
from examplegen.errors import GeneratorConfigError


def test_defaults_without_settings_file(tmp_path: Path) -> None:
    """A project without ``.examplegen.toml`` uses the conventional layout."""
    config = load_generator_config(tmp_path)
    assert config.layout.mkdocs_path == tmp_path / "mkdocs.yml"
    assert config.layout.dependabot_path == tmp_path / ".github" / "dependabot.yml"
    assert config.layout.docs_dir == tmp_path / "docs" / "examples"
    assert config.templates_dir == PACKAGED_TEMPLATES_DIR
    assert "tools.go" in config.templates
    assert config.navigation.index_page == "examples/index.md"
    assert config.updates.pinned_directories == ("/", "/modules/compose")


def test_settings_file_overrides_defaults(tmp_path: Path) -> None:
    """Values from the TOML file replace defaults; relative paths use the root."""
    (tmp_path / ".examplegen.toml").write_text(
        dedent(
            """
            templates_dir = "examples/_template"
            templates = ["example.go", "go.mod"]

            [paths]
            docs_dir = "site/examples"
            mkdocs = "/etc/mkdocs.yml"

            [navigation]
            section = "Demos"

            [dependabot]
            schedule_interval = "weekly"
            schedule_day = ""
            open_pull_requests_limit = 5
            pinned_directories = ["/"]
            """
        ),
        encoding="utf-8",
    )
    config = load_generator_config(tmp_path)

    assert config.templates_dir == tmp_path / "examples" / "_template"
    assert config.templates == ("example.go", "go.mod")
    assert config.layout.docs_dir == tmp_path / "site" / "examples"
    assert config.layout.mkdocs_path == Path("/etc/mkdocs.yml")
    assert config.layout.examples_dir == tmp_path / "examples"
    assert config.navigation.section == "Demos"
    assert config.navigation.prefix == "examples"
    assert config.updates.schedule_interval == "weekly"
    assert config.updates.schedule_day is None
    assert config.updates.open_pull_requests_limit == 5
    assert config.updates.pinned_directories == ("/",)
    assert config.updates.package_ecosystem == "gomod"


def test_templates_dir_argument_wins(tmp_path: Path) -> None:
    """An explicit templates directory overrides the settings file."""
    (tmp_path / ".examplegen.toml").write_text(
        'templates_dir = "ignored"\n', encoding="utf-8"
    )
    override = tmp_path / "custom"
    config = load_generator_config(tmp_path, templates_dir=override)
    assert config.templates_dir == override


def test_explicit_missing_settings_file(tmp_path: Path) -> None:
    """A settings path given explicitly must exist."""
    with pytest.raises(GeneratorConfigError, match="not found"):
        load_generator_config(tmp_path, settings_path=tmp_path / "nope.toml")


@pytest.mark.parametrize(
    "content",
    [
        "templates = [",
        "templates = []",
        "templates = [1, 2]",
        "paths = 3",
        "[dependabot]\nopen_pull_requests_limit = 'many'\n",
        "[navigation]\nsection = ''\n",
    ],
)
def test_invalid_settings_are_rejected(tmp_path: Path, content: str) -> None:
    """Malformed TOML or wrongly typed values raise GeneratorConfigError."""
    path = tmp_path / "settings.toml"
    path.write_text(content + "\n", encoding="utf-8")
    with pytest.raises(GeneratorConfigError):
        load_generator_config(tmp_path, settings_path=path)
