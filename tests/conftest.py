"""Shared fixtures building a minimal project tree for the example generator."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

MKDOCS_YAML = dedent(
    """
    site_name: Testcontainers for Go
    # Navigation is maintained by the example generator.
    nav:
      - Home: index.md
      - Quickstart: quickstart.md
      - Features:
          - features/creating_container.md
      - Examples:
          - examples/index.md
          - examples/cockroachdb.md
          - examples/nginx.md
      - Modules:
          - modules/index.md
          - modules/compose.md
    extra:
      latest_version: v0.20.1
    """
).lstrip()

DEPENDABOT_YAML = dedent(
    """
    version: 2
    updates:
      - package-ecosystem: github-actions
        directory: /
        schedule:
          interval: monthly
      - package-ecosystem: gomod
        directory: /
        schedule:
          interval: monthly
          day: sunday
        open-pull-requests-limit: 3
        rebase-strategy: disabled
      - package-ecosystem: gomod
        directory: /modules/compose
        schedule:
          interval: monthly
          day: sunday
        open-pull-requests-limit: 3
        rebase-strategy: disabled
      - package-ecosystem: gomod
        directory: /examples/cockroachdb
        schedule:
          interval: monthly
          day: sunday
        open-pull-requests-limit: 3
        rebase-strategy: disabled
      - package-ecosystem: gomod
        directory: /examples/nginx
        schedule:
          interval: monthly
          day: sunday
        open-pull-requests-limit: 3
        rebase-strategy: disabled
        ignore:
          - dependency-name: github.com/docker/docker
    """
).lstrip()


def write_project(root: Path) -> Path:
    """Write ``mkdocs.yml`` and ``.github/dependabot.yml`` under ``root``."""
    (root / ".github").mkdir(parents=True, exist_ok=True)
    (root / "examples").mkdir(exist_ok=True)
    (root / "mkdocs.yml").write_text(MKDOCS_YAML, encoding="utf-8")
    (root / ".github" / "dependabot.yml").write_text(DEPENDABOT_YAML, encoding="utf-8")
    return root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a temporary project root holding both manifests."""
    return write_project(tmp_path / "project")
