"""Keep the project manifests in sync with the set of example modules."""

from .dependabot import build_update_entry, sync_example_updates, update_dependabot
from .navigation import read_latest_version, sync_examples_nav, update_mkdocs_nav

__all__ = [
    "build_update_entry",
    "read_latest_version",
    "sync_example_updates",
    "sync_examples_nav",
    "update_dependabot",
    "update_mkdocs_nav",
]
