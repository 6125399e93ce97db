"""Track example modules in the Dependabot configuration.

``.github/dependabot.yml`` holds one ``updates`` entry per Go module. The root
module (``/``) and the compose module (``/modules/compose``) are pinned to the
front of the list; every example entry follows, ordered by ``directory``.
Entries are passed through untouched apart from their position, so fields the
generator knows nothing about survive the rewrite.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .._constants import EXAMPLE_DIRECTORY_TEMPLATE, PINNED_DIRECTORIES
from ..config.models import UpdateDefaults
from ..errors import ManifestStructureError
from ._yaml import build_roundtrip_yaml, dump_document, load_document

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

UpdateEntry = cabc.MutableMapping[str, typ.Any]


def example_directory(example_lower: str) -> str:
    """Return the module directory Dependabot watches for an example."""
    return EXAMPLE_DIRECTORY_TEMPLATE.format(lower=example_lower)


def build_update_entry(
    example_lower: str, defaults: UpdateDefaults | None = None
) -> CommentedMap:
    """Return a new ``updates`` entry for the example module."""
    defaults = defaults or UpdateDefaults()
    schedule = CommentedMap()
    schedule["interval"] = defaults.schedule_interval
    if defaults.schedule_day:
        schedule["day"] = defaults.schedule_day

    entry = CommentedMap()
    entry["package-ecosystem"] = defaults.package_ecosystem
    entry["directory"] = example_directory(example_lower)
    entry["schedule"] = schedule
    entry["open-pull-requests-limit"] = defaults.open_pull_requests_limit
    if defaults.rebase_strategy:
        entry["rebase-strategy"] = defaults.rebase_strategy
    return entry


def entry_directory(entry: object) -> str:
    """Return the ``directory`` of an update entry, the sort key of the list."""
    if not isinstance(entry, cabc.Mapping):
        msg = f"dependabot update entry must be a mapping, got {entry!r}"
        raise ManifestStructureError(msg)
    directory = entry.get("directory")
    if not isinstance(directory, str):
        msg = f"dependabot update entry has no 'directory': {dict(entry)!r}"
        raise ManifestStructureError(msg)
    return directory


def sync_example_updates(
    current: cabc.Sequence[UpdateEntry],
    example_lower: str,
    *,
    pinned: tuple[str, ...] = PINNED_DIRECTORIES,
    new_entry: UpdateEntry | None = None,
) -> list[UpdateEntry]:
    """Return the update list with the example entry inserted in order.

    Parameters
    ----------
    current : Sequence[MutableMapping]
        Existing ``updates`` entries, pinned modules first.
    example_lower : str
        Lower-case example name.
    pinned : tuple[str, ...]
        Directories that stay at the front, in this order.
    new_entry : MutableMapping, optional
        Entry to insert; built from :class:`UpdateDefaults` when omitted.

    Returns
    -------
    list
        Pinned entries in ``pinned`` order, then the example entries sorted
        by directory. An example already tracked is not added again, and
        repeated example directories keep only their first entry.

    Raises
    ------
    ManifestStructureError
        If the list is shorter than the number of pinned modules, a pinned
        module is absent, or an entry lacks a ``directory``.
    """
    if len(current) < len(pinned):
        msg = (
            f"dependabot updates list has {len(current)} entries, "
            f"expected at least {len(pinned)} pinned modules"
        )
        raise ManifestStructureError(msg)

    pinned_entries: list[UpdateEntry] = []
    for directory in pinned:
        matches = [entry for entry in current if entry_directory(entry) == directory]
        if not matches:
            msg = f"dependabot updates list is missing the '{directory}' module"
            raise ManifestStructureError(msg)
        pinned_entries.extend(matches)

    by_directory: dict[str, UpdateEntry] = {}
    for existing in current:
        directory = entry_directory(existing)
        if directory in pinned:
            continue
        if directory in by_directory:
            logger.info("dropping duplicate dependabot entry for %s", directory)
            continue
        by_directory[directory] = existing

    entry = new_entry if new_entry is not None else build_update_entry(example_lower)
    directory = entry_directory(entry)
    if directory in by_directory:
        logger.info("dependabot already tracks %s", directory)
    else:
        by_directory[directory] = entry
    examples = sorted(by_directory.values(), key=entry_directory)
    return [*pinned_entries, *examples]


def update_dependabot(
    path: Path,
    example_lower: str,
    defaults: UpdateDefaults | None = None,
) -> list[UpdateEntry]:
    """Insert the example module into ``dependabot.yml`` and rewrite the file.

    Raises
    ------
    ManifestReadError
        If the file cannot be read or parsed.
    ManifestStructureError
        If ``updates`` is missing or violates the pinned-entry precondition;
        nothing is written.
    ManifestWriteError
        If the file cannot be replaced; the previous content is kept.
    """
    defaults = defaults or UpdateDefaults()
    yaml = build_roundtrip_yaml()
    document = load_document(path, yaml)
    updates = document.get("updates")
    if not isinstance(updates, list):
        msg = f"{path} has no 'updates' list"
        raise ManifestStructureError(msg)

    updated = sync_example_updates(
        updates,
        example_lower,
        pinned=defaults.pinned_directories,
        new_entry=build_update_entry(example_lower, defaults),
    )
    document["updates"] = CommentedSeq(updated)
    dump_document(document, path, yaml)
    logger.debug("dependabot now tracks %d modules", len(updated))
    return updated


__all__ = [
    "build_update_entry",
    "entry_directory",
    "example_directory",
    "sync_example_updates",
    "update_dependabot",
]
